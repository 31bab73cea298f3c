"""
Game Logger - Records public game events to file

Only plaintext metadata is logged (identity, position). Ciphertexts, building
types, balances and status codes never reach the log.
"""
import os
import threading
from datetime import datetime
from typing import List, Tuple, Optional

from confidential_grid.config import LOG_CONFIG


class GameLogger:
    """Notification sink for "player joined" and "building placed" events"""

    def __init__(self, log_dir: Optional[str] = None, log_file: Optional[str] = None):
        self.log_dir = log_dir or LOG_CONFIG["log_dir"]
        self.log_file = os.path.join(self.log_dir, log_file or LOG_CONFIG["log_file"])
        self.events: List[Tuple] = []
        self._lock = threading.Lock()

        os.makedirs(self.log_dir, exist_ok=True)

        with open(self.log_file, 'w', encoding='utf-8') as f:
            f.write("=== Confidential Grid Event Log ===\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 50 + "\n\n")

    def log(self, message: str):
        """Write a log message with timestamp"""
        timestamp = datetime.now().strftime('%H:%M:%S')
        with self._lock:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"[{timestamp}] {message}\n")

    def player_joined(self, identity: str):
        self.events.append(("PlayerJoined", identity))
        self.log(f"PlayerJoined player={identity}")

    def building_placed(self, identity: str, position: int):
        self.events.append(("BuildingPlaced", identity, position))
        self.log(f"BuildingPlaced player={identity} position={position}")
