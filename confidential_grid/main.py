"""
Game Engine - Wires the crypto backend, rule engine and state store together
"""
import threading
from typing import Optional

import uvicorn

from confidential_grid.config import CRYPTO_CONFIG, NETWORK_CONFIG, LOG_CONFIG
from confidential_grid.game_logger import GameLogger
from confidential_grid.service.crypto_ops import (
    CiphertextRegistry,
    DecryptionService,
    EncryptionService,
    ObliviousOps,
    create_backend,
)
from confidential_grid.service.store import PlayerStateStore


class GameEngine:
    """Owns one backend and everything built on top of it"""

    def __init__(
        self,
        backend=None,
        backend_name: Optional[str] = None,
        log_dir: Optional[str] = None,
        http_port: Optional[int] = None,
    ):
        self.backend = backend or create_backend(backend_name or CRYPTO_CONFIG["backend"])
        self.ops = ObliviousOps(self.backend)
        self.registry = CiphertextRegistry()
        self.logger = GameLogger(log_dir or LOG_CONFIG["log_dir"])

        self.store = PlayerStateStore(self.ops, self.logger, self.registry)
        self.encryption = EncryptionService(self.backend, self.registry)
        self.decryption = DecryptionService(self.backend, self.registry)

        # HTTP server
        self.http_host = NETWORK_CONFIG["host"]
        self.http_port = http_port or NETWORK_CONFIG["port"]
        self.http_server_thread = None

    def _serve(self):
        from confidential_grid.http_server import app, initialize_server

        initialize_server(self.store, self.encryption, self.decryption)
        uvicorn.run(app, host=self.http_host, port=self.http_port, log_level="warning")

    def start_http_server(self, background: bool = True):
        """Serve the HTTP surface, in a daemon thread unless told otherwise"""
        print(f"[Engine] HTTP server at http://{self.http_host}:{self.http_port} "
              f"(backend={self.backend.name})")
        if not background:
            self._serve()
            return

        self.http_server_thread = threading.Thread(target=self._serve, daemon=True)
        self.http_server_thread.start()
