"""
Configuration for the Confidential Grid service
"""
from typing import Dict, Any, Optional
import os
from pathlib import Path


def _read_env_file(name: str) -> Optional[str]:
    """
    Look up a setting in the root .env file.
    Supports both `KEY=value` and `KEY: value` lines.
    """
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if not env_path.exists():
        return None

    try:
        with env_path.open("r", encoding="utf-8") as env_file:
            for raw_line in env_file:
                line = raw_line.strip()
                if not line or line.startswith("#"):
                    continue

                if "=" in line and (":" not in line or line.index("=") < line.index(":")):
                    key, val = line.split("=", 1)
                elif ":" in line:
                    key, val = line.split(":", 1)
                else:
                    continue

                if key.strip() == name:
                    return val.strip().strip('"').strip("'")
    except OSError:
        return None

    return None


def _load_setting(name: str, default: Any) -> Any:
    """
    Load CONFIDENTIAL_GRID_<NAME> from the environment or the root .env file,
    coerced to the type of `default`.
    """
    key = f"CONFIDENTIAL_GRID_{name.upper()}"
    value = os.getenv(key)
    if value is None:
        value = _read_env_file(key)
    if value is None:
        return default

    value = value.strip()
    if isinstance(default, bool):
        return value.lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(value)
    if isinstance(default, float):
        return float(value)
    return value


# Game Configuration
GAME_CONFIG: Dict[str, Any] = {
    "starting_gold": 10_000,
    "grid_size": 9,

    # Building type code -> cost in gold
    "building_costs": {1: 100, 2: 200, 3: 400, 4: 1000},
}


# Network Configuration
NETWORK_CONFIG: Dict[str, Any] = {
    "host": _load_setting("host", "127.0.0.1"),
    "port": _load_setting("port", 9000),
    "connection_timeout": _load_setting("connection_timeout", 10.0),
}
NETWORK_CONFIG["server_address"] = _load_setting(
    "server_address", f"http://{NETWORK_CONFIG['host']}:{NETWORK_CONFIG['port']}"
)


# Cryptography Configuration
CRYPTO_CONFIG: Dict[str, Any] = {
    # "mock" keeps plaintext inside opaque handles, "binfhe" runs real FHEW gates
    "backend": _load_setting("backend", "mock"),
    "binfhe_paramset": _load_setting("binfhe_paramset", "TOY"),

    # Identity under which the store itself holds decryption rights
    "store_identity": _load_setting("store_identity", "confidential-grid"),
}


# Logging Configuration
LOG_CONFIG: Dict[str, Any] = {
    "log_dir": _load_setting("log_dir", "logs"),
    "log_file": "game.log",
    "verbose": _load_setting("verbose", False),
}
