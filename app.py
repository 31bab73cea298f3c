"""
Main Application - Starts the Confidential Grid HTTP server
"""
import sys

from confidential_grid.config import CRYPTO_CONFIG
from confidential_grid.main import GameEngine


# ============================================================================
# Entry Point
# ============================================================================

def run_server():
    """Run the server in the foreground with the configured backend"""
    backend_name = sys.argv[1] if len(sys.argv) > 1 else CRYPTO_CONFIG["backend"]
    engine = GameEngine(backend_name=backend_name)
    engine.start_http_server(background=False)


if __name__ == "__main__":
    run_server()
