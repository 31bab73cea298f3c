"""
Backend selection
"""
from confidential_grid.config import CRYPTO_CONFIG

from .mock_backend import MockBackend


def create_backend(name: str = None, paramset: str = None):
    """
    Create the predicate backend named in CRYPTO_CONFIG (or `name`).

    The BinFHE backend is imported on demand so the mock backend works
    without the `fhe` extra installed.
    """
    name = name or CRYPTO_CONFIG["backend"]

    if name == "mock":
        return MockBackend()

    if name == "binfhe":
        from .binfhe_backend import BinFHEBackend

        paramset = paramset or CRYPTO_CONFIG["binfhe_paramset"]
        print(f"[Crypto] Generating BinFHE keys ({paramset})...")
        backend = BinFHEBackend.create(paramset)
        print("[Crypto] ✓ Bootstrapping keys ready")
        return backend

    raise ValueError(f"Unknown crypto backend: {name}")
