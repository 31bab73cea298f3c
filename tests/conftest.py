"""Shared fixtures: a mock-backed store plus its crypto collaborators."""

import pytest

from confidential_grid.game_logger import GameLogger
from confidential_grid.service.crypto_ops import (
    CiphertextRegistry,
    DecryptionService,
    EncryptionService,
    MockBackend,
    ObliviousOps,
)
from confidential_grid.service.store import PlayerStateStore

ALICE = "0xA11CE"
BOB = "0xB0B"
STORE_IDENTITY = "grid-store"


@pytest.fixture
def backend():
    return MockBackend()


@pytest.fixture
def ops(backend):
    return ObliviousOps(backend)


@pytest.fixture
def registry():
    return CiphertextRegistry()


@pytest.fixture
def logger(tmp_path):
    return GameLogger(log_dir=str(tmp_path / "logs"))


@pytest.fixture
def store(ops, logger, registry):
    return PlayerStateStore(ops, logger, registry, store_identity=STORE_IDENTITY)


@pytest.fixture
def encryption(backend, registry):
    return EncryptionService(backend, registry)


@pytest.fixture
def decryption(backend, registry):
    return DecryptionService(backend, registry)


@pytest.fixture
def reveal(backend):
    """Test-only peek at a ciphertext's plaintext"""
    def _reveal(value):
        return backend.decrypt(value.payload, value.bits)
    return _reveal
