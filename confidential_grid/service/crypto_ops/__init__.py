"""
Crypto Operations Service - Oblivious predicates over encrypted scalars

Structure:
- encrypted_value.py: EncryptedScalar (ciphertext + reader set)
- predicates.py: ObliviousOps (typed combinators, Facade over a backend)
- mock_backend.py: plaintext-in-handle backend for tests and local play
- binfhe_backend.py: OpenFHE FHEW/TFHE boolean-circuit backend
- encryption_service.py / decryption_service.py: external collaborators
- registry.py: handle -> ciphertext lookup
"""

from .encrypted_value import (
    EncryptedScalar,
    EBOOL,
    EUINT8,
    EUINT64,
    KIND_BITS,
)
from .predicates import ObliviousOps
from .mock_backend import MockBackend, MockCiphertext
from .backends import create_backend
from .registry import CiphertextRegistry
from .encryption_service import EncryptionService
from .decryption_service import DecryptionService

__all__ = [
    'EncryptedScalar',
    'EBOOL',
    'EUINT8',
    'EUINT64',
    'KIND_BITS',
    'ObliviousOps',
    'MockBackend',
    'MockCiphertext',
    'create_backend',
    'CiphertextRegistry',
    'EncryptionService',
    'DecryptionService',
]
