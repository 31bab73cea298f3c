"""
Encryption Service - Produces encrypted inputs scoped to one identity
"""
from .encrypted_value import EncryptedScalar, EUINT8, KIND_BITS
from .registry import CiphertextRegistry


class EncryptionService:
    """Encrypts plaintext inputs on behalf of a user"""

    def __init__(self, backend, registry: CiphertextRegistry = None):
        self.backend = backend
        self.registry = registry

    def encrypt_input(self, identity: str, value: int, kind: str = EUINT8) -> EncryptedScalar:
        """
        Encrypt `value` so that only `identity` may submit it.

        Args:
            identity: Caller the input is bound to
            value: Plaintext value
            kind: Ciphertext kind (building types are euint8)

        Returns:
            EncryptedScalar readable by `identity` only, marked as an input
        """
        ct = EncryptedScalar(
            kind, self.backend.encrypt(value, KIND_BITS[kind]), is_input=True
        )
        ct = ct.allow(identity)
        if self.registry is not None:
            self.registry.register(ct)
        return ct
