"""
Decryption Service - User decryption gated on the reader set
"""
from confidential_grid.errors import DecryptionDeniedError

from .encrypted_value import EncryptedScalar
from .registry import CiphertextRegistry


class DecryptionService:
    """Returns plaintext only to identities allowed on the ciphertext"""

    def __init__(self, backend, registry: CiphertextRegistry = None):
        self.backend = backend
        self.registry = registry

    def user_decrypt(self, value: EncryptedScalar, identity: str) -> int:
        """
        Decrypt `value` for `identity`.

        Raises:
            DecryptionDeniedError: identity is not in the value's reader set
        """
        if not value.is_readable_by(identity):
            raise DecryptionDeniedError(identity, value.handle)
        return self.backend.decrypt(value.payload, value.bits)

    def user_decrypt_handle(self, handle: str, identity: str) -> int:
        """Resolve a handle through the registry, then decrypt it"""
        if self.registry is None:
            raise RuntimeError("Decryption by handle needs a registry")
        return self.user_decrypt(self.registry.resolve(handle), identity)
