"""
Ciphertext Registry - Resolves public handles to stored ciphertexts
"""
import threading
from typing import Dict

from confidential_grid.errors import UnknownHandleError

from .encrypted_value import EncryptedScalar


class CiphertextRegistry:
    """Thread-safe handle -> EncryptedScalar map"""

    def __init__(self):
        self._values: Dict[str, EncryptedScalar] = {}
        self._lock = threading.Lock()

    def register(self, value: EncryptedScalar) -> EncryptedScalar:
        """Store (or refresh the reader set of) a value under its handle"""
        with self._lock:
            self._values[value.handle] = value
        return value

    def resolve(self, handle: str) -> EncryptedScalar:
        with self._lock:
            value = self._values.get(handle)
        if value is None:
            raise UnknownHandleError(handle)
        return value

    def __contains__(self, handle: str) -> bool:
        with self._lock:
            return handle in self._values

    def discard(self, handle: str):
        """Forget a handle; unknown handles are ignored"""
        with self._lock:
            self._values.pop(handle, None)
