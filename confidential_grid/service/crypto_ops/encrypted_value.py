"""
Encrypted Value - Opaque ciphertext plus its access-control annotation
"""
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet

# ============================================================================
# Kinds
# ============================================================================

EBOOL = "ebool"
EUINT8 = "euint8"
EUINT64 = "euint64"

KIND_BITS = {
    EBOOL: 1,
    EUINT8: 8,
    EUINT64: 64,
}


def _new_handle() -> str:
    return "0x" + uuid.uuid4().hex


@dataclass(frozen=True)
class EncryptedScalar:
    """
    A ciphertext and the set of identities allowed to decrypt it.

    The payload is backend specific and never inspected outside the backend.
    Readers are only ever changed through `allow`, which returns a new value
    sharing the same payload and handle. `is_input` marks values issued by
    the encryption service; only those may be submitted as placement inputs.
    """
    kind: str
    payload: Any = field(repr=False, compare=False)
    handle: str = field(default_factory=_new_handle)
    readers: FrozenSet[str] = frozenset()
    is_input: bool = False

    @property
    def bits(self) -> int:
        return KIND_BITS[self.kind]

    def allow(self, *identities: str) -> "EncryptedScalar":
        """Grant decryption rights to the given identities"""
        return replace(self, readers=self.readers | frozenset(identities))

    def is_readable_by(self, identity: str) -> bool:
        return identity in self.readers
