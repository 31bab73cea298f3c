"""
Oblivious Predicates - Typed combinators over EncryptedScalar values

Every method runs the same backend primitives for any secret input. Kinds are
plaintext metadata: a mismatch is a programming error and raises TypeError
before anything is evaluated.
"""
from typing import List

from .encrypted_value import EncryptedScalar, EBOOL, EUINT8, EUINT64, KIND_BITS


class ObliviousOps:
    """Facade over a predicate backend (mock or BinFHE)"""

    def __init__(self, backend):
        self.backend = backend

    # ========================================================================
    # Encoding
    # ========================================================================

    def encrypt(self, value: int, kind: str) -> EncryptedScalar:
        """Encode a plaintext constant as a ciphertext of `kind`"""
        return EncryptedScalar(kind, self.backend.encrypt(value, KIND_BITS[kind]))

    def as_ebool(self, value: bool) -> EncryptedScalar:
        return self.encrypt(int(bool(value)), EBOOL)

    def as_euint8(self, value: int) -> EncryptedScalar:
        return self.encrypt(value, EUINT8)

    def as_euint64(self, value: int) -> EncryptedScalar:
        return self.encrypt(value, EUINT64)

    # ========================================================================
    # Predicates
    # ========================================================================

    def eq(self, a: EncryptedScalar, b: EncryptedScalar) -> EncryptedScalar:
        _same_kind(a, b)
        return EncryptedScalar(EBOOL, self.backend.eq(a.payload, b.payload, a.bits))

    def ge(self, a: EncryptedScalar, b: EncryptedScalar) -> EncryptedScalar:
        """a >= b, unsigned"""
        _same_kind(a, b)
        return EncryptedScalar(EBOOL, self.backend.ge(a.payload, b.payload, a.bits))

    def and_(self, a: EncryptedScalar, b: EncryptedScalar) -> EncryptedScalar:
        _require_bool(a, b)
        return EncryptedScalar(EBOOL, self.backend.and_(a.payload, b.payload))

    def or_(self, a: EncryptedScalar, b: EncryptedScalar) -> EncryptedScalar:
        _require_bool(a, b)
        return EncryptedScalar(EBOOL, self.backend.or_(a.payload, b.payload))

    def not_(self, a: EncryptedScalar) -> EncryptedScalar:
        _require_bool(a)
        return EncryptedScalar(EBOOL, self.backend.not_(a.payload))

    def any_of(self, conditions: List[EncryptedScalar]) -> EncryptedScalar:
        """OR of all conditions, folded left to right"""
        if not conditions:
            raise ValueError("Cannot fold an empty condition list")
        result = conditions[0]
        for cond in conditions[1:]:
            result = self.or_(result, cond)
        return result

    def all_of(self, conditions: List[EncryptedScalar]) -> EncryptedScalar:
        """AND of all conditions, folded left to right"""
        if not conditions:
            raise ValueError("Cannot fold an empty condition list")
        result = conditions[0]
        for cond in conditions[1:]:
            result = self.and_(result, cond)
        return result

    # ========================================================================
    # Arithmetic
    # ========================================================================

    def select(self, cond: EncryptedScalar, a: EncryptedScalar,
               b: EncryptedScalar) -> EncryptedScalar:
        """`a` if cond else `b`, without revealing which"""
        _require_bool(cond)
        _same_kind(a, b)
        return EncryptedScalar(
            a.kind, self.backend.select(cond.payload, a.payload, b.payload, a.bits)
        )

    def sub(self, a: EncryptedScalar, b: EncryptedScalar) -> EncryptedScalar:
        """a - b, wrapping at the kind's width"""
        _same_kind(a, b)
        return EncryptedScalar(a.kind, self.backend.sub(a.payload, b.payload, a.bits))


def _same_kind(a: EncryptedScalar, b: EncryptedScalar):
    if a.kind != b.kind:
        raise TypeError(f"Kind mismatch: {a.kind} vs {b.kind}")


def _require_bool(*values: EncryptedScalar):
    for value in values:
        if value.kind != EBOOL:
            raise TypeError(f"Expected {EBOOL}, got {value.kind}")


__all__ = ["ObliviousOps", "EBOOL", "EUINT8", "EUINT64"]
