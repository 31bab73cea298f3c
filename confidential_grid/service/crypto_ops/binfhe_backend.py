from typing import List

from openfhe import *

from .context import create_binfhe_context
from .key_generation import binfhe_keygen

# ============================================================================
# BinFHE Backend (Boolean circuits over encrypted bits)
# ============================================================================
#
# An encrypted integer is a list of LWE ciphertexts, least significant bit
# first. Every circuit below evaluates the same gates in the same order for
# any input, so neither control flow nor gate count depends on secret data.


class BinFHEBackend:
    """Predicate primitives evaluated with OpenFHE boolean gates"""

    name = "binfhe"

    def __init__(self, cc, secret_key):
        self.cc = cc
        self.secret_key = secret_key

    @classmethod
    def create(cls, paramset: str = "TOY") -> "BinFHEBackend":
        """Build a context and generate keys (key management lives here)"""
        cc = create_binfhe_context(paramset)
        secret_key = binfhe_keygen(cc)
        return cls(cc, secret_key)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encrypt(self, value: int, bits: int) -> List:
        return [self.cc.Encrypt(self.secret_key, (value >> i) & 1) for i in range(bits)]

    def decrypt(self, ct: List, bits: int) -> int:
        value = 0
        for i, bit in enumerate(ct[:bits]):
            value |= (self.cc.Decrypt(self.secret_key, bit) & 1) << i
        return value

    # ------------------------------------------------------------------
    # Gates
    # ------------------------------------------------------------------

    def _and(self, x, y):
        return self.cc.EvalBinGate(AND, x, y)

    def _or(self, x, y):
        return self.cc.EvalBinGate(OR, x, y)

    def _xor(self, x, y):
        return self.cc.EvalBinGate(XOR, x, y)

    def _xnor(self, x, y):
        return self.cc.EvalBinGate(XNOR, x, y)

    def _not(self, x):
        return self.cc.EvalNOT(x)

    def _borrow_chain(self, a: List, b: List):
        """
        Ripple-borrow subtractor for a - b.

        Returns:
            (difference bits, final borrow); final borrow is 1 iff a < b
        """
        diff = [self._xor(a[0], b[0])]
        borrow = self._and(self._not(a[0]), b[0])
        for a_i, b_i in zip(a[1:], b[1:]):
            x = self._xor(a_i, b_i)
            diff.append(self._xor(x, borrow))
            borrow = self._or(
                self._and(self._not(a_i), b_i),
                self._and(self._not(x), borrow),
            )
        return diff, borrow

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def eq(self, a: List, b: List, bits: int) -> List:
        """AND-reduction of per-bit XNOR"""
        result = self._xnor(a[0], b[0])
        for a_i, b_i in zip(a[1:bits], b[1:bits]):
            result = self._and(result, self._xnor(a_i, b_i))
        return [result]

    def ge(self, a: List, b: List, bits: int) -> List:
        _, borrow = self._borrow_chain(a[:bits], b[:bits])
        return [self._not(borrow)]

    def and_(self, a: List, b: List) -> List:
        return [self._and(a[0], b[0])]

    def or_(self, a: List, b: List) -> List:
        return [self._or(a[0], b[0])]

    def not_(self, a: List) -> List:
        return [self._not(a[0])]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def select(self, cond: List, a: List, b: List, bits: int) -> List:
        """Per-bit multiplexer: (c AND a_i) OR (NOT c AND b_i)"""
        c = cond[0]
        not_c = self._not(c)
        return [
            self._or(self._and(c, a_i), self._and(not_c, b_i))
            for a_i, b_i in zip(a[:bits], b[:bits])
        ]

    def sub(self, a: List, b: List, bits: int) -> List:
        """Wrapping subtraction modulo 2^bits"""
        diff, _ = self._borrow_chain(a[:bits], b[:bits])
        return diff
