"""
Mock Backend - Plaintext-in-handle stand-in for an FHE coprocessor

Mirrors the "mock mode" of FHE development networks: ciphertexts carry the
clear value inside an opaque object so tests run fast, while every primitive
is still computed without branching on that value. Each call is appended to
`trace` so callers can check that evaluation cost does not depend on data.
"""
from typing import List


class MockCiphertext:
    """Opaque wrapper; repr never shows the value"""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        self._value = value

    def __repr__(self) -> str:
        return "MockCiphertext(<hidden>)"


class MockBackend:
    """Predicate primitives over MockCiphertext payloads"""

    name = "mock"

    def __init__(self):
        self.trace: List[str] = []

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encrypt(self, value: int, bits: int) -> MockCiphertext:
        self.trace.append(f"encrypt{bits}")
        return MockCiphertext(value % (1 << bits))

    def decrypt(self, ct: MockCiphertext, bits: int) -> int:
        return ct._value

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def eq(self, a: MockCiphertext, b: MockCiphertext, bits: int) -> MockCiphertext:
        self.trace.append(f"eq{bits}")
        return MockCiphertext(int(a._value == b._value))

    def ge(self, a: MockCiphertext, b: MockCiphertext, bits: int) -> MockCiphertext:
        self.trace.append(f"ge{bits}")
        return MockCiphertext(int(a._value >= b._value))

    def and_(self, a: MockCiphertext, b: MockCiphertext) -> MockCiphertext:
        self.trace.append("and")
        return MockCiphertext(a._value & b._value)

    def or_(self, a: MockCiphertext, b: MockCiphertext) -> MockCiphertext:
        self.trace.append("or")
        return MockCiphertext(a._value | b._value)

    def not_(self, a: MockCiphertext) -> MockCiphertext:
        self.trace.append("not")
        return MockCiphertext(1 - a._value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def select(self, cond: MockCiphertext, a: MockCiphertext, b: MockCiphertext,
               bits: int) -> MockCiphertext:
        """cond * a + (1 - cond) * b"""
        self.trace.append(f"select{bits}")
        c = cond._value
        return MockCiphertext(c * a._value + (1 - c) * b._value)

    def sub(self, a: MockCiphertext, b: MockCiphertext, bits: int) -> MockCiphertext:
        """Wrapping subtraction modulo 2^bits"""
        self.trace.append(f"sub{bits}")
        return MockCiphertext((a._value - b._value) % (1 << bits))
