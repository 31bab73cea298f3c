"""Tests for ObliviousOps over the mock backend."""

import pytest

from confidential_grid.service.crypto_ops import (
    EBOOL,
    EUINT8,
    MockBackend,
    ObliviousOps,
)


class TestEncryptedScalar:
    """Tests for the reader-set wrapper."""

    def test_allow_returns_new_value_with_same_handle(self, ops):
        value = ops.as_euint8(3)
        granted = value.allow("alice")
        assert granted.handle == value.handle
        assert granted.is_readable_by("alice")
        assert not value.is_readable_by("alice")

    def test_allow_accumulates_readers(self, ops):
        value = ops.as_euint8(3).allow("alice").allow("store", "bob")
        assert value.readers == frozenset({"alice", "store", "bob"})

    def test_fresh_values_get_distinct_handles(self, ops):
        assert ops.as_euint8(1).handle != ops.as_euint8(1).handle

    def test_repr_hides_payload(self, ops):
        assert "7" not in repr(ops.as_euint8(7).payload)

    def test_bits_follow_kind(self, ops):
        assert ops.as_ebool(True).bits == 1
        assert ops.as_euint8(0).bits == 8
        assert ops.as_euint64(0).bits == 64


class TestPredicates:
    """Tests for equality, comparison and boolean combinators."""

    @pytest.mark.parametrize("a,b,expected", [(2, 2, 1), (2, 3, 0), (0, 255, 0)])
    def test_eq(self, ops, reveal, a, b, expected):
        result = ops.eq(ops.as_euint8(a), ops.as_euint8(b))
        assert result.kind == EBOOL
        assert reveal(result) == expected

    @pytest.mark.parametrize("a,b,expected", [(200, 100, 1), (100, 100, 1), (99, 100, 0)])
    def test_ge(self, ops, reveal, a, b, expected):
        assert reveal(ops.ge(ops.as_euint64(a), ops.as_euint64(b))) == expected

    def test_boolean_combinators(self, ops, reveal):
        t, f = ops.as_ebool(True), ops.as_ebool(False)
        assert reveal(ops.and_(t, f)) == 0
        assert reveal(ops.and_(t, t)) == 1
        assert reveal(ops.or_(f, t)) == 1
        assert reveal(ops.or_(f, f)) == 0
        assert reveal(ops.not_(f)) == 1

    def test_any_of_and_all_of(self, ops, reveal):
        conds = [ops.as_ebool(False), ops.as_ebool(True), ops.as_ebool(False)]
        assert reveal(ops.any_of(conds)) == 1
        assert reveal(ops.all_of(conds)) == 0

    def test_fold_of_empty_list_raises(self, ops):
        with pytest.raises(ValueError):
            ops.any_of([])


class TestArithmetic:
    """Tests for select and wrapping subtraction."""

    def test_select_picks_first_when_true(self, ops, reveal):
        result = ops.select(ops.as_ebool(True), ops.as_euint8(4), ops.as_euint8(9))
        assert result.kind == EUINT8
        assert reveal(result) == 4

    def test_select_picks_second_when_false(self, ops, reveal):
        result = ops.select(ops.as_ebool(False), ops.as_euint8(4), ops.as_euint8(9))
        assert reveal(result) == 9

    def test_sub(self, ops, reveal):
        assert reveal(ops.sub(ops.as_euint64(10_000), ops.as_euint64(200))) == 9_800

    def test_sub_wraps_at_width(self, ops, reveal):
        assert reveal(ops.sub(ops.as_euint8(0), ops.as_euint8(1))) == 255


class TestKindChecks:
    """Kind mismatches are programming errors."""

    def test_eq_rejects_mixed_kinds(self, ops):
        with pytest.raises(TypeError):
            ops.eq(ops.as_euint8(1), ops.as_euint64(1))

    def test_select_requires_bool_condition(self, ops):
        with pytest.raises(TypeError):
            ops.select(ops.as_euint8(1), ops.as_euint8(1), ops.as_euint8(2))

    def test_and_requires_bools(self, ops):
        with pytest.raises(TypeError):
            ops.and_(ops.as_euint8(1), ops.as_ebool(True))


class TestMockTrace:
    """The mock backend records every primitive it runs."""

    def test_trace_records_calls(self):
        backend = MockBackend()
        ops = ObliviousOps(backend)
        ops.eq(ops.as_euint8(1), ops.as_euint8(2))
        assert backend.trace == ["encrypt8", "encrypt8", "eq8"]
