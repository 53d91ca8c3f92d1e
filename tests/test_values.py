"""Tests for kvs_core.values."""

import pytest

from kvs_core.values import (
    INT32_MAX,
    INT32_MIN,
    VBool,
    VInteger,
    VList,
    VMap,
    VSet,
    VText,
    sort_key,
)


class TestScalars:
    def test_integer_bounds(self):
        assert VInteger(INT32_MAX).value == 2147483647
        assert VInteger(INT32_MIN).value == -2147483648

    def test_integer_overflow(self):
        with pytest.raises(ValueError):
            VInteger(INT32_MAX + 1)

    def test_integer_rejects_bool(self):
        with pytest.raises(TypeError):
            VInteger(True)

    def test_text_rejects_int(self):
        with pytest.raises(TypeError):
            VText(5)

    def test_bool_rejects_int(self):
        with pytest.raises(TypeError):
            VBool(1)

    def test_different_variants_not_equal(self):
        assert VInteger(1) != VBool(True)
        assert VText("1") != VInteger(1)


class TestMap:
    def test_keys_sorted(self):
        m = VMap({"b": VInteger(2), "a": VInteger(1), "C": VInteger(3)})
        assert list(m) == ["C", "a", "b"]

    def test_getitem_and_len(self):
        m = VMap({"x": VText("y")})
        assert m["x"] == VText("y")
        assert len(m) == 1

    def test_equality_ignores_construction_order(self):
        assert VMap({"a": VInteger(1), "b": VInteger(2)}) == VMap({"b": VInteger(2), "a": VInteger(1)})

    def test_rejects_non_text_key(self):
        with pytest.raises(TypeError):
            VMap({1: VInteger(1)})

    def test_rejects_native_value(self):
        with pytest.raises(TypeError):
            VMap({"a": 1})


class TestList:
    def test_keeps_order_and_duplicates(self):
        lst = VList([VInteger(2), VInteger(1), VInteger(2)])
        assert lst.items == [VInteger(2), VInteger(1), VInteger(2)]
        assert len(lst) == 3

    def test_rejects_native_item(self):
        with pytest.raises(TypeError):
            VList(["a"])


class TestSet:
    def test_deduplicates(self):
        s = VSet([VInteger(1), VInteger(1), VInteger(2)])
        assert len(s) == 2

    def test_order_normalised(self):
        s = VSet([VBool(True), VInteger(3), VText("z"), VInteger(1)])
        assert s.items == [VText("z"), VInteger(1), VInteger(3), VBool(True)]

    def test_structural_dedup_of_aggregates(self):
        s = VSet([VList([VInteger(1)]), VList([VInteger(1)]), VList([VInteger(2)])])
        assert len(s) == 2

    def test_membership(self):
        s = VSet([VText("a"), VInteger(1)])
        assert VText("a") in s
        assert VText("b") not in s

    def test_equality_ignores_insertion_order(self):
        assert VSet([VInteger(2), VInteger(1)]) == VSet([VInteger(1), VInteger(2), VInteger(1)])

    def test_rejects_native_item(self):
        with pytest.raises(TypeError):
            VSet([1])


class TestOrder:
    def test_variant_precedence(self):
        ordered = [
            VText("zzz"),
            VInteger(-5),
            VBool(False),
            VMap({}),
            VList([]),
            VSet([]),
        ]
        assert sorted(reversed(ordered)) == ordered

    def test_natural_order_within_variant(self):
        assert VText("a") < VText("b")
        assert VInteger(-1) < VInteger(0)
        assert VBool(False) < VBool(True)

    def test_list_elementwise(self):
        assert VList([VInteger(1)]) < VList([VInteger(1), VInteger(0)])
        assert VList([VInteger(2)]) > VList([VInteger(1), VInteger(9)])

    def test_map_keywise(self):
        assert VMap({"a": VInteger(1)}) < VMap({"b": VInteger(0)})
        assert VMap({"a": VInteger(1)}) < VMap({"a": VInteger(2)})

    def test_sort_key_deterministic(self):
        v = VMap({"x": VList([VSet([VBool(True), VBool(False)])])})
        assert sort_key(v) == sort_key(v)

    def test_sort_key_rejects_non_value(self):
        with pytest.raises(TypeError):
            sort_key(42)

    def test_compare_with_native_unsupported(self):
        with pytest.raises(TypeError):
            VInteger(1) < 2
