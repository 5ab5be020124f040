"""Unit tests for the ValueKind runtime type tag."""

from collections import OrderedDict

import pytest

from contract_kernel.domain.value_kind import ValueKind, type_label


class _Plain:
    pass


class TestValueKindOf:
    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (0, ValueKind.INT),
            (1.5, ValueKind.FLOAT),
            ("s", ValueKind.STRING),
            (b"b", ValueKind.BYTES),
            ([1], ValueKind.SEQUENCE),
            ((1,), ValueKind.SEQUENCE),
            ({"a": 1}, ValueKind.MAPPING),
            (OrderedDict(a=1), ValueKind.MAPPING),
            ({1}, ValueKind.SET),
            (frozenset(), ValueKind.SET),
            (len, ValueKind.FUNCTION),
            (lambda: None, ValueKind.FUNCTION),
            (int, ValueKind.TYPE),
            (_Plain(), ValueKind.OBJECT),
        ],
    )
    def test_classification(self, value, kind):
        assert ValueKind.of(value) is kind

    def test_bool_is_not_int(self):
        """bool subclasses int; the tag must still say BOOL."""
        assert ValueKind.of(False) is ValueKind.BOOL


class TestIsObject:
    @pytest.mark.parametrize("value", ["text", [], {}, set(), _Plain(), int])
    def test_objects(self, value):
        assert ValueKind.of(value).is_object

    @pytest.mark.parametrize("value", [None, True, 3, 2.0, len])
    def test_non_objects(self, value):
        assert not ValueKind.of(value).is_object


class TestTypeLabel:
    def test_single_type(self):
        assert type_label(int) == "int"

    def test_tuple_of_types(self):
        assert type_label((int, str)) == "int | str"
