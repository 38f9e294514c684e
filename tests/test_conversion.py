from __future__ import annotations

import pytest

from squash.common.exceptions import UnknownUnitError
from squash.common.schema import Unit
from squash.conversion.converter import DECIMAL_SCALE, BiByteConverter, ByteConverter


def test_byte_to_kilobyte_truncates() -> None:
    assert ByteConverter().convert_value(1, "byte", "kilobyte") == Unit(0, "kilobyte")


def test_kilobyte_to_byte() -> None:
    assert ByteConverter().convert_value(1, "kilobyte", "byte") == Unit(1000, "byte")


def test_multi_step_truncates_each_step() -> None:
    # 1_999_999 B -> 1999 kB -> 1 MB
    assert ByteConverter().convert_value(1_999_999, "byte", "megabyte").value == 1
    assert ByteConverter().convert_value(2, "petabyte", "byte").value == 2 * 1000**5


def test_same_unit_is_identity() -> None:
    assert ByteConverter().convert_value(42, "gigabyte", "gigabyte") == Unit(42, "gigabyte")


def test_binary_scale() -> None:
    conv = BiByteConverter()
    assert conv.convert_value(1, "gigabyte", "kilobyte").value == 1024 * 1024
    assert conv.convert_value(1023, "kilobyte", "megabyte").value == 0
    assert conv.convert_value(2048, "megabyte", "gigabyte").value == 2


@pytest.mark.parametrize("source,target", [("byte", "kilobyte"), ("kilobyte", "byte")])
def test_binary_scale_rejects_byte(source: str, target: str) -> None:
    with pytest.raises(UnknownUnitError):
        BiByteConverter().convert_value(1, source, target)


def test_unknown_unit() -> None:
    with pytest.raises(UnknownUnitError):
        ByteConverter().convert_value(1, "nibble", "byte")


def test_fluent_builder_does_not_mutate() -> None:
    base = ByteConverter()
    step = base.source(Unit(5, "megabyte"))
    assert step is not base
    assert step.target("kilobyte").convert() == Unit(5000, "kilobyte")
    with pytest.raises(ValueError):
        base.convert()


def test_up_then_down_is_lossless() -> None:
    conv = ByteConverter()
    for i, small in enumerate(DECIMAL_SCALE):
        for large in DECIMAL_SCALE[i:]:
            up = conv.convert_value(7, large, small)
            assert conv.convert_value(up.value, small, large).value == 7


def test_negative_values_truncate_toward_zero() -> None:
    assert ByteConverter().convert_value(-1500, "byte", "kilobyte").value == -1
