"""Stepwise unit conversion over byte scales.

Conversion walks the scale one step at a time and truncates toward zero after
each step, so 1500 byte -> kilobyte -> byte gives 1000, not 1500.
"""
from __future__ import annotations
import copy
import logging
from abc import ABC, abstractmethod
from typing import Callable

from squash.common.exceptions import UnknownUnitError
from squash.common.schema import Unit

LOGGER = logging.getLogger("squash.conversion")

BYTE = "byte"
KILOBYTE = "kilobyte"
MEGABYTE = "megabyte"
GIGABYTE = "gigabyte"
TERABYTE = "terabyte"
PETABYTE = "petabyte"

DECIMAL_SCALE = (BYTE, KILOBYTE, MEGABYTE, GIGABYTE, TERABYTE, PETABYTE)
# Binary scale starts at kibibyte, named "kilobyte" here.
BINARY_SCALE = DECIMAL_SCALE[1:]


def _truncate(value: int | float) -> int:
    return int(value)


def _divide(value: int | float, base: int) -> int:
    if isinstance(value, int):
        quotient = abs(value) // base
        return quotient if value >= 0 else -quotient
    return int(value / base)


class Converter(ABC):
    """Base converter; subclasses supply the scale and the per-step mutators."""

    scale: tuple[str, ...] = DECIMAL_SCALE

    def __init__(self) -> None:
        self._from: Unit | None = None
        self._to: str | None = None

    @abstractmethod
    def positive_mutator(self) -> Callable[[int | float], int]:
        """Multiply by the base once; used when moving to a smaller unit."""

    @abstractmethod
    def negative_mutator(self) -> Callable[[int | float], int]:
        """Divide by the base once, truncating toward zero."""

    def source(self, unit: Unit) -> "Converter":
        converter = copy.copy(self)
        converter._from = unit
        return converter

    def target(self, unit: str) -> "Converter":
        converter = copy.copy(self)
        converter._to = unit
        return converter

    def _index(self, unit: str) -> int:
        try:
            return self.scale.index(unit)
        except ValueError:
            raise UnknownUnitError(f"Unknown conversion unit: {unit!r}") from None

    def convert(self) -> Unit:
        if self._from is None or self._to is None:
            raise ValueError("source() and target() must be set before convert()")
        value = self._from.value
        # Moving to a larger unit divides the value; to a smaller one multiplies it.
        distance = self._index(self._from.unit) - self._index(self._to)
        if distance > 0:
            step = self.positive_mutator()
        elif distance < 0:
            step = self.negative_mutator()
        else:
            return Unit(value, self._to)
        for _ in range(abs(distance)):
            value = step(value)
        LOGGER.debug("Converted %s %s -> %s %s", self._from.value, self._from.unit, value, self._to)
        return Unit(value, self._to)

    def convert_value(self, value: int | float, from_unit: str, to_unit: str) -> Unit:
        return self.source(Unit(value, from_unit)).target(to_unit).convert()


class ByteConverter(Converter):
    """Decimal scale, factor 1000 per step."""

    base = 1000

    def positive_mutator(self) -> Callable[[int | float], int]:
        return lambda value: _truncate(value * self.base)

    def negative_mutator(self) -> Callable[[int | float], int]:
        return lambda value: _divide(value, self.base)


class BiByteConverter(ByteConverter):
    """Binary scale, factor 1024 per step, no plain byte unit."""

    base = 1024
    scale = BINARY_SCALE
