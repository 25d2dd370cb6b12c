"""physunits.core.types

Базовый тип физической величины.

Каждая величина - неизменяемая обёртка над одним `float`, выраженным
в канонической единице своего типа (м, с, г, ...). Пересчёт в другие единицы
делается только на входе (`from_unit`) и на выходе (`to`); хранимое значение
всегда каноническое.

Сравнение (==, <, ...) - только по каноническому значению и только между
экземплярами одного типа. NaN-величина не равна ничему, в том числе себе
(как float). Смешивание разных величин в арифметике -> TypeError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, TypeVar

from physunits.config import DEFAULT_TOLERANCE
from physunits.core.numeric import ieee_divide
from physunits.core.validation import as_base_value, ensure_real, is_raw_number

M = TypeVar("M", bound="Measure")


@dataclass(frozen=True, slots=True, eq=False)
class Measure:
    """Величина в канонической единице.

    Атрибуты:
        base_value: значение в канонической единице (см. UNIT).
        UNIT: обозначение канонической единицы (только для справки).
    """

    base_value: float

    UNIT: ClassVar[str] = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_value", as_base_value(self.base_value, type(self).__name__))

    @classmethod
    def from_base_value(cls: type[M], base_value: float) -> M:
        return cls(base_value)

    @classmethod
    def from_unit(cls: type[M], value: float, factor: float) -> M:
        """Создать величину из значения в единице с множителем `factor`.

        factor - сколько канонических единиц в одной единице значения
        (см. physunits.core.units).
        """

        v = as_base_value(value, cls.__name__)
        return cls(v * float(factor))

    def to(self, factor: float) -> float:
        """Значение в единице с множителем `factor`."""

        return ieee_divide(self.base_value, factor)

    def _require_same(self, other: object, op: str) -> None:
        if type(other) is not type(self):
            raise TypeError(f"cannot {op} {type(other).__name__} and {type(self).__name__}")

    def add(self: M, other: M) -> M:
        self._require_same(other, "add")
        return type(self)(self.base_value + other.base_value)

    def subtract(self: M, other: M) -> M:
        self._require_same(other, "subtract")
        return type(self)(self.base_value - other.base_value)

    def multiply(self: M, scalar: float) -> M:
        return type(self)(self.base_value * ensure_real(scalar, "scalar"))

    def divide(self: M, scalar: float) -> M:
        return type(self)(ieee_divide(self.base_value, ensure_real(scalar, "scalar")))

    def divide_by(self: M, other: M) -> float:
        """Безразмерное отношение двух величин одного типа."""

        self._require_same(other, "divide")
        return ieee_divide(self.base_value, other.base_value)

    def isclose(
        self: M,
        other: M,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
    ) -> bool:
        self._require_same(other, "compare")
        return math.isclose(
            self.base_value,
            other.base_value,
            rel_tol=DEFAULT_TOLERANCE.rel_tol if rel_tol is None else rel_tol,
            abs_tol=DEFAULT_TOLERANCE.abs_tol if abs_tol is None else abs_tol,
        )

    # Сравнение по base_value: NaN не равен себе даже в одном и том же объекте.

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.base_value == other.base_value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.base_value))

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.base_value < other.base_value

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.base_value <= other.base_value

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.base_value > other.base_value

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.base_value >= other.base_value

    # Операторы: для чужих типов возвращаем NotImplemented -> TypeError от Python.

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not is_raw_number(scalar):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if type(other) is type(self):
            return self.divide_by(other)
        if is_raw_number(other):
            return self.divide(other)
        return NotImplemented

    def __neg__(self: M) -> M:
        return type(self)(-self.base_value)

    def __abs__(self: M) -> M:
        return type(self)(abs(self.base_value))
