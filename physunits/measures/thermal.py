"""Температура (каноническая единица: К).

В отличие от остальных величин, шкалы Цельсия и Фаренгейта отличаются
от Кельвина не только множителем, но и смещением:
    K = C + 273.15
    K = (F + 459.67) * 5/9
Поэтому здесь нет `from_unit`-фабрик для шкал, только явные методы.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.numeric import ieee_divide
from physunits.core.types import Measure
from physunits.core.validation import as_base_value


@dataclass(frozen=True, slots=True, eq=False)
class Temperature(Measure):
    UNIT: ClassVar[str] = "K"

    @classmethod
    def from_kelvin(cls, value: float) -> "Temperature":
        return cls(value)

    @classmethod
    def from_celsius(cls, value: float) -> "Temperature":
        return cls(as_base_value(value, cls.__name__) + u.CELSIUS_OFFSET)

    @classmethod
    def from_fahrenheit(cls, value: float) -> "Temperature":
        return cls((as_base_value(value, cls.__name__) + u.FAHRENHEIT_OFFSET) * u.FAHRENHEIT_RATIO)

    @property
    def kelvin(self) -> float:
        return self.base_value

    @property
    def celsius(self) -> float:
        return self.base_value - u.CELSIUS_OFFSET

    @property
    def fahrenheit(self) -> float:
        return ieee_divide(self.base_value, u.FAHRENHEIT_RATIO) - u.FAHRENHEIT_OFFSET
