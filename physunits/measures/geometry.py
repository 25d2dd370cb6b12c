"""Геометрические величины: длина, площадь, объём, угол.

Канонические единицы:
- Длина: м
- Площадь: м²
- Объём: л (НЕ м³ - так исторически принято в этой библиотеке)
- Угол: градусы
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.types import Measure


@dataclass(frozen=True, slots=True, eq=False)
class Length(Measure):
    UNIT: ClassVar[str] = "m"

    @classmethod
    def from_kilometers(cls, value: float) -> "Length":
        return cls.from_unit(value, u.KILOMETER)

    @classmethod
    def from_centimeters(cls, value: float) -> "Length":
        return cls.from_unit(value, u.CENTIMETER)

    @classmethod
    def from_millimeters(cls, value: float) -> "Length":
        return cls.from_unit(value, u.MILLIMETER)

    @classmethod
    def from_feet(cls, value: float) -> "Length":
        return cls.from_unit(value, u.FOOT)

    @classmethod
    def from_miles(cls, value: float) -> "Length":
        return cls.from_unit(value, u.MILE)

    @property
    def meters(self) -> float:
        return self.base_value

    @property
    def kilometers(self) -> float:
        return self.to(u.KILOMETER)

    @property
    def millimeters(self) -> float:
        return self.to(u.MILLIMETER)

    @property
    def feet(self) -> float:
        return self.to(u.FOOT)

    @property
    def miles(self) -> float:
        return self.to(u.MILE)


@dataclass(frozen=True, slots=True, eq=False)
class Area(Measure):
    UNIT: ClassVar[str] = "m^2"

    @classmethod
    def from_hectares(cls, value: float) -> "Area":
        return cls.from_unit(value, u.HECTARE)

    @classmethod
    def from_square_centimeters(cls, value: float) -> "Area":
        return cls.from_unit(value, u.SQUARE_CENTIMETER)

    @property
    def square_meters(self) -> float:
        return self.base_value

    @property
    def hectares(self) -> float:
        return self.to(u.HECTARE)

    @property
    def acres(self) -> float:
        return self.to(u.ACRE)


@dataclass(frozen=True, slots=True, eq=False)
class Volume(Measure):
    """Объём в литрах.

    Перевод в м³ (деление на 1000) выполняется только в формулах
    physunits.physics.dimensional, в хранимое значение он не попадает.
    """

    UNIT: ClassVar[str] = "L"

    @classmethod
    def from_cubic_meters(cls, value: float) -> "Volume":
        return cls.from_unit(value, u.CUBIC_METER)

    @classmethod
    def from_milliliters(cls, value: float) -> "Volume":
        return cls.from_unit(value, u.MILLILITRE)

    @classmethod
    def from_gallons_us(cls, value: float) -> "Volume":
        return cls.from_unit(value, u.GALLON_US)

    @property
    def litres(self) -> float:
        return self.base_value

    @property
    def cubic_meters(self) -> float:
        return self.to(u.CUBIC_METER)

    @property
    def milliliters(self) -> float:
        return self.to(u.MILLILITRE)

    @property
    def gallons_us(self) -> float:
        return self.to(u.GALLON_US)


@dataclass(frozen=True, slots=True, eq=False)
class Angle(Measure):
    UNIT: ClassVar[str] = "deg"

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls.from_unit(value, u.RADIAN)

    @property
    def degrees(self) -> float:
        return self.base_value

    @property
    def radians(self) -> float:
        return self.to(u.RADIAN)

    @property
    def grads(self) -> float:
        return self.to(u.GRAD)
