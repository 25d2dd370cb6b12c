"""Величины движения: время, скорость, ускорение, частота, расход топлива.

Единицы:
- Время: с
- Скорость: м/с
- Ускорение: м/с²
- Частота: Гц
- Расход топлива: км/л (экономичность, больше = лучше)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.numeric import ieee_divide
from physunits.core.types import Measure
from physunits.core.validation import as_base_value


@dataclass(frozen=True, slots=True, eq=False)
class Time(Measure):
    UNIT: ClassVar[str] = "s"

    @classmethod
    def from_milliseconds(cls, value: float) -> "Time":
        return cls.from_unit(value, u.MILLISECOND)

    @classmethod
    def from_minutes(cls, value: float) -> "Time":
        return cls.from_unit(value, u.MINUTE)

    @classmethod
    def from_hours(cls, value: float) -> "Time":
        return cls.from_unit(value, u.HOUR)

    @classmethod
    def from_days(cls, value: float) -> "Time":
        return cls.from_unit(value, u.DAY)

    @property
    def seconds(self) -> float:
        return self.base_value

    @property
    def milliseconds(self) -> float:
        return self.to(u.MILLISECOND)

    @property
    def minutes(self) -> float:
        return self.to(u.MINUTE)

    @property
    def hours(self) -> float:
        return self.to(u.HOUR)

    @property
    def days(self) -> float:
        return self.to(u.DAY)


@dataclass(frozen=True, slots=True, eq=False)
class Speed(Measure):
    UNIT: ClassVar[str] = "m/s"

    @classmethod
    def from_kilometers_per_hour(cls, value: float) -> "Speed":
        return cls.from_unit(value, u.KILOMETER_PER_HOUR)

    @classmethod
    def from_miles_per_hour(cls, value: float) -> "Speed":
        return cls.from_unit(value, u.MILE_PER_HOUR)

    @classmethod
    def from_knots(cls, value: float) -> "Speed":
        return cls.from_unit(value, u.KNOT)

    @property
    def meters_per_second(self) -> float:
        return self.base_value

    @property
    def kilometers_per_hour(self) -> float:
        return self.to(u.KILOMETER_PER_HOUR)

    @property
    def miles_per_hour(self) -> float:
        return self.to(u.MILE_PER_HOUR)

    @property
    def knots(self) -> float:
        return self.to(u.KNOT)


@dataclass(frozen=True, slots=True, eq=False)
class Acceleration(Measure):
    UNIT: ClassVar[str] = "m/s^2"

    @classmethod
    def from_standard_gravities(cls, value: float) -> "Acceleration":
        return cls.from_unit(value, u.STANDARD_GRAVITY)

    @property
    def meters_per_second_squared(self) -> float:
        return self.base_value

    @property
    def standard_gravities(self) -> float:
        return self.to(u.STANDARD_GRAVITY)


@dataclass(frozen=True, slots=True, eq=False)
class Frequency(Measure):
    UNIT: ClassVar[str] = "Hz"

    @classmethod
    def from_kilohertz(cls, value: float) -> "Frequency":
        return cls.from_unit(value, u.KILOHERTZ)

    @classmethod
    def from_megahertz(cls, value: float) -> "Frequency":
        return cls.from_unit(value, u.MEGAHERTZ)

    @classmethod
    def from_rpm(cls, value: float) -> "Frequency":
        return cls.from_unit(value, u.RPM)

    @property
    def hertz(self) -> float:
        return self.base_value

    @property
    def kilohertz(self) -> float:
        return self.to(u.KILOHERTZ)

    @property
    def rpm(self) -> float:
        return self.to(u.RPM)


@dataclass(frozen=True, slots=True, eq=False)
class FuelEconomy(Measure):
    """Топливная экономичность (км/л).

    Л/100 км - обратная шкала: 100 / (км/л). При нулевом значении
    получаем inf, а не исключение.
    """

    UNIT: ClassVar[str] = "km/L"

    @classmethod
    def from_litres_per_100km(cls, value: float) -> "FuelEconomy":
        return cls(ieee_divide(100.0, as_base_value(value, cls.__name__)))

    @classmethod
    def from_mpg_us(cls, value: float) -> "FuelEconomy":
        return cls.from_unit(value, u.MILE_PER_GALLON_US)

    @classmethod
    def from_mpg_uk(cls, value: float) -> "FuelEconomy":
        return cls.from_unit(value, u.MILE_PER_GALLON_UK)

    @property
    def kilometers_per_litre(self) -> float:
        return self.base_value

    @property
    def litres_per_100km(self) -> float:
        return ieee_divide(100.0, self.base_value)

    @property
    def mpg_us(self) -> float:
        return self.to(u.MILE_PER_GALLON_US)

    @property
    def mpg_uk(self) -> float:
        return self.to(u.MILE_PER_GALLON_UK)
