"""Механические и энергетические величины.

Единицы:
- Масса: г (граммы! перевод в кг - только внутри формул)
- Плотность: кг/м³
- Сила: Н
- Момент: Н·м
- Давление: Па
- Энергия: Дж
- Мощность: Вт
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.types import Measure


@dataclass(frozen=True, slots=True, eq=False)
class Mass(Measure):
    UNIT: ClassVar[str] = "g"

    @classmethod
    def from_kilograms(cls, value: float) -> "Mass":
        return cls.from_unit(value, u.KILOGRAM)

    @classmethod
    def from_metric_tons(cls, value: float) -> "Mass":
        return cls.from_unit(value, u.METRIC_TON)

    @classmethod
    def from_pounds(cls, value: float) -> "Mass":
        return cls.from_unit(value, u.POUND)

    @property
    def grams(self) -> float:
        return self.base_value

    @property
    def kilograms(self) -> float:
        return self.to(u.KILOGRAM)

    @property
    def pounds(self) -> float:
        return self.to(u.POUND)


@dataclass(frozen=True, slots=True, eq=False)
class Density(Measure):
    UNIT: ClassVar[str] = "kg/m^3"

    @classmethod
    def from_grams_per_cubic_centimeter(cls, value: float) -> "Density":
        return cls.from_unit(value, u.GRAM_PER_CUBIC_CENTIMETER)

    @property
    def kilograms_per_cubic_meter(self) -> float:
        return self.base_value

    @property
    def grams_per_cubic_centimeter(self) -> float:
        return self.to(u.GRAM_PER_CUBIC_CENTIMETER)


@dataclass(frozen=True, slots=True, eq=False)
class Force(Measure):
    UNIT: ClassVar[str] = "N"

    @classmethod
    def from_kilonewtons(cls, value: float) -> "Force":
        return cls.from_unit(value, u.KILONEWTON)

    @classmethod
    def from_kilograms_force(cls, value: float) -> "Force":
        return cls.from_unit(value, u.KILOGRAM_FORCE)

    @classmethod
    def from_pounds_force(cls, value: float) -> "Force":
        return cls.from_unit(value, u.POUND_FORCE)

    @property
    def newtons(self) -> float:
        return self.base_value

    @property
    def kilonewtons(self) -> float:
        return self.to(u.KILONEWTON)

    @property
    def pounds_force(self) -> float:
        return self.to(u.POUND_FORCE)


@dataclass(frozen=True, slots=True, eq=False)
class Torque(Measure):
    UNIT: ClassVar[str] = "N*m"

    @classmethod
    def from_pound_feet(cls, value: float) -> "Torque":
        return cls.from_unit(value, u.POUND_FOOT)

    @property
    def newton_meters(self) -> float:
        return self.base_value

    @property
    def pound_feet(self) -> float:
        return self.to(u.POUND_FOOT)


@dataclass(frozen=True, slots=True, eq=False)
class Pressure(Measure):
    UNIT: ClassVar[str] = "Pa"

    @classmethod
    def from_bar(cls, value: float) -> "Pressure":
        return cls.from_unit(value, u.BAR)

    @classmethod
    def from_atmospheres(cls, value: float) -> "Pressure":
        return cls.from_unit(value, u.ATMOSPHERE)

    @classmethod
    def from_psi(cls, value: float) -> "Pressure":
        return cls.from_unit(value, u.PSI)

    @property
    def pascals(self) -> float:
        return self.base_value

    @property
    def bar(self) -> float:
        return self.to(u.BAR)

    @property
    def atmospheres(self) -> float:
        return self.to(u.ATMOSPHERE)

    @property
    def psi(self) -> float:
        return self.to(u.PSI)

    @property
    def torr(self) -> float:
        return self.to(u.TORR)


@dataclass(frozen=True, slots=True, eq=False)
class Energy(Measure):
    UNIT: ClassVar[str] = "J"

    @classmethod
    def from_kilojoules(cls, value: float) -> "Energy":
        return cls.from_unit(value, u.KILOJOULE)

    @classmethod
    def from_kilowatt_hours(cls, value: float) -> "Energy":
        return cls.from_unit(value, u.KILOWATT_HOUR)

    @classmethod
    def from_kilocalories(cls, value: float) -> "Energy":
        return cls.from_unit(value, u.KILOCALORIE)

    @classmethod
    def from_electron_volts(cls, value: float) -> "Energy":
        return cls.from_unit(value, u.ELECTRON_VOLT)

    @property
    def joules(self) -> float:
        return self.base_value

    @property
    def kilojoules(self) -> float:
        return self.to(u.KILOJOULE)

    @property
    def kilowatt_hours(self) -> float:
        return self.to(u.KILOWATT_HOUR)

    @property
    def kilocalories(self) -> float:
        return self.to(u.KILOCALORIE)

    @property
    def electron_volts(self) -> float:
        return self.to(u.ELECTRON_VOLT)


@dataclass(frozen=True, slots=True, eq=False)
class Power(Measure):
    UNIT: ClassVar[str] = "W"

    @classmethod
    def from_kilowatts(cls, value: float) -> "Power":
        return cls.from_unit(value, u.KILOWATT)

    @classmethod
    def from_horsepower(cls, value: float) -> "Power":
        return cls.from_unit(value, u.HORSEPOWER)

    @property
    def watts(self) -> float:
        return self.base_value

    @property
    def kilowatts(self) -> float:
        return self.to(u.KILOWATT)

    @property
    def horsepower(self) -> float:
        return self.to(u.HORSEPOWER)
