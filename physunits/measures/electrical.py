"""Электрические величины: напряжение (В), ток (А), сопротивление (Ом)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.types import Measure


@dataclass(frozen=True, slots=True, eq=False)
class Voltage(Measure):
    UNIT: ClassVar[str] = "V"

    @classmethod
    def from_millivolts(cls, value: float) -> "Voltage":
        return cls.from_unit(value, u.MILLIVOLT)

    @classmethod
    def from_kilovolts(cls, value: float) -> "Voltage":
        return cls.from_unit(value, u.KILOVOLT)

    @property
    def volts(self) -> float:
        return self.base_value

    @property
    def millivolts(self) -> float:
        return self.to(u.MILLIVOLT)

    @property
    def kilovolts(self) -> float:
        return self.to(u.KILOVOLT)


@dataclass(frozen=True, slots=True, eq=False)
class Current(Measure):
    UNIT: ClassVar[str] = "A"

    @classmethod
    def from_milliamperes(cls, value: float) -> "Current":
        return cls.from_unit(value, u.MILLIAMPERE)

    @property
    def amperes(self) -> float:
        return self.base_value

    @property
    def milliamperes(self) -> float:
        return self.to(u.MILLIAMPERE)


@dataclass(frozen=True, slots=True, eq=False)
class Resistance(Measure):
    UNIT: ClassVar[str] = "ohm"

    @classmethod
    def from_kiloohms(cls, value: float) -> "Resistance":
        return cls.from_unit(value, u.KILOOHM)

    @classmethod
    def from_megaohms(cls, value: float) -> "Resistance":
        return cls.from_unit(value, u.MEGAOHM)

    @property
    def ohms(self) -> float:
        return self.base_value

    @property
    def kiloohms(self) -> float:
        return self.to(u.KILOOHM)
