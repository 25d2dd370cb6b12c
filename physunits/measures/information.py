"""Информационные величины: объём данных (байт) и скорость передачи (бит/с).

Десятичные (KB = 1000) и двоичные (KiB = 1024) приставки различаются.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from physunits.core import units as u
from physunits.core.types import Measure


@dataclass(frozen=True, slots=True, eq=False)
class DataSize(Measure):
    UNIT: ClassVar[str] = "B"

    @classmethod
    def from_bits(cls, value: float) -> "DataSize":
        return cls.from_unit(value, u.BIT)

    @classmethod
    def from_megabytes(cls, value: float) -> "DataSize":
        return cls.from_unit(value, u.MEGABYTE)

    @classmethod
    def from_mebibytes(cls, value: float) -> "DataSize":
        return cls.from_unit(value, u.MEBIBYTE)

    @classmethod
    def from_gigabytes(cls, value: float) -> "DataSize":
        return cls.from_unit(value, u.GIGABYTE)

    @property
    def byte_count(self) -> float:
        return self.base_value

    @property
    def bits(self) -> float:
        return self.to(u.BIT)

    @property
    def megabytes(self) -> float:
        return self.to(u.MEGABYTE)

    @property
    def mebibytes(self) -> float:
        return self.to(u.MEBIBYTE)

    @property
    def gibibytes(self) -> float:
        return self.to(u.GIBIBYTE)


@dataclass(frozen=True, slots=True, eq=False)
class DataRate(Measure):
    UNIT: ClassVar[str] = "bit/s"

    @classmethod
    def from_megabits_per_second(cls, value: float) -> "DataRate":
        return cls.from_unit(value, u.MEGABIT_PER_SECOND)

    @classmethod
    def from_megabytes_per_second(cls, value: float) -> "DataRate":
        return cls.from_unit(value, u.MEGABYTE_PER_SECOND)

    @property
    def bits_per_second(self) -> float:
        return self.base_value

    @property
    def megabits_per_second(self) -> float:
        return self.to(u.MEGABIT_PER_SECOND)

    @property
    def megabytes_per_second(self) -> float:
        return self.to(u.MEGABYTE_PER_SECOND)
