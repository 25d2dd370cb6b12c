"""Физические и математические константы.

Значения - по переопределению SI 2019 г. (CODATA 2018).
Где у константы есть свой тип величины, она задана типизированно
(например, SPEED_OF_LIGHT: Speed); иначе - просто float в СИ.

Массы - в граммах (каноническая единица Mass).
"""

from __future__ import annotations

import math

from physunits.core import units as u
from physunits.measures import (
    Acceleration,
    Density,
    Energy,
    Frequency,
    Length,
    Mass,
    Pressure,
    Speed,
    Temperature,
    Time,
)

# Universal
SPEED_OF_LIGHT = Speed(299_792_458.0)
GRAVITATIONAL_CONSTANT: float = 6.67430e-11  # N*m^2/kg^2
PLANCK_CONSTANT: float = 6.62607015e-34  # J*s
REDUCED_PLANCK_CONSTANT: float = 1.054571817e-34  # J*s

# Electromagnetic
ELEMENTARY_CHARGE: float = 1.602176634e-19  # C
MAGNETIC_CONSTANT: float = 1.25663706212e-6  # H/m
ELECTRIC_CONSTANT: float = 8.8541878128e-12  # F/m

# Atomic & quantum
AVOGADRO_CONSTANT: float = 6.02214076e23  # 1/mol
BOLTZMANN_CONSTANT: float = 1.380649e-23  # J/K
ELECTRON_MASS = Mass.from_kilograms(9.1093837015e-31)
PROTON_MASS = Mass.from_kilograms(1.67262192369e-27)
NEUTRON_MASS = Mass.from_kilograms(1.67492749804e-27)
FINE_STRUCTURE_CONSTANT: float = 7.2973525693e-3
RYDBERG_CONSTANT: float = 10_973_731.568160  # 1/m
BOHR_RADIUS = Length(5.29177210903e-11)

# Thermodynamic
GAS_CONSTANT: float = 8.314462618  # J/(mol*K)
STEFAN_BOLTZMANN_CONSTANT: float = 5.670374419e-8  # W/(m^2*K^4)
ABSOLUTE_ZERO = Temperature(0.0)
STANDARD_TEMPERATURE = Temperature(u.CELSIUS_OFFSET)
STANDARD_PRESSURE = Pressure(u.ATMOSPHERE)

# Gravity & astronomy
STANDARD_GRAVITY = Acceleration(u.STANDARD_GRAVITY)
EARTH_MASS = Mass.from_kilograms(5.9722e24)
EARTH_RADIUS = Length(6_378_137.0)
SOLAR_MASS = Mass.from_kilograms(1.98847e30)
ASTRONOMICAL_UNIT = Length(149_597_870_700.0)
LIGHT_YEAR = Length(9.4607e15)
PARSEC = Length(3.0857e16)

# Planck scale
PLANCK_LENGTH = Length(1.616255e-35)
PLANCK_TIME = Time(5.391247e-44)
PLANCK_MASS = Mass.from_kilograms(2.176434e-8)
PLANCK_TEMPERATURE = Temperature(1.416784e32)

# Common reference values
SPEED_OF_SOUND_IN_AIR = Speed(343.0)  # 20 °C
WATER_DENSITY = Density(1000.0)  # 4 °C
AIR_DENSITY = Density(1.225)  # уровень моря, 15 °C
WATER_SPECIFIC_HEAT: float = 4_186.0  # J/(kg*K)
WATER_FREEZING_POINT = Temperature.from_celsius(0.0)
WATER_BOILING_POINT = Temperature.from_celsius(100.0)

# Electrical reference values
COPPER_RESISTIVITY: float = 1.68e-8  # Ohm*m, 20 °C
CONDUCTANCE_QUANTUM: float = 7.748091729e-5  # S

# Mathematical
PI: float = math.pi
E: float = math.e
GOLDEN_RATIO: float = (1.0 + math.sqrt(5.0)) / 2.0
SQRT2: float = math.sqrt(2.0)
SQRT3: float = math.sqrt(3.0)
LN2: float = math.log(2.0)
LN10: float = math.log(10.0)


def photon_energy(frequency: Frequency) -> Energy:
    """E = h * f."""

    return Energy(PLANCK_CONSTANT * frequency.base_value)
