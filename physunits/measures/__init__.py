"""Типы физических величин (по одному на величину)."""

from __future__ import annotations

from physunits.measures.electrical import Current, Resistance, Voltage
from physunits.measures.geometry import Angle, Area, Length, Volume
from physunits.measures.information import DataRate, DataSize
from physunits.measures.mechanics import Density, Energy, Force, Mass, Power, Pressure, Torque
from physunits.measures.motion import Acceleration, Frequency, FuelEconomy, Speed, Time
from physunits.measures.thermal import Temperature

__all__ = [
    "Length",
    "Time",
    "Mass",
    "Speed",
    "Acceleration",
    "Force",
    "Area",
    "Volume",
    "Density",
    "Energy",
    "Power",
    "Torque",
    "Pressure",
    "Voltage",
    "Current",
    "Resistance",
    "Temperature",
    "Angle",
    "Frequency",
    "FuelEconomy",
    "DataSize",
    "DataRate",
]
