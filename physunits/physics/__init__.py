"""Пакет физики: размерностные соотношения и константы."""

from __future__ import annotations

from .constants import STANDARD_GRAVITY, photon_energy
from .dimensional import (
    acceleration_from_force,
    acceleration_from_speed,
    area_from_lengths,
    current_from_power,
    current_from_voltage,
    density_from_mass,
    distance_from_speed,
    energy_from_force,
    energy_from_power,
    force_from_mass,
    force_from_pressure,
    kinetic_energy,
    mass_from_density,
    mass_from_force,
    momentum,
    potential_energy,
    power_from_energy,
    power_from_voltage,
    pressure_from_force,
    resistance_from_voltage,
    speed_from_acceleration,
    speed_from_distance,
    time_from_distance,
    torque_from_force,
    voltage_from_current,
    voltage_from_power,
    volume_from_area,
    volume_from_mass,
)

__all__ = [
    "speed_from_distance",
    "distance_from_speed",
    "time_from_distance",
    "acceleration_from_speed",
    "speed_from_acceleration",
    "force_from_mass",
    "mass_from_force",
    "acceleration_from_force",
    "area_from_lengths",
    "volume_from_area",
    "density_from_mass",
    "mass_from_density",
    "volume_from_mass",
    "power_from_energy",
    "energy_from_power",
    "energy_from_force",
    "torque_from_force",
    "pressure_from_force",
    "force_from_pressure",
    "voltage_from_current",
    "current_from_voltage",
    "resistance_from_voltage",
    "power_from_voltage",
    "current_from_power",
    "voltage_from_power",
    "momentum",
    "kinetic_energy",
    "potential_energy",
    "photon_energy",
    "STANDARD_GRAVITY",
]
