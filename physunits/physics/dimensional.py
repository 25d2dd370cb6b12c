"""Размерностные соотношения между величинами.

Каждая функция - одно физическое соотношение с фиксированными типами входов
и выхода (никакой диспетчеризации по типам):
    speed_from_distance(Length, Time) -> Speed
    force_from_mass(Mass, Acceleration) -> Force
    ...

Пересчёт единиц внутри формул:
- масса хранится в граммах -> в формулах делим на 1000 (г -> кг);
- объём хранится в литрах -> в формулах делим на 1000 (л -> м³).
Коэффициенты фиксированные, не конфиг.

Ошибок не бросаем: деление на нулевую величину даёт ±inf / NaN (IEEE-754),
которые распространяются дальше. Такой результат логируется на уровне DEBUG.
"""

from __future__ import annotations

import logging

from physunits.core.numeric import ieee_divide, is_finite
from physunits.core.units import GRAMS_PER_KILOGRAM, LITRES_PER_CUBIC_METER
from physunits.measures import (
    Acceleration,
    Area,
    Current,
    Density,
    Energy,
    Force,
    Length,
    Mass,
    Power,
    Pressure,
    Resistance,
    Speed,
    Time,
    Torque,
    Voltage,
    Volume,
)

logger = logging.getLogger(__name__)


def _checked(name: str, value: float) -> float:
    if not is_finite(value):
        logger.debug("%s produced non-finite value %r", name, value)
    return value


def _kg(mass: Mass) -> float:
    return mass.base_value / GRAMS_PER_KILOGRAM


def _m3(volume: Volume) -> float:
    return volume.base_value / LITRES_PER_CUBIC_METER


# ---------------------------------------------------------------------------
# Кинематика: v = s / t, a = Δv / t
# ---------------------------------------------------------------------------


def speed_from_distance(distance: Length, time: Time) -> Speed:
    """Speed = Distance / Time."""

    return Speed(_checked("speed_from_distance", ieee_divide(distance.base_value, time.base_value)))


def distance_from_speed(speed: Speed, time: Time) -> Length:
    """Distance = Speed * Time."""

    return Length(_checked("distance_from_speed", speed.base_value * time.base_value))


def time_from_distance(distance: Length, speed: Speed) -> Time:
    """Time = Distance / Speed."""

    return Time(_checked("time_from_distance", ieee_divide(distance.base_value, speed.base_value)))


def acceleration_from_speed(speed: Speed, time: Time) -> Acceleration:
    """Acceleration = Δspeed / Time.

    `speed` - изменение скорости за интервал `time` (например, `v1 - v0`).
    """

    return Acceleration(
        _checked("acceleration_from_speed", ieee_divide(speed.base_value, time.base_value))
    )


def speed_from_acceleration(acceleration: Acceleration, time: Time) -> Speed:
    """Speed = Acceleration * Time."""

    return Speed(_checked("speed_from_acceleration", acceleration.base_value * time.base_value))


# ---------------------------------------------------------------------------
# Динамика: F = m * a (масса в граммах!)
# ---------------------------------------------------------------------------


def force_from_mass(mass: Mass, acceleration: Acceleration) -> Force:
    """Force = mass_kg * Acceleration."""

    return Force(_checked("force_from_mass", _kg(mass) * acceleration.base_value))


def mass_from_force(force: Force, acceleration: Acceleration) -> Mass:
    """Mass = Force / Acceleration; результат в граммах."""

    value = ieee_divide(force.base_value, acceleration.base_value) * GRAMS_PER_KILOGRAM
    return Mass(_checked("mass_from_force", value))


def acceleration_from_force(force: Force, mass: Mass) -> Acceleration:
    """Acceleration = Force / mass_kg."""

    return Acceleration(_checked("acceleration_from_force", ieee_divide(force.base_value, _kg(mass))))


# ---------------------------------------------------------------------------
# Геометрия и плотность
# ---------------------------------------------------------------------------


def area_from_lengths(length: Length, width: Length) -> Area:
    """Area = Length * Width."""

    return Area(_checked("area_from_lengths", length.base_value * width.base_value))


def volume_from_area(area: Area, height: Length) -> Volume:
    """Volume = (Area * Height) / 1000.

    Коэффициент 1000 здесь именно делитель, хотя 1 м³ = 1000 л.
    Это зафиксированный контракт; вызывающий код на него опирается.
    """

    value = (area.base_value * height.base_value) / LITRES_PER_CUBIC_METER
    return Volume(_checked("volume_from_area", value))


def density_from_mass(mass: Mass, volume: Volume) -> Density:
    """Density = mass_kg / volume_m3 (кг/м³)."""

    return Density(_checked("density_from_mass", ieee_divide(_kg(mass), _m3(volume))))


def mass_from_density(density: Density, volume: Volume) -> Mass:
    """Mass = Density * volume_m3; результат в граммах."""

    value = density.base_value * _m3(volume) * GRAMS_PER_KILOGRAM
    return Mass(_checked("mass_from_density", value))


def volume_from_mass(mass: Mass, density: Density) -> Volume:
    """Volume = mass_kg / Density; результат в литрах."""

    value = ieee_divide(_kg(mass), density.base_value) * LITRES_PER_CUBIC_METER
    return Volume(_checked("volume_from_mass", value))


# ---------------------------------------------------------------------------
# Энергия, работа, мощность, момент, давление
# ---------------------------------------------------------------------------


def power_from_energy(energy: Energy, time: Time) -> Power:
    """Power = Energy / Time."""

    return Power(_checked("power_from_energy", ieee_divide(energy.base_value, time.base_value)))


def energy_from_power(power: Power, time: Time) -> Energy:
    """Energy = Power * Time."""

    return Energy(_checked("energy_from_power", power.base_value * time.base_value))


def energy_from_force(force: Force, distance: Length) -> Energy:
    """Work = Force * Distance."""

    return Energy(_checked("energy_from_force", force.base_value * distance.base_value))


def torque_from_force(force: Force, lever_arm: Length) -> Torque:
    """Torque = Force * LeverArm."""

    return Torque(_checked("torque_from_force", force.base_value * lever_arm.base_value))


def pressure_from_force(force: Force, area: Area) -> Pressure:
    """Pressure = Force / Area."""

    return Pressure(_checked("pressure_from_force", ieee_divide(force.base_value, area.base_value)))


def force_from_pressure(pressure: Pressure, area: Area) -> Force:
    """Force = Pressure * Area."""

    return Force(_checked("force_from_pressure", pressure.base_value * area.base_value))


# ---------------------------------------------------------------------------
# Электрика: закон Ома и P = V * I
# ---------------------------------------------------------------------------


def voltage_from_current(current: Current, resistance: Resistance) -> Voltage:
    """V = I * R."""

    return Voltage(_checked("voltage_from_current", current.base_value * resistance.base_value))


def current_from_voltage(voltage: Voltage, resistance: Resistance) -> Current:
    """I = V / R."""

    return Current(_checked("current_from_voltage", ieee_divide(voltage.base_value, resistance.base_value)))


def resistance_from_voltage(voltage: Voltage, current: Current) -> Resistance:
    """R = V / I."""

    return Resistance(
        _checked("resistance_from_voltage", ieee_divide(voltage.base_value, current.base_value))
    )


def power_from_voltage(voltage: Voltage, current: Current) -> Power:
    """P = V * I."""

    return Power(_checked("power_from_voltage", voltage.base_value * current.base_value))


def current_from_power(power: Power, voltage: Voltage) -> Current:
    """I = P / V."""

    return Current(_checked("current_from_power", ieee_divide(power.base_value, voltage.base_value)))


def voltage_from_power(power: Power, current: Current) -> Voltage:
    """V = P / I."""

    return Voltage(_checked("voltage_from_power", ieee_divide(power.base_value, current.base_value)))


# ---------------------------------------------------------------------------
# Импульс и механическая энергия
# ---------------------------------------------------------------------------


def momentum(mass: Mass, velocity: Speed) -> float:
    """p = mass_kg * v (кг·м/с). Отдельного типа для импульса нет."""

    return _checked("momentum", _kg(mass) * velocity.base_value)


def kinetic_energy(mass: Mass, velocity: Speed) -> Energy:
    """KE = 0.5 * mass_kg * v².

    v² считаем умножением: `float ** 2` бросает OverflowError на больших v,
    а умножение корректно даёт inf.
    """

    v = velocity.base_value
    return Energy(_checked("kinetic_energy", 0.5 * _kg(mass) * v * v))


def potential_energy(mass: Mass, gravity: Acceleration, height: Length) -> Energy:
    """PE = mass_kg * g * h."""

    return Energy(_checked("potential_energy", _kg(mass) * gravity.base_value * height.base_value))
