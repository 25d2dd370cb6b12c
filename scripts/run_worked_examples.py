#!/usr/bin/env python
"""
Run worked examples: a few dimensional derivations logged step by step.

Usage:
    python scripts/run_worked_examples.py [--mass-kg 2.0] [--speed 3.0] [--height 10.0]
    python scripts/run_worked_examples.py --log-level DEBUG   # show non-finite results
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from physunits.measures import Acceleration, Length, Mass, Resistance, Speed, Time, Voltage, Volume
from physunits.physics import constants
from physunits.physics import dimensional as dim

logger = logging.getLogger("physunits.examples")


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Log worked examples of physunits derivations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Defaults (2 kg body at 3 m/s, 10 m height)
  python scripts/run_worked_examples.py

  # Division by zero: result is inf, logged at DEBUG
  python scripts/run_worked_examples.py --time 0 --log-level DEBUG
        """,
    )

    parser.add_argument("--mass-kg", type=float, default=2.0, help="Body mass in kg (default: 2.0)")
    parser.add_argument("--speed", type=float, default=3.0, help="Speed in m/s (default: 3.0)")
    parser.add_argument("--height", type=float, default=10.0, help="Height in m (default: 10.0)")
    parser.add_argument("--time", type=float, default=4.0, help="Interval in s (default: 4.0)")
    parser.add_argument("--volume-l", type=float, default=2.0, help="Volume in litres (default: 2.0)")
    parser.add_argument("--voltage", type=float, default=12.0, help="Voltage in V (default: 12.0)")
    parser.add_argument("--resistance", type=float, default=4.0, help="Resistance in ohm (default: 4.0)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def run(args) -> None:
    mass = Mass.from_kilograms(args.mass_kg)
    speed = Speed(args.speed)
    height = Length(args.height)
    time = Time(args.time)
    volume = Volume(args.volume_l)

    logger.info("Механика (m = %.3f кг, v = %.3f м/с, h = %.3f м):", mass.kilograms, speed.base_value, height.base_value)
    logger.info("  Импульс: %.3f кг·м/с", dim.momentum(mass, speed))
    logger.info("  Кинетическая энергия: %.3f Дж", dim.kinetic_energy(mass, speed).joules)
    logger.info(
        "  Потенциальная энергия: %.3f Дж",
        dim.potential_energy(mass, constants.STANDARD_GRAVITY, height).joules,
    )
    logger.info("  Вес: %.3f Н", dim.force_from_mass(mass, constants.STANDARD_GRAVITY).newtons)

    distance = dim.distance_from_speed(speed, time)
    logger.info("Кинематика (t = %.3f с):", time.seconds)
    logger.info("  Путь: %.3f м", distance.meters)
    logger.info("  Средняя скорость обратно: %.3f м/с", dim.speed_from_distance(distance, time).meters_per_second)
    logger.info("  Ускорение с места: %.3f м/с²", dim.acceleration_from_speed(speed, time).base_value)

    logger.info("Плотность (V = %.3f л): %.1f кг/м³", volume.litres, dim.density_from_mass(mass, volume).base_value)

    voltage = Voltage(args.voltage)
    resistance = Resistance(args.resistance)
    current = dim.current_from_voltage(voltage, resistance)
    logger.info("Электрика (U = %.3f В, R = %.3f Ом):", voltage.volts, resistance.ohms)
    logger.info("  Ток: %.3f А", current.amperes)
    logger.info("  Мощность: %.3f Вт", dim.power_from_voltage(voltage, current).watts)

    g_check = Acceleration(9.8)
    logger.info("Проверка: 1 кг * 9.8 м/с² = %.3f Н", dim.force_from_mass(Mass(1000.0), g_check).newtons)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
