"""physunits.core.units

Множители единиц измерения.

Принцип: каждая константа = сколько канонических единиц величины
содержится в одной указанной единице. Например, KILOMETER = 1000.0 (метров),
KILOGRAM = 1000.0 (граммов, т.к. масса хранится в граммах).

Использование:
    Length.from_unit(5.0, KILOMETER)   # 5 км -> 5000 м
    length.to(MILE)                    # м -> мили
"""

from __future__ import annotations

import math

# Fixed scaling used by derivations (not configurable)
GRAMS_PER_KILOGRAM: float = 1000.0
LITRES_PER_CUBIC_METER: float = 1000.0

# Length (canonical: meter)
METER: float = 1.0
KILOMETER: float = 1000.0
CENTIMETER: float = 0.01
MILLIMETER: float = 0.001
MICROMETER: float = 1e-6
INCH: float = 0.0254
FOOT: float = 0.3048
YARD: float = 0.9144
MILE: float = 1609.344
NAUTICAL_MILE: float = 1852.0

# Time (canonical: second)
SECOND: float = 1.0
NANOSECOND: float = 1e-9
MICROSECOND: float = 1e-6
MILLISECOND: float = 0.001
MINUTE: float = 60.0
HOUR: float = 3600.0
DAY: float = 86400.0
WEEK: float = 604800.0
MONTH: float = 2_629_746.0  # 1/12 среднего григорианского года
YEAR: float = 31_556_952.0
DECADE: float = 10.0 * YEAR
CENTURY: float = 100.0 * YEAR

# Mass (canonical: gram)
GRAM: float = 1.0
KILOGRAM: float = GRAMS_PER_KILOGRAM
METRIC_TON: float = 1_000_000.0
MILLIGRAM: float = 0.001
MICROGRAM: float = 1e-6
OUNCE: float = 28.349523125
POUND: float = 453.59237
STONE: float = 6350.29318
SHORT_TON: float = 907_184.74
LONG_TON: float = 1_016_046.9088

# Speed (canonical: m/s)
METER_PER_SECOND: float = 1.0
KILOMETER_PER_HOUR: float = KILOMETER / HOUR
MILE_PER_HOUR: float = MILE / HOUR
FOOT_PER_SECOND: float = FOOT
KNOT: float = NAUTICAL_MILE / HOUR

# Acceleration (canonical: m/s^2)
METER_PER_SECOND_SQUARED: float = 1.0
STANDARD_GRAVITY: float = 9.80665
FOOT_PER_SECOND_SQUARED: float = FOOT
GAL: float = 0.01
KILOMETER_PER_HOUR_PER_SECOND: float = KILOMETER / HOUR

# Force (canonical: newton)
NEWTON: float = 1.0
KILONEWTON: float = 1_000.0
MEGANEWTON: float = 1_000_000.0
DYNE: float = 1e-5
KILOGRAM_FORCE: float = STANDARD_GRAVITY
POUND_FORCE: float = 4.4482216152605
POUNDAL: float = 0.138254954376

# Area (canonical: m^2)
SQUARE_METER: float = 1.0
SQUARE_KILOMETER: float = 1_000_000.0
HECTARE: float = 10_000.0
ARE: float = 100.0
SQUARE_DECIMETER: float = 0.01
SQUARE_CENTIMETER: float = 1e-4
SQUARE_MILLIMETER: float = 1e-6
SQUARE_INCH: float = 0.00064516
SQUARE_FOOT: float = 0.092903
SQUARE_YARD: float = 0.836127
ACRE: float = 4046.8564224
SQUARE_MILE: float = 2_589_988.110336

# Volume (canonical: litre)
LITRE: float = 1.0
CUBIC_KILOMETER: float = 1e12
CUBIC_METER: float = LITRES_PER_CUBIC_METER
CUBIC_DECIMETER: float = 1.0
CUBIC_CENTIMETER: float = 0.001
CUBIC_MILLIMETER: float = 1e-6
DECILITRE: float = 0.1
CENTILITRE: float = 0.01
MILLILITRE: float = 0.001
MICROLITRE: float = 1e-6
GALLON_US: float = 3.785411784
QUART_US: float = 0.946352946
PINT_US: float = 0.473176473
CUP_US: float = 0.24
FLUID_OUNCE_US: float = 0.0295735295625
TABLESPOON_US: float = 0.01478676478125
TEASPOON_US: float = 0.00492892159375
GALLON_IMPERIAL: float = 4.54609
QUART_IMPERIAL: float = 1.1365225
PINT_IMPERIAL: float = 0.56826125
FLUID_OUNCE_IMPERIAL: float = 0.0284130625
CUBIC_FOOT: float = 28.316846592
CUBIC_INCH: float = 0.016387064
CUBIC_YARD: float = 764.554857984
BARREL_OIL: float = 158.987294928
CUP_IMPERIAL: float = 0.284130625
TABLESPOON_IMPERIAL: float = 0.0177582
TEASPOON_IMPERIAL: float = 0.00591939
QUART_DRY_US: float = 1.10122
PINT_DRY_US: float = 0.55061
BUSHEL: float = 35.2391
PECK: float = 8.80977
GILL: float = 0.118294118
DRAM: float = 0.0036966912

# Density (canonical: kg/m^3)
KILOGRAM_PER_CUBIC_METER: float = 1.0
GRAM_PER_CUBIC_CENTIMETER: float = 1_000.0
GRAM_PER_LITRE: float = 1.0
POUND_PER_CUBIC_FOOT: float = 16.018463373960142
POUND_PER_CUBIC_INCH: float = 27_679.904710191342
POUND_PER_GALLON_US: float = 119.82642731689663

# Energy (canonical: joule)
JOULE: float = 1.0
KILOJOULE: float = 1_000.0
MEGAJOULE: float = 1_000_000.0
GIGAJOULE: float = 1e9
WATT_HOUR: float = 3_600.0
KILOWATT_HOUR: float = 3_600_000.0
CALORIE: float = 4.184
KILOCALORIE: float = 4_184.0
BTU: float = 1_055.05585262
ELECTRON_VOLT: float = 1.602176634e-19
FOOT_POUND: float = 1.3558179483314
THERM: float = 105_480_400.0

# Power (canonical: watt)
WATT: float = 1.0
MILLIWATT: float = 0.001
KILOWATT: float = 1_000.0
MEGAWATT: float = 1_000_000.0
GIGAWATT: float = 1e9
HORSEPOWER: float = 745.699872  # механическая л.с.

# Torque (canonical: N*m)
NEWTON_METER: float = 1.0
POUND_FOOT: float = 1.3558179483314004
POUND_INCH: float = 0.1129848290276167
KILOGRAM_FORCE_METER: float = STANDARD_GRAVITY
DYNE_CENTIMETER: float = 1e-7

# Pressure (canonical: pascal)
PASCAL: float = 1.0
KPA: float = 1e3
BAR: float = 1e5 * PASCAL
MPA: float = 1e6 * PASCAL
ATMOSPHERE: float = 101_325.0
PSI: float = 6_894.757293168
TORR: float = 133.322387415

# Electrical (canonical: volt / ampere / ohm)
VOLT: float = 1.0
MILLIVOLT: float = 0.001
MICROVOLT: float = 1e-6
KILOVOLT: float = 1_000.0
MEGAVOLT: float = 1_000_000.0

AMPERE: float = 1.0
MILLIAMPERE: float = 0.001
MICROAMPERE: float = 1e-6
KILOAMPERE: float = 1_000.0

OHM: float = 1.0
MILLIOHM: float = 0.001
KILOOHM: float = 1_000.0
MEGAOHM: float = 1_000_000.0

# Angle (canonical: degree)
DEGREE: float = 1.0
RADIAN: float = 180.0 / math.pi
GRAD: float = 0.9
ARC_MINUTE: float = 1.0 / 60.0
ARC_SECOND: float = 1.0 / 3600.0

# Frequency (canonical: hertz)
YOCTOHERTZ: float = 1e-24
ZEPTOHERTZ: float = 1e-21
ATTOHERTZ: float = 1e-18
FEMTOHERTZ: float = 1e-15
PICOHERTZ: float = 1e-12
NANOHERTZ: float = 1e-9
MICROHERTZ: float = 1e-6
MILLIHERTZ: float = 1e-3
CENTIHERTZ: float = 1e-2
DECIHERTZ: float = 1e-1
HERTZ: float = 1.0
DECAHERTZ: float = 10.0
HECTOHERTZ: float = 100.0
KILOHERTZ: float = 1e3
MEGAHERTZ: float = 1e6
GIGAHERTZ: float = 1e9
TERAHERTZ: float = 1e12
PETAHERTZ: float = 1e15
EXAHERTZ: float = 1e18
ZETTAHERTZ: float = 1e21
YOTTAHERTZ: float = 1e24
RPM: float = 1.0 / 60.0  # об/мин -> Гц

# Data size (canonical: byte)
BYTE: float = 1.0
BIT: float = 0.125
KILOBYTE: float = 1e3
MEGABYTE: float = 1e6
GIGABYTE: float = 1e9
TERABYTE: float = 1e12
PETABYTE: float = 1e15
EXABYTE: float = 1e18
ZETTABYTE: float = 1e21
YOTTABYTE: float = 1e24
KIBIBYTE: float = 1024.0
MEBIBYTE: float = 1024.0**2
GIBIBYTE: float = 1024.0**3
TEBIBYTE: float = 1024.0**4
PEBIBYTE: float = 1024.0**5
EXBIBYTE: float = 1024.0**6
ZEBIBYTE: float = 1024.0**7
YOBIBYTE: float = 1024.0**8

# Data rate (canonical: bit/s)
BIT_PER_SECOND: float = 1.0
KILOBIT_PER_SECOND: float = 1e3
MEGABIT_PER_SECOND: float = 1e6
GIGABIT_PER_SECOND: float = 1e9
TERABIT_PER_SECOND: float = 1e12
KIBIBIT_PER_SECOND: float = 1024.0
MEBIBIT_PER_SECOND: float = 1024.0**2
GIBIBIT_PER_SECOND: float = 1024.0**3
TEBIBIT_PER_SECOND: float = 1024.0**4
KILOBYTE_PER_SECOND: float = 8e3
MEGABYTE_PER_SECOND: float = 8e6
GIGABYTE_PER_SECOND: float = 8e9
TERABYTE_PER_SECOND: float = 8e12

# Fuel economy (canonical: km/L)
KILOMETER_PER_LITRE: float = 1.0
MILE_PER_GALLON_US: float = 1.0 / 2.352145833  # км/л в 1 mpg (US)
MILE_PER_GALLON_UK: float = 1.0 / 2.824809363  # км/л в 1 mpg (UK)

# Temperature offsets (canonical: kelvin)
CELSIUS_OFFSET: float = 273.15
FAHRENHEIT_OFFSET: float = 459.67
FAHRENHEIT_RATIO: float = 5.0 / 9.0
