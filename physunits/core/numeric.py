"""physunits.core.numeric

Арифметика по IEEE-754.

Обычный `float` в Python бросает ZeroDivisionError на `x / 0.0`.
Для величин это нежелательно: деление на нулевую величину должно давать
±inf или NaN и распространяться дальше, а не прерывать расчёт.
"""

from __future__ import annotations

import math

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Деление с семантикой IEEE-754: x/0 -> ±inf, 0/0 -> NaN."""

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def is_finite(value: float) -> bool:
    return math.isfinite(float(value))
