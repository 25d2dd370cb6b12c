"""physunits.core.validation

Приведение сырых чисел к каноническому `float`.

Физическую правдоподобность (отрицательная масса и т.п.) здесь НЕ проверяем:
inf и NaN тоже допустимы. Числом считаем `numbers.Real` (int, float,
Fraction, numpy-скаляры) и `decimal.Decimal`; complex - нет.

TypeError получают:
- не-числа (строки, None, контейнеры) - разбор текста в числа не наша задача;
- числа, которые не представимы в `float` (int больше ~1.8e308,
  сигнальный Decimal('sNaN')).
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real


def is_raw_number(value: object) -> bool:
    return isinstance(value, (Real, Decimal))


def as_base_value(value: object, name: str) -> float:
    if not is_raw_number(value):
        raise TypeError(f"{name} expects a real number, got {type(value).__name__}: {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (OverflowError, ValueError) as exc:
        raise TypeError(f"{name} got a number that does not fit in a float: {value!r}") from exc


def ensure_real(value: object, name: str) -> float:
    return as_base_value(value, name)
