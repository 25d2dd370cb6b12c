"""Конфигурация physunits.

Data-only модуль: frozen-датаклассы с дефолтами + DEFAULT_* экземпляры.

Ключевое правило:
- коэффициенты пересчёта (1000 г/кг, 1000 л/м³) - это физические константы,
  а НЕ конфиг. Здесь только то, что разумно менять пользователю.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceConfig:
    """Допуски для приближённого сравнения величин (`Measure.isclose`)."""

    rel_tol: float = 1e-9
    abs_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.rel_tol < 0.0:
            raise ValueError("rel_tol must be >= 0")
        if self.abs_tol < 0.0:
            raise ValueError("abs_tol must be >= 0")


DEFAULT_TOLERANCE = ToleranceConfig()
