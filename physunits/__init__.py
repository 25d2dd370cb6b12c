"""physunits package.

Типизированные физические величины и формулы размерностного анализа.

Важно: пакет не должен иметь побочных эффектов при импорте
(никакой настройки logging, никаких глобальных реестров).

Импортируй нужное напрямую:
- from physunits.measures import Length, Time, Mass
- from physunits.physics.dimensional import speed_from_distance
"""

from __future__ import annotations

__all__: list[str] = []
