"""Domain port for per-hour exogenous inputs (weather, recent demand)."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from gridcast.domain.entities.forecast import ExogenousConditions


class IExogenousSource(Protocol):
    """Supplies the inputs a forecast needs for one station and hour.

    Determinism is the source's concern: the forecast generator makes one
    call per hour and uses whatever it gets back.
    """

    def conditions_at(
        self, station_id: str, timestamp: datetime
    ) -> ExogenousConditions:
        ...
