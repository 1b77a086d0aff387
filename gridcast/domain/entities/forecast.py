"""Domain entities produced and consumed by the prediction generator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ExogenousConditions:
    """Per-hour inputs the model cannot infer from the calendar."""

    temperature: float
    humidity: float
    prior_demand: float


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """A single hourly forecast. Output only, never persisted."""

    timestamp: datetime
    forecasted_demand: float
    temperature: float
    humidity: int
    hour: int
    day_of_week: int
