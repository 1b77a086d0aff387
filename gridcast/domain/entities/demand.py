"""
Domain Entities - Demand

Hourly demand observations and the feature vectors derived from them.
Calendar fields are always computed from the record's instant, so a
DemandRecord can never carry an hour or weekday that disagrees with
its date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import NamedTuple, Optional, Tuple


def ensure_utc(instant: datetime) -> datetime:
    """Return the instant as an aware UTC datetime (naive means UTC)."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def day_of_week(instant: datetime) -> int:
    """Weekday index with 0 = Sunday ... 6 = Saturday."""
    return (ensure_utc(instant).weekday() + 1) % 7


def compute_accuracy(
    actual: Optional[float], forecasted: Optional[float]
) -> Optional[float]:
    """Accuracy score `100 - |actual - forecasted|`, None unless both exist."""
    if actual is None or forecasted is None:
        return None
    return 100.0 - abs(actual - forecasted)


class FeatureVector(NamedTuple):
    """The five inputs consumed by the regression model, in model order."""

    temperature: float
    humidity: float
    day_of_week: int
    hour: int
    prior_demand: float


@dataclass(frozen=True, slots=True)
class DemandRecord:
    """One hourly observation / forecast pair for a station."""

    station_id: str
    date: datetime
    day_of_week: int
    hour: int
    temperature: float
    humidity: float
    forecasted_demand: float
    actual_demand: Optional[float] = None
    accuracy: Optional[float] = None

    @classmethod
    def at(
        cls,
        station_id: str,
        instant: datetime,
        *,
        temperature: float,
        humidity: float,
        forecasted_demand: float,
        actual_demand: Optional[float] = None,
        accuracy: Optional[float] = None,
        derive_accuracy: bool = True,
    ) -> "DemandRecord":
        """
        Build a record whose calendar fields are derived from ``instant``.

        When ``accuracy`` is not given it is computed from the actual and
        forecasted demand, unless ``derive_accuracy`` is False. Records
        read back from storage keep whatever accuracy was stored.
        """
        moment = ensure_utc(instant)
        if accuracy is None and derive_accuracy:
            accuracy = compute_accuracy(actual_demand, forecasted_demand)
        return cls(
            station_id=station_id,
            date=moment,
            day_of_week=day_of_week(moment),
            hour=moment.hour,
            temperature=temperature,
            humidity=humidity,
            forecasted_demand=forecasted_demand,
            actual_demand=actual_demand,
            accuracy=accuracy,
        )

    @property
    def prior_demand(self) -> float:
        # Falls back to the forecast when nothing was observed.
        if self.actual_demand is not None:
            return self.actual_demand
        return self.forecasted_demand

    def to_feature_vector(self) -> FeatureVector:
        return FeatureVector(
            temperature=self.temperature,
            humidity=self.humidity,
            day_of_week=self.day_of_week,
            hour=self.hour,
            prior_demand=self.prior_demand,
        )

    def to_training_pair(self) -> Optional[Tuple[FeatureVector, float]]:
        """Feature vector and target, or None when there is no observation."""
        if self.actual_demand is None:
            return None
        return self.to_feature_vector(), self.actual_demand
