"""
Domain Service - Forecast Generator

Turns a fitted regressor and a time range into hourly ForecastPoints.
Time is a continuous UTC grid with one-hour steps; there is no
calendar or daylight-saving handling.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any, Iterator

import numpy as np

from gridcast.domain.entities.demand import FeatureVector, day_of_week, ensure_utc
from gridcast.domain.entities.forecast import ForecastPoint
from gridcast.domain.ports.exogenous_source import IExogenousSource

HOUR = timedelta(hours=1)


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def hourly_range(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield start, start+1h, ... strictly before end. Empty if end <= start."""
    moment = ensure_utc(start)
    stop = ensure_utc(end)
    while moment < stop:
        yield moment
        moment += HOUR


class ForecastSequence:
    """
    Lazy, restartable sequence of hourly forecasts.

    Nothing is computed until iteration, and every iteration starts over
    from ``start``; with a deterministic exogenous source two iterations
    yield identical points. The regressor is captured at construction so
    a model swapped in later does not affect an existing sequence.
    """

    def __init__(
        self,
        regressor: Any,
        station_id: str,
        start: datetime,
        end: datetime,
        exogenous_source: IExogenousSource,
    ) -> None:
        self._regressor = regressor
        self._station_id = station_id
        self._start = ensure_utc(start)
        self._end = ensure_utc(end)
        self._source = exogenous_source

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    def __len__(self) -> int:
        if self._end <= self._start:
            return 0
        return math.ceil((self._end - self._start) / HOUR)

    def __iter__(self) -> Iterator[ForecastPoint]:
        for moment in hourly_range(self._start, self._end):
            yield self._forecast_hour(moment)

    def _forecast_hour(self, moment: datetime) -> ForecastPoint:
        conditions = self._source.conditions_at(self._station_id, moment)
        features = FeatureVector(
            temperature=conditions.temperature,
            humidity=conditions.humidity,
            day_of_week=day_of_week(moment),
            hour=moment.hour,
            prior_demand=conditions.prior_demand,
        )
        batch = np.asarray([features], dtype=np.float32)
        output = self._regressor.predict(batch, verbose=0)
        forecast = float(np.asarray(output, dtype=np.float64).reshape(-1)[0])

        return ForecastPoint(
            timestamp=moment,
            forecasted_demand=round_half_up(forecast, 2),
            temperature=round_half_up(conditions.temperature, 1),
            humidity=int(round_half_up(conditions.humidity)),
            hour=features.hour,
            day_of_week=features.day_of_week,
        )
