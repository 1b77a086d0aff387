"""
Synthetic exogenous inputs.

Stands in for a live weather feed and a recent-demand lookup by drawing
plausible values uniformly from configured ranges.
"""

from __future__ import annotations

import hashlib
from datetime import datetime
from typing import Optional, Tuple

import numpy as np

from gridcast.domain.entities.demand import ensure_utc
from gridcast.domain.entities.forecast import ExogenousConditions

Bounds = Tuple[float, float]


class SyntheticExogenousSource:
    """
    Uniform random conditions per hour.

    With a ``seed`` every (station, hour) pair maps to its own generator,
    so the same hour always yields the same conditions no matter how many
    other hours were drawn before it. Without a seed draws are fresh each
    call.
    """

    def __init__(
        self,
        temperature_range: Bounds = (30.0, 35.0),
        humidity_range: Bounds = (40.0, 50.0),
        prior_demand_range: Bounds = (100.0, 150.0),
        seed: Optional[int] = None,
    ) -> None:
        for name, (low, high) in (
            ("temperature_range", temperature_range),
            ("humidity_range", humidity_range),
            ("prior_demand_range", prior_demand_range),
        ):
            if low > high:
                raise ValueError(f"{name} lower bound must not exceed upper bound")
        self.temperature_range = temperature_range
        self.humidity_range = humidity_range
        self.prior_demand_range = prior_demand_range
        self.seed = seed
        self._rng = np.random.default_rng()

    def conditions_at(
        self, station_id: str, timestamp: datetime
    ) -> ExogenousConditions:
        rng = self._generator_for(station_id, timestamp)
        return ExogenousConditions(
            temperature=float(rng.uniform(*self.temperature_range)),
            humidity=float(rng.uniform(*self.humidity_range)),
            prior_demand=float(rng.uniform(*self.prior_demand_range)),
        )

    def _generator_for(
        self, station_id: str, timestamp: datetime
    ) -> np.random.Generator:
        if self.seed is None:
            return self._rng
        epoch_hour = int(ensure_utc(timestamp).timestamp() // 3600)
        station_key = int.from_bytes(
            hashlib.blake2b(station_id.encode("utf-8"), digest_size=8).digest(), "big"
        )
        return np.random.default_rng([self.seed, station_key, epoch_hour])
