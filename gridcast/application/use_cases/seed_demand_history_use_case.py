"""
Application Use Case - Seed Demand History

Fills storage with a set of stations and simulated hourly demand so a
fresh deployment has something to train on. Demand is higher during
working hours, rises with temperature, falls with humidity and drops
on public holidays.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

import numpy as np
import structlog

from gridcast.domain.entities.demand import DemandRecord
from gridcast.domain.entities.station import Station
from gridcast.domain.repositories.demand_repository import IDemandRepository
from gridcast.domain.repositories.station_repository import IStationRepository
from gridcast.domain.services.forecast_generator import hourly_range

logger = structlog.get_logger(__name__)

DEFAULT_STATIONS: Tuple[Tuple[str, str], ...] = (
    ("Muscat Central", "Muscat"),
    ("Salalah Grid", "Salalah"),
    ("Sohar Node", "Sohar"),
    ("Nizwa Point", "Nizwa"),
    ("Sur Hub", "Sur"),
)

PUBLIC_HOLIDAYS = frozenset(
    {
        date(2024, 1, 1),
        date(2024, 4, 10),
        date(2024, 6, 16),
        date(2024, 7, 23),
        date(2024, 9, 16),
        date(2024, 11, 18),
    }
)

SUMMER_MONTHS = frozenset({6, 7, 8, 9})


@dataclass(frozen=True)
class SeedSummary:
    stations: int
    records: int


class SeedDemandHistoryUseCase:
    """Creates stations and inserts simulated hourly demand in batches."""

    def __init__(
        self,
        station_repository: IStationRepository,
        demand_repository: IDemandRepository,
        batch_size: int = 1000,
        seed: Optional[int] = None,
    ):
        self.station_repository = station_repository
        self.demand_repository = demand_repository
        self.batch_size = batch_size
        self.seed = seed

    async def execute(
        self,
        start: datetime,
        end: datetime,
        stations: Sequence[Tuple[str, str]] = DEFAULT_STATIONS,
    ) -> SeedSummary:
        """
        Seed every hour in [start, end) for each station.

        Stations that already exist (matched by name) are reused, so a
        rerun only appends demand history.

        Args:
            start: First hour to simulate (inclusive)
            end: Last hour to simulate (exclusive)
            stations: (name, location) pairs

        Returns:
            Number of stations seeded and demand records inserted
        """
        targets = await self._ensure_stations(stations)
        rng = np.random.default_rng(self.seed)

        batch: List[DemandRecord] = []
        inserted = 0
        for moment in hourly_range(start, end):
            batch.extend(
                self._simulate_hour(rng, station, moment) for station in targets
            )
            if len(batch) >= self.batch_size:
                inserted += await self.demand_repository.insert_many(batch)
                logger.info(
                    "seed.batch_inserted", up_to=moment.isoformat(), total=inserted
                )
                batch = []

        if batch:
            inserted += await self.demand_repository.insert_many(batch)

        logger.info("seed.completed", stations=len(targets), records=inserted)
        return SeedSummary(stations=len(targets), records=inserted)

    async def _ensure_stations(
        self, stations: Sequence[Tuple[str, str]]
    ) -> List[Station]:
        existing = {
            station.name: station
            for station in await self.station_repository.find_all()
        }
        targets = []
        for name, location in stations:
            station = existing.get(name)
            if station is None:
                station = await self.station_repository.create(
                    Station(name=name, location=location)
                )
                logger.info("seed.station_created", station_id=station.id, name=name)
            targets.append(station)
        return targets

    @staticmethod
    def _simulate_hour(
        rng: np.random.Generator, station: Station, moment: datetime
    ) -> DemandRecord:
        if moment.month in SUMMER_MONTHS:
            temperature = float(rng.uniform(32.0, 45.0))
        else:
            temperature = float(rng.uniform(22.0, 30.0))
        humidity = float(rng.uniform(20.0, 65.0))

        base = 120.0 if 7 <= moment.hour <= 17 else 80.0
        variation = float(rng.uniform(-15.0, 20.0))
        holiday = -20.0 if moment.date() in PUBLIC_HOLIDAYS else 0.0

        actual = max(
            30.0, base + variation + holiday + temperature * 0.8 - humidity * 0.3
        )
        forecasted = actual + float(rng.uniform(-5.0, 5.0))

        return DemandRecord.at(
            station.id,
            moment,
            temperature=temperature,
            humidity=humidity,
            forecasted_demand=forecasted,
            actual_demand=actual,
        )
