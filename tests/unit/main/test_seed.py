from __future__ import annotations

from datetime import datetime, timezone

import pytest
from dependency_injector import providers

from gridcast.main.config import AppSettings
from gridcast.main.container import init_container
from gridcast.main.seed import parse_args, seed_history
from tests.conftest import InMemoryDemandRepository, InMemoryStationRepository


class _StubMongoDatabase:
    def __init__(self) -> None:
        self.closed = False

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


def test_parse_args_defaults_to_one_year() -> None:
    args = parse_args([])
    assert args.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert args.end == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert args.seed is None
    assert args.batch_size == 1000


def test_parse_args_rejects_bad_dates() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--start", "soon"])


@pytest.mark.asyncio
async def test_seed_history_uses_container_repositories() -> None:
    container = init_container(AppSettings())
    mongo = _StubMongoDatabase()
    stations = InMemoryStationRepository()
    demands = InMemoryDemandRepository()
    container.mongo_database.override(providers.Object(mongo))
    container.station_repository.override(providers.Object(stations))
    container.demand_repository.override(providers.Object(demands))

    args = parse_args(
        [
            "--start",
            "2024-02-01T00:00:00",
            "--end",
            "2024-02-01T03:00:00",
            "--seed",
            "1",
        ]
    )
    summary = await seed_history(container, args)

    assert summary.stations == 5
    assert summary.records == 15
    assert len(demands.records) == 15
    assert mongo.closed is True
