from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np
import pytest

from gridcast.domain.entities.demand import DemandRecord
from gridcast.domain.entities.forecast import ExogenousConditions
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.domain.entities.station import Station
from gridcast.domain.repositories.demand_repository import IDemandRepository
from gridcast.domain.repositories.station_repository import IStationRepository

HISTORY_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def generate_demand_history(
    station_id: str,
    hours: int,
    *,
    start: datetime = HISTORY_START,
    seed: int = 7,
    unobserved_every: Optional[int] = None,
) -> List[DemandRecord]:
    """
    Synthetic hourly history, newest first.

    Demand is higher during working hours and rises with temperature.
    Every ``unobserved_every``-th hour has no actual demand (a
    forecast-only row).
    """
    rng = np.random.default_rng(seed)
    records = []
    for offset in range(hours):
        moment = start + timedelta(hours=offset)
        temperature = float(rng.uniform(22.0, 45.0))
        humidity = float(rng.uniform(20.0, 65.0))
        base = 120.0 if 7 <= moment.hour <= 17 else 80.0
        actual = max(
            30.0,
            base + float(rng.uniform(-15.0, 20.0)) + temperature * 0.8 - humidity * 0.3,
        )
        forecasted = actual + float(rng.uniform(-5.0, 5.0))
        observed = not (unobserved_every and offset % unobserved_every == 0)
        records.append(
            DemandRecord.at(
                station_id,
                moment,
                temperature=temperature,
                humidity=humidity,
                forecasted_demand=forecasted,
                actual_demand=actual if observed else None,
            )
        )
    records.sort(key=lambda record: record.date, reverse=True)
    return records


class InMemoryDemandRepository(IDemandRepository):
    def __init__(self, records: Sequence[DemandRecord] = ()) -> None:
        self.records: List[DemandRecord] = list(records)
        self.find_all_calls = 0

    async def find_all(self) -> List[DemandRecord]:
        self.find_all_calls += 1
        return sorted(self.records, key=lambda record: record.date, reverse=True)

    async def insert_many(self, records: Sequence[DemandRecord]) -> int:
        self.records.extend(records)
        return len(records)


class InMemoryStationRepository(IStationRepository):
    def __init__(self, stations: Sequence[Station] = ()) -> None:
        self.stations: Dict[str, Station] = {station.id: station for station in stations}

    async def find_by_id(self, station_id: str) -> Optional[Station]:
        return self.stations.get(station_id)

    async def find_all(self) -> List[Station]:
        return sorted(self.stations.values(), key=lambda station: station.name)

    async def create(self, station: Station) -> Station:
        self.stations[station.id] = station
        return station


class LinearRegressor:
    """Stands in for a fitted Keras model: y = x . weights + bias."""

    def __init__(self, weights: Sequence[float], bias: float = 0.0) -> None:
        self.weights = np.asarray(weights, dtype=np.float64).reshape(-1, 1)
        self.bias = bias
        self.predict_calls = 0

    def predict(self, x: Any, verbose: int = 0) -> np.ndarray:
        self.predict_calls += 1
        return np.asarray(x, dtype=np.float64) @ self.weights + self.bias


class FitTracker:
    """Counts fits running at the same time across model instances."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.active = 0
        self.max_active = 0

    def __enter__(self) -> "FitTracker":
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        with self._lock:
            self.active -= 1


class StubTrainableModel(LinearRegressor):
    """Mimics the Keras fit/predict surface used by the training use case."""

    def __init__(
        self,
        fit_delay: Optional[threading.Event] = None,
        tracker: Optional[FitTracker] = None,
    ) -> None:
        super().__init__([0.0] * 5)
        self.fit_calls: List[Dict[str, Any]] = []
        self._fit_delay = fit_delay
        self._tracker = tracker or FitTracker()

    def fit(self, x: Any, y: Any, **kwargs: Any) -> SimpleNamespace:
        with self._tracker:
            if self._fit_delay is not None:
                self._fit_delay.wait(timeout=5)
            self.fit_calls.append({"rows": len(x), **kwargs})
            solution, *_ = np.linalg.lstsq(
                np.hstack([x, np.ones((len(x), 1))]), y, rcond=None
            )
            self.weights = solution[:-1]
            self.bias = float(solution[-1][0])
        return SimpleNamespace(history={"loss": [10.0, 2.5, 1.25]})


class RecordingModelBuilder:
    def __init__(self, fit_delay: Optional[threading.Event] = None) -> None:
        self.built: List[StubTrainableModel] = []
        self.tracker = FitTracker()
        self._fit_delay = fit_delay

    def __call__(self, n_features: int) -> StubTrainableModel:
        model = StubTrainableModel(fit_delay=self._fit_delay, tracker=self.tracker)
        self.built.append(model)
        return model


class FixedExogenousSource:
    def __init__(
        self, temperature: float = 32.25, humidity: float = 44.6, prior: float = 120.0
    ) -> None:
        self.conditions = ExogenousConditions(
            temperature=temperature, humidity=humidity, prior_demand=prior
        )
        self.calls: List[datetime] = []

    def conditions_at(self, station_id: str, timestamp: datetime) -> ExogenousConditions:
        self.calls.append(timestamp)
        return self.conditions


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit = 0

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.created_indexes: List[tuple[Any, ...]] = []
        self.last_query: Dict[str, Any] | None = None

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.last_query = query
        return next(
            (doc for doc in self.documents if self._matches(doc, query)), None
        )

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        return FakeCursor(doc for doc in self.documents if self._matches(doc, query))

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.documents.append(document)
        return SimpleNamespace(acknowledged=True, inserted_id=len(self.documents))

    def insert_many(self, documents: Sequence[Dict[str, Any]]) -> Any:
        start = len(self.documents)
        self.documents.extend(documents)
        return SimpleNamespace(
            acknowledged=True,
            inserted_ids=list(range(start, len(self.documents))),
        )

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        if sort_by:
            cursor.sort(sort_by, sort_direction)
        return list(cursor.skip(skip).limit(limit))

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        self.get_collection(collection_name).insert_one(document)
        return document

    async def insert_many(
        self, collection_name: str, documents: Sequence[Dict[str, Any]]
    ) -> int:
        if not documents:
            return 0
        result = self.get_collection(collection_name).insert_many(documents)
        return len(result.inserted_ids)

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def sample_station() -> Station:
    return Station(id="station-muscat", name="Muscat Central", location="Muscat")


@pytest.fixture()
def model_handle() -> ForecastModelHandle:
    return ForecastModelHandle()


@pytest.fixture()
def trained_handle() -> ForecastModelHandle:
    handle = ForecastModelHandle()
    assert handle.try_begin_training()
    handle.complete_training(LinearRegressor([0.5, 0.1, 1.0, 2.0, 0.3], bias=10.0))
    return handle


@pytest.fixture()
def demand_history(sample_station: Station) -> List[DemandRecord]:
    return generate_demand_history(sample_station.id, hours=96)
