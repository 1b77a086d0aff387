"""
MongoDB Demand Repository - Infrastructure Layer

Stores demand records in the ``demands`` collection. Calendar fields
are stored for querying but recomputed from ``date`` on read.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from pymongo import DESCENDING

from gridcast.domain.entities.demand import DemandRecord
from gridcast.domain.repositories.demand_repository import IDemandRepository
from gridcast.infrastructure.database import MongoDatabase
from gridcast.infrastructure.database.mongo_database import DEMANDS_COLLECTION


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


class DemandRepository(IDemandRepository):
    """MongoDB implementation of the DemandRepository."""

    COLLECTION_NAME = DEMANDS_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, record: DemandRecord) -> Dict[str, Any]:
        """Convert a DemandRecord entity to a MongoDB document."""
        return {
            "station_id": record.station_id,
            "date": record.date,
            "time": record.date.strftime("%H:%M"),
            "day_of_week": record.day_of_week,
            "hour": record.hour,
            "temperature": record.temperature,
            "humidity": record.humidity,
            "actual_demand": record.actual_demand,
            "forecasted_demand": record.forecasted_demand,
            "accuracy": record.accuracy,
        }

    def _to_entity(self, document: Dict[str, Any]) -> DemandRecord:
        """Convert a MongoDB document to a DemandRecord entity."""
        date: datetime = document["date"]
        return DemandRecord.at(
            str(document.get("station_id", "")),
            date,
            temperature=float(document.get("temperature", 0.0)),
            humidity=float(document.get("humidity", 0.0)),
            forecasted_demand=float(document.get("forecasted_demand", 0.0)),
            actual_demand=_optional_float(document.get("actual_demand")),
            accuracy=_optional_float(document.get("accuracy")),
            derive_accuracy=False,
        )

    async def find_all(self) -> List[DemandRecord]:
        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            {},
            sort_by="date",
            sort_direction=DESCENDING,
        )
        return [self._to_entity(document) for document in documents]

    async def insert_many(self, records: Sequence[DemandRecord]) -> int:
        return await self.db.insert_many(
            self.COLLECTION_NAME, [self._to_document(record) for record in records]
        )
