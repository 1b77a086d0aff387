"""MongoDB Station Repository - Infrastructure Layer"""

from typing import Any, Dict, List, Optional

from gridcast.domain.entities.station import Station
from gridcast.domain.repositories.station_repository import IStationRepository
from gridcast.infrastructure.database import MongoDatabase
from gridcast.infrastructure.database.mongo_database import STATIONS_COLLECTION


class StationRepository(IStationRepository):
    """MongoDB implementation of the StationRepository."""

    COLLECTION_NAME = STATIONS_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, station: Station) -> Dict[str, Any]:
        return {"id": station.id, "name": station.name, "location": station.location}

    def _to_entity(self, document: Dict[str, Any]) -> Station:
        return Station(
            id=str(document["id"]),
            name=document.get("name", ""),
            location=document.get("location", ""),
        )

    async def find_by_id(self, station_id: str) -> Optional[Station]:
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": station_id})
        return self._to_entity(document) if document else None

    async def find_all(self) -> List[Station]:
        documents = await self.db.find_many(self.COLLECTION_NAME, {}, sort_by="name")
        return [self._to_entity(document) for document in documents]

    async def create(self, station: Station) -> Station:
        await self.db.insert_one(self.COLLECTION_NAME, self._to_document(station))
        return station
