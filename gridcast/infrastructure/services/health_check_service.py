"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import List, Optional

import pymongo.errors

from gridcast.domain.entities.health import DependencyStatus, ServiceStatus
from gridcast.infrastructure.database.mongo_database import MongoDatabase


class HealthCheckService:
    """Checks the storage collaborator."""

    def __init__(self, mongo_database: Optional[MongoDatabase]) -> None:
        self._mongo_database = mongo_database

    async def evaluate(self) -> List[DependencyStatus]:
        return [await self._check_mongo()]

    async def _check_mongo(self) -> DependencyStatus:
        if not self._mongo_database:
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.client.admin.command, "ping")
        except pymongo.errors.PyMongoError as exc:
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
            )

        return DependencyStatus(
            name="mongo",
            status=ServiceStatus.UP,
            message="MongoDB ping successful",
            latency_ms=(perf_counter() - start) * 1000,
            details={"database": self._mongo_database.db.name},
        )
