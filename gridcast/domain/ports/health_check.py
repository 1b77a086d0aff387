"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import List, Protocol

from gridcast.domain.entities.health import DependencyStatus


class IHealthCheckService(Protocol):
    """Interface for probing external dependencies."""

    async def evaluate(self) -> List[DependencyStatus]:
        ...
