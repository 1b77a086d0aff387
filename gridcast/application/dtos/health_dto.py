"""DTOs for the /health response."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from gridcast.application.dtos.base import CamelModel
from gridcast.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(CamelModel):
    """Serializable representation of a dependency health check."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(CamelModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    model_status: str
    is_training: bool
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            model_status=health.model_status,
            is_training=health.is_training,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "modelStatus": "trained",
                "isTraining": False,
                "dependencies": [
                    {
                        "name": "mongo",
                        "status": "up",
                        "message": "MongoDB ping successful",
                        "checkedAt": "2025-01-01T12:00:00Z",
                        "latencyMs": 4.2,
                        "details": {"database": "power_forecast"},
                    }
                ],
            }
        }
    }
