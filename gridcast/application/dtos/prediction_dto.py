"""
Application DTOs - Prediction

Request and response contracts of the predict operation. Range bounds
are accepted as raw strings so that unparseable values are reported
by the use case as an invalid range rather than a schema error.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gridcast.application.dtos.base import CamelModel
from gridcast.domain.entities.forecast import ForecastPoint


class PredictionRequestDTO(CamelModel):
    """Body of the predict endpoint."""

    station_id: str = Field(min_length=1, description="Station to forecast for")
    start_date: Optional[str] = Field(
        default=None, description="Range start, ISO8601 (inclusive)"
    )
    end_date: Optional[str] = Field(
        default=None, description="Range end, ISO8601 (exclusive)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "stationId": "5b1f0e0e-3f0c-4c64-9c55-2b7c6f0c1a01",
                "startDate": "2025-01-01T00:00:00Z",
                "endDate": "2025-01-02T00:00:00Z",
            }
        }
    }


class ForecastPointDTO(CamelModel):
    """Represents an individual hourly forecast."""

    timestamp: datetime
    forecasted_demand: float
    temperature: float
    humidity: int
    hour: int = Field(ge=0, le=23)
    day_of_week: int = Field(ge=0, le=6, description="0 = Sunday")

    @classmethod
    def from_domain(cls, point: ForecastPoint) -> "ForecastPointDTO":
        return cls(
            timestamp=point.timestamp,
            forecasted_demand=point.forecasted_demand,
            temperature=point.temperature,
            humidity=point.humidity,
            hour=point.hour,
            day_of_week=point.day_of_week,
        )
