from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from gridcast.application.dtos import (
    ForecastPointDTO,
    ModelPerformanceDTO,
    PredictionRequestDTO,
    TrainingResultDTO,
    TrainingStatusDTO,
)
from gridcast.domain.entities.accuracy import AccuracySummary
from gridcast.domain.entities.forecast import ForecastPoint
from gridcast.domain.entities.training import (
    ModelStatus,
    TrainingMetrics,
    TrainingResult,
)


def test_prediction_request_accepts_camel_case() -> None:
    request = PredictionRequestDTO.model_validate(
        {
            "stationId": "abc",
            "startDate": "2025-01-01T00:00:00Z",
            "endDate": "2025-01-02T00:00:00Z",
        }
    )
    assert request.station_id == "abc"
    assert request.start_date == "2025-01-01T00:00:00Z"


def test_prediction_request_bounds_are_optional() -> None:
    request = PredictionRequestDTO.model_validate({"stationId": "abc"})
    assert request.start_date is None
    assert request.end_date is None


def test_prediction_request_requires_station() -> None:
    with pytest.raises(ValidationError):
        PredictionRequestDTO.model_validate({"stationId": ""})


def test_forecast_point_dumps_camel_case() -> None:
    point = ForecastPoint(
        timestamp=datetime(2025, 1, 5, 22, tzinfo=timezone.utc),
        forecasted_demand=123.46,
        temperature=31.2,
        humidity=47,
        hour=22,
        day_of_week=0,
    )

    payload = ForecastPointDTO.from_domain(point).model_dump(by_alias=True, mode="json")

    assert payload == {
        "timestamp": "2025-01-05T22:00:00Z",
        "forecastedDemand": 123.46,
        "temperature": 31.2,
        "humidity": 47,
        "hour": 22,
        "dayOfWeek": 0,
    }


def test_training_result_success_payload() -> None:
    result = TrainingResult.success(
        data_points=120, metrics=TrainingMetrics(final_loss=4.0, mse=3.5, mae=1.5, r2=0.9)
    )

    payload = TrainingResultDTO.from_domain(result).model_dump(
        by_alias=True, mode="json", exclude_none=True
    )

    assert payload == {
        "status": "success",
        "dataPoints": 120,
        "modelType": "linear",
        "metrics": {"finalLoss": 4.0, "mse": 3.5, "mae": 1.5, "r2": 0.9},
    }


def test_already_training_payload_has_only_status() -> None:
    payload = TrainingResultDTO.from_domain(TrainingResult.already_training()).model_dump(
        by_alias=True, mode="json", exclude_none=True
    )
    assert payload == {"status": "already_training"}


def test_status_and_performance_payloads() -> None:
    assert TrainingStatusDTO(trained=True, is_training=False).model_dump(by_alias=True) == {
        "trained": True,
        "isTraining": False,
    }

    performance = ModelPerformanceDTO.from_domain(
        AccuracySummary(average_accuracy=91.25, total_records=10, model_status=ModelStatus.TRAINED)
    )
    assert performance.model_dump(by_alias=True, mode="json") == {
        "averageAccuracy": 91.25,
        "totalRecords": 10,
        "modelStatus": "trained",
    }
