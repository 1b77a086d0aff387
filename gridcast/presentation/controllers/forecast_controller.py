"""
Presentation Layer - Forecast Controller

FastAPI routes for training the model, generating forecasts and
reporting historical accuracy.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from gridcast.application.dtos.performance_dto import ModelPerformanceDTO
from gridcast.application.dtos.prediction_dto import (
    ForecastPointDTO,
    PredictionRequestDTO,
)
from gridcast.application.dtos.training_dto import TrainingResultDTO, TrainingStatusDTO
from gridcast.application.use_cases.model_performance_use_case import (
    ModelPerformanceUseCase,
)
from gridcast.application.use_cases.model_prediction_use_case import (
    ModelPredictionUseCase,
)
from gridcast.application.use_cases.model_training_use_case import (
    ModelTrainingUseCase,
)
from gridcast.domain.entities.errors import (
    InsufficientDataError,
    InvalidRangeError,
    ModelNotTrainedError,
    ModelTrainingError,
    StationNotFoundError,
)
from gridcast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Forecasting"])


@router.post(
    "/train-model",
    response_model=TrainingResultDTO,
    response_model_exclude_none=True,
    summary="Train the demand forecast model",
    description="""
    Fit the linear demand model on every stored record with an observed demand.

    Only one training run happens at a time: a request arriving while another
    run is in progress returns `already_training` without doing anything.
    Forecasts keep using the previous model until the new fit completes.
    """,
)
@inject
async def train_model(
    training_use_case: ModelTrainingUseCase = Depends(
        Provide[AppContainer.model_training_use_case]
    ),
) -> TrainingResultDTO:
    try:
        return await training_use_case.execute()
    except InsufficientDataError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        )
    except ModelTrainingError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
        )
    except Exception as e:
        logger.error("training.unexpected_error", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get(
    "/training-status",
    response_model=TrainingStatusDTO,
    summary="Whether a model is trained and whether training is running",
)
@inject
async def training_status(
    training_use_case: ModelTrainingUseCase = Depends(
        Provide[AppContainer.model_training_use_case]
    ),
) -> TrainingStatusDTO:
    return training_use_case.status()


@router.post(
    "/predict",
    response_model=List[ForecastPointDTO],
    summary="Forecast hourly demand for a station",
    description="""
    Forecast each hour from `startDate` (inclusive) to `endDate` (exclusive).
    An empty or inverted range returns an empty list.
    """,
)
@inject
async def predict(
    request: PredictionRequestDTO,
    prediction_use_case: ModelPredictionUseCase = Depends(
        Provide[AppContainer.model_prediction_use_case]
    ),
) -> List[ForecastPointDTO]:
    try:
        return await prediction_use_case.execute(
            request.station_id, request.start_date, request.end_date
        )
    except InvalidRangeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ModelNotTrainedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except Exception as e:
        logger.error(
            "prediction.unexpected_error",
            station_id=request.station_id,
            error=str(e),
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get(
    "/model-performance",
    response_model=ModelPerformanceDTO,
    summary="Average accuracy of stored forecasts",
)
@inject
async def model_performance(
    performance_use_case: ModelPerformanceUseCase = Depends(
        Provide[AppContainer.model_performance_use_case]
    ),
) -> ModelPerformanceDTO:
    try:
        return await performance_use_case.execute()
    except Exception as e:
        logger.error("performance.unexpected_error", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
