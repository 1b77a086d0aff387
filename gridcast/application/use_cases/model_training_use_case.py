"""
Application Use Cases - Model Training

Owns the training lifecycle of the process-wide forecast model:
guarding against concurrent runs, extracting features from the demand
history, fitting a single-layer linear network and swapping it in.
"""

import asyncio
import time
from typing import Any, Callable, Optional, Tuple

import numpy as np
import structlog
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from tensorflow.keras.layers import Dense, Input  # type: ignore
from tensorflow.keras.models import Sequential  # type: ignore
from tensorflow.keras.optimizers import Adam  # type: ignore

from gridcast.application.dtos.training_dto import TrainingResultDTO, TrainingStatusDTO
from gridcast.application.use_cases.feature_extraction_use_case import (
    FeatureExtractionUseCase,
)
from gridcast.domain.entities.errors import InsufficientDataError, ModelTrainingError
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.domain.entities.training import TrainingMetrics, TrainingResult
from gridcast.domain.repositories.demand_repository import IDemandRepository
from gridcast.shared.consts import FEATURE_COUNT

logger = structlog.get_logger(__name__)

ModelBuilder = Callable[[int], Any]


class ModelTrainingUseCase:
    """Use case for training the demand forecast model."""

    def __init__(
        self,
        demand_repository: IDemandRepository,
        model_handle: ForecastModelHandle,
        feature_extractor: Optional[FeatureExtractionUseCase] = None,
        model_builder: Optional[ModelBuilder] = None,
        epochs: int = 50,
        learning_rate: float = 0.001,
        min_data_points: int = 50,
        timeout_seconds: float = 600.0,
    ):
        """
        Initialize the model training use case.

        Args:
            demand_repository: Source of historical demand records
            model_handle: The process-wide model and its training flag
            feature_extractor: Builds (features, targets) from records
            model_builder: Returns a compiled model for a given input width;
                defaults to a Keras Dense(1) network
            epochs: Full-batch passes over the training data
            learning_rate: Adam learning rate
            min_data_points: Fewest usable records a fit is attempted with
            timeout_seconds: Upper bound on a single fit
        """
        self.demand_repository = demand_repository
        self.model_handle = model_handle
        self.feature_extractor = feature_extractor or FeatureExtractionUseCase()
        self._model_builder = model_builder or self._build_model
        self.epochs = epochs
        self.learning_rate = learning_rate
        self.min_data_points = min_data_points
        self.timeout_seconds = timeout_seconds
        self._release_on_settle = False

    async def execute(self) -> TrainingResultDTO:
        """
        Start a training run.

        Returns:
            ``already_training`` when another run holds the model, otherwise
            the result of the completed fit.

        Raises:
            InsufficientDataError: Fewer usable records than required
            ModelTrainingError: When fitting fails or times out
        """
        if not self.model_handle.try_begin_training():
            logger.info("training.already_running")
            return TrainingResultDTO.from_domain(TrainingResult.already_training())

        self._release_on_settle = False
        logger.info("training.started", epochs=self.epochs)

        try:
            result = await self._train()
        except InsufficientDataError as e:
            self.model_handle.abort_training()
            logger.warning(
                "training.insufficient_data",
                available=e.available,
                required=e.required,
            )
            raise
        except asyncio.CancelledError:
            if not self._release_on_settle:
                self.model_handle.abort_training()
            logger.warning("training.cancelled")
            raise
        except asyncio.TimeoutError as e:
            if not self._release_on_settle:
                self.model_handle.abort_training()
            logger.error("training.timed_out", timeout_seconds=self.timeout_seconds)
            raise ModelTrainingError(
                f"Model training timed out after {self.timeout_seconds} seconds"
            ) from e
        except Exception as e:
            self.model_handle.abort_training()
            logger.error("training.failed", error=str(e), exc_info=e)
            raise ModelTrainingError(f"Model training failed: {e}") from e

        return TrainingResultDTO.from_domain(result)

    def status(self) -> TrainingStatusDTO:
        return TrainingStatusDTO.from_domain(self.model_handle.status())

    async def _train(self) -> TrainingResult:
        start_time = time.time()

        records = await self.demand_repository.find_all()
        features, targets = self.feature_extractor.execute(records)

        if len(features) < self.min_data_points:
            raise InsufficientDataError(len(features), self.min_data_points)

        fit_task = asyncio.ensure_future(
            asyncio.to_thread(self._fit, features, targets)
        )
        try:
            model, metrics = await asyncio.wait_for(
                asyncio.shield(fit_task), timeout=self.timeout_seconds
            )
        except (asyncio.TimeoutError, asyncio.CancelledError):
            # The worker thread cannot be interrupted, so the guard stays
            # held until it finishes
            self._release_on_settle = True
            fit_task.add_done_callback(self._release_after_abandoned_fit)
            raise

        self.model_handle.complete_training(model)

        logger.info(
            "training.completed",
            data_points=len(features),
            training_duration=time.time() - start_time,
            final_loss=metrics.final_loss,
            r2=metrics.r2,
        )

        return TrainingResult.success(data_points=len(features), metrics=metrics)

    def _release_after_abandoned_fit(self, fit_task: "asyncio.Future[Any]") -> None:
        """Return to Idle once an abandoned fit stops; its model is dropped."""

        error = None if fit_task.cancelled() else fit_task.exception()
        self.model_handle.abort_training()
        logger.info(
            "training.abandoned_fit_settled",
            error=str(error) if error else None,
        )

    def _fit(
        self, features: np.ndarray, targets: np.ndarray
    ) -> Tuple[Any, TrainingMetrics]:
        """Fit a fresh model full-batch, in input order. Runs off the event loop."""

        model = self._model_builder(features.shape[1])

        history = model.fit(
            features,
            targets,
            epochs=self.epochs,
            batch_size=len(features),
            shuffle=False,
            verbose=0,
        )

        y_true = targets.reshape(-1)
        y_pred = np.asarray(model.predict(features, verbose=0)).reshape(-1)
        losses = history.history.get("loss") or [float("nan")]

        metrics = TrainingMetrics(
            final_loss=float(losses[-1]),
            mse=float(mean_squared_error(y_true, y_pred)),
            mae=float(mean_absolute_error(y_true, y_pred)),
            r2=float(r2_score(y_true, y_pred)),
        )
        return model, metrics

    def _build_model(self, n_features: int = FEATURE_COUNT) -> Sequential:
        """Single Dense unit over the raw features: linear regression."""

        model = Sequential()
        model.add(Input(shape=(n_features,)))
        model.add(Dense(1))

        model.compile(
            optimizer=Adam(learning_rate=self.learning_rate),
            loss="mean_squared_error",
        )

        logger.debug("training.model_built", total_params=model.count_params())

        return model
