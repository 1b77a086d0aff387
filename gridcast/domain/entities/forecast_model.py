"""
Domain Entities - Forecast Model Handle

The process owns exactly one forecasting model. The handle holds the
fitted regressor together with the training-in-progress flag and is
the only place either may change.

The regressor itself is opaque to the domain: anything exposing
``predict(batch) -> array`` of shape (n, 1) qualifies.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from gridcast.domain.entities.training import (
    ModelStatus,
    TrainingState,
    TrainingStatusSnapshot,
)


class ForecastModelHandle:
    """Owns the fitted regressor and the Idle/Training state machine."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = TrainingState.IDLE
        self._regressor: Optional[Any] = None

    @property
    def state(self) -> TrainingState:
        return self._state

    @property
    def is_training(self) -> bool:
        return self._state is TrainingState.TRAINING

    @property
    def trained(self) -> bool:
        return self._regressor is not None

    @property
    def model_status(self) -> ModelStatus:
        return ModelStatus.TRAINED if self.trained else ModelStatus.NOT_TRAINED

    def try_begin_training(self) -> bool:
        """
        Atomically move Idle -> Training.

        Returns:
            False when a training run is already in progress; nothing
            changes in that case.
        """
        with self._lock:
            if self._state is TrainingState.TRAINING:
                return False
            self._state = TrainingState.TRAINING
            return True

    def complete_training(self, regressor: Any) -> None:
        """Swap in the newly fitted regressor and return to Idle."""
        with self._lock:
            self._regressor = regressor
            self._state = TrainingState.IDLE

    def abort_training(self) -> None:
        """Return to Idle keeping whatever regressor was fitted before."""
        with self._lock:
            self._state = TrainingState.IDLE

    def snapshot(self) -> Optional[Any]:
        """The regressor at this instant, or None if never trained."""
        with self._lock:
            return self._regressor

    def status(self) -> TrainingStatusSnapshot:
        with self._lock:
            return TrainingStatusSnapshot(
                trained=self._regressor is not None,
                is_training=self._state is TrainingState.TRAINING,
            )
