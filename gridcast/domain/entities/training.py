"""
Domain Entities - Training

Results and status values reported by the training job. Rejecting a
concurrent start is a result (ALREADY_TRAINING), not an error.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from gridcast.shared.consts import MODEL_TYPE_LINEAR


class TrainingState(str, Enum):
    """Lifecycle of the training job."""

    IDLE = "idle"
    TRAINING = "training"


class TrainingResultStatus(str, Enum):
    SUCCESS = "success"
    ALREADY_TRAINING = "already_training"


class ModelStatus(str, Enum):
    TRAINED = "trained"
    NOT_TRAINED = "not_trained"


@dataclass
class TrainingMetrics:
    """In-sample fit quality of the last training run."""

    final_loss: Optional[float] = None
    mse: Optional[float] = None
    mae: Optional[float] = None
    r2: Optional[float] = None


@dataclass
class TrainingResult:
    """Outcome of a call to start training."""

    status: TrainingResultStatus
    data_points: Optional[int] = None
    model_type: Optional[str] = None
    metrics: Optional[TrainingMetrics] = None
    finished_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def already_training(cls) -> "TrainingResult":
        return cls(status=TrainingResultStatus.ALREADY_TRAINING)

    @classmethod
    def success(cls, data_points: int, metrics: TrainingMetrics) -> "TrainingResult":
        return cls(
            status=TrainingResultStatus.SUCCESS,
            data_points=data_points,
            model_type=MODEL_TYPE_LINEAR,
            metrics=metrics,
        )


@dataclass(frozen=True)
class TrainingStatusSnapshot:
    """Read-only view of the training job."""

    trained: bool
    is_training: bool
