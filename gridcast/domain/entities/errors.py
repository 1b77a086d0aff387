"""
Domain Errors

Every failure the forecasting pipeline can surface to its caller. The
controllers map each class to a distinct HTTP status.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InsufficientDataError(DomainError):
    """Raised when there are too few usable records to fit a model."""

    def __init__(self, available: int, required: int):
        message = (
            f"Not enough data to train: {available} usable records, "
            f"at least {required} required"
        )
        super().__init__(message, {"available": available, "required": required})
        self.available = available
        self.required = required


class ModelNotTrainedError(DomainError):
    """Raised when a forecast is requested before any successful training."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Model not trained", details)


class StationNotFoundError(DomainError):
    """Raised when a station cannot be found."""

    def __init__(self, station_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"Station with ID {station_id} not found"
        super().__init__(message, details)
        self.station_id = station_id


class InvalidRangeError(DomainError):
    """Raised when forecast range bounds are missing or cannot be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ModelTrainingError(DomainError):
    """Raised when fitting the regression model fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
