"""Domain services: pure computations over domain entities."""

from .accuracy_reporter import summarize_accuracy
from .forecast_generator import ForecastSequence, hourly_range, round_half_up

__all__ = ["ForecastSequence", "hourly_range", "round_half_up", "summarize_accuracy"]
