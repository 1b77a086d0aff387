"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .synthetic_exogenous_source import SyntheticExogenousSource

__all__ = ["HealthCheckService", "SyntheticExogenousSource"]
