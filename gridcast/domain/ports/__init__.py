"""Domain ports package."""

from .exogenous_source import IExogenousSource
from .health_check import IHealthCheckService

__all__ = ["IExogenousSource", "IHealthCheckService"]
