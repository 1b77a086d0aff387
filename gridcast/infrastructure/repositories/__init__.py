"""
Repositories Package - Infrastructure Layer

MongoDB implementations of the domain repository interfaces.
"""

from .demand_repository import DemandRepository
from .station_repository import StationRepository

__all__ = ["DemandRepository", "StationRepository"]
