"""
Repositories Package

Interfaces for the storage collaborator. Implementations live in the
infrastructure layer.
"""

from .demand_repository import IDemandRepository
from .station_repository import IStationRepository

__all__ = ["IDemandRepository", "IStationRepository"]
