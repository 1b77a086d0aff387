"""Station Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional

from gridcast.domain.entities.station import Station


class IStationRepository(ABC):
    """Interface for Station repository implementations."""

    @abstractmethod
    async def find_by_id(self, station_id: str) -> Optional[Station]:
        """
        Find a station by its ID.

        Args:
            station_id: The opaque identifier of the station

        Returns:
            The station if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Station]:
        """Return all stations ordered by name."""
        pass

    @abstractmethod
    async def create(self, station: Station) -> Station:
        """Persist a new station and return it."""
        pass
