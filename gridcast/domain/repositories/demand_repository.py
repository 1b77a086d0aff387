"""
Demand Repository Interface

Read access to the historical demand records used for training and
for the accuracy rollup.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from gridcast.domain.entities.demand import DemandRecord


class IDemandRepository(ABC):
    """Interface for DemandRecord repository implementations."""

    @abstractmethod
    async def find_all(self) -> List[DemandRecord]:
        """
        Fetch every stored demand record.

        Returns:
            Records ordered by date, newest first
        """
        pass

    @abstractmethod
    async def insert_many(self, records: Sequence[DemandRecord]) -> int:
        """
        Store demand records.

        Args:
            records: Records to insert

        Returns:
            Number of records inserted
        """
        pass
