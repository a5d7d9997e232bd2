"""Data access interface used to view and edit pair groups."""
from abc import ABC, abstractmethod

from models.pair_group import PairGroup


class PairGroupsDataAccess(ABC):
    @abstractmethod
    async def fetch_pair_groups(self) -> list[PairGroup]:
        """Return every stored pair group with its pairs loaded."""
        raise NotImplementedError

    @abstractmethod
    async def update_pair_group(self, pair_group: PairGroup) -> None:
        """Replace an existing pair group and write all of its pairs."""
        raise NotImplementedError
