"""
File-system record store for pairs and pair groups.

Layout under root:
    pairs/<pair-id>         one JSON object per pair
    pair_groups/<group-id>  one JSON object per pair group, pairs as ids

Reading a group re-reads every pair it names; a missing pair file makes the
group unreadable. Updating a group writes its pairs first, then the group
record. Nothing here locks: concurrent callers can observe a group written
before its pairs, and a cancelled update can leave partial files behind.
"""
import logging
from pathlib import Path
from typing import Any

from models.pair import Pair
from models.pair_group import PairGroup, PairGroupRecord
from storage.base import PairGroupsDataAccess
from storage.errors import StoreError
from storage.json_store import JSONStore

logger = logging.getLogger("pair_store")

PAIRS_DIR_NAME = "pairs"
PAIR_GROUPS_DIR_NAME = "pair_groups"


class RecordStore(PairGroupsDataAccess):
    def __init__(self, root: str | Path):
        self._store = JSONStore(root)

    @property
    def root(self) -> Path:
        return self._store.root

    async def fetch_pair_groups(self) -> list[PairGroup]:
        """All pair groups with hydrated pairs. Order follows the directory listing."""
        pair_groups = []
        for group_id in self._store.list_names(PAIR_GROUPS_DIR_NAME):
            pair_groups.append(self._read_pair_group(group_id))
        logger.info("Fetched %d pair groups from %s", len(pair_groups), self.root)
        return pair_groups

    async def update_pair_group(self, pair_group: PairGroup) -> None:
        """Replace an existing pair group. Not an upsert: a missing group is an error."""
        if not self._store.exists(PAIR_GROUPS_DIR_NAME, pair_group.id):
            raise StoreError(f"Pair group to update does not exist: {pair_group.id}")
        self._write_pair_group(pair_group)
        logger.info("Updated pair group %s (%d pairs)", pair_group.id, len(pair_group.pairs))

    def _load(self, name: str, record_id: str, cls: Any) -> Any:
        data = self._store.read_json(name, record_id)
        try:
            return cls.from_dict(data)
        except ValueError as e:
            raise StoreError(f"Invalid record {self.root / name / record_id}: {e}") from e

    def _read_pair(self, pair_id: str) -> Pair:
        return self._load(PAIRS_DIR_NAME, pair_id, Pair)

    def _read_pair_group(self, group_id: str) -> PairGroup:
        record: PairGroupRecord = self._load(PAIR_GROUPS_DIR_NAME, group_id, PairGroupRecord)
        return record.hydrate(self._read_pair(pid) for pid in record.pairs)

    def _write_pair(self, pair: Pair) -> None:
        self._store.write_json(PAIRS_DIR_NAME, pair.id, pair.to_dict())

    def _write_pair_group(self, pair_group: PairGroup) -> None:
        """Write member pairs, then the group record holding their ids."""
        for pair in pair_group.pairs:
            self._write_pair(pair)
        record = PairGroupRecord.from_group(pair_group)
        self._store.write_json(PAIR_GROUPS_DIR_NAME, pair_group.id, record.to_dict())
