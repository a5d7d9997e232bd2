"""
PairGroup model and its on-disk record.

In memory a PairGroup carries fully hydrated Pair values. On disk the group
only keeps the ordered ids of its pairs; each pair lives in its own file.
PairGroupRecord is the disk shape, PairGroup the domain shape.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from models.pair import Pair, require


@dataclass
class PairGroup:
    id: str
    is_pinned: bool = False
    pairs: list[Pair] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def pair_ids(self) -> list[str]:
        return [p.id for p in self.pairs]


@dataclass
class PairGroupRecord:
    """pair_groups/<id> record: PairGroup with pairs replaced by pair ids."""

    id: str
    is_pinned: bool = False
    pairs: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "is_pinned": self.is_pinned,
            "pairs": list(self.pairs),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PairGroupRecord:
        if not isinstance(d, dict):
            raise ValueError(f"expected object, got {type(d).__name__}")
        pair_ids = require(d, "pairs", list)
        for pid in pair_ids:
            if not isinstance(pid, str):
                raise ValueError(f"pair id {pid!r} is not a string")
        return cls(
            id=require(d, "id", str),
            is_pinned=require(d, "is_pinned", bool),
            pairs=list(pair_ids),
            created_at=require(d, "created_at", str),
            updated_at=require(d, "updated_at", str),
        )

    @classmethod
    def from_group(cls, group: PairGroup) -> PairGroupRecord:
        """Dehydrate: keep only member pair ids, in order."""
        return cls(
            id=group.id,
            is_pinned=group.is_pinned,
            pairs=group.pair_ids(),
            created_at=group.created_at,
            updated_at=group.updated_at,
        )

    def hydrate(self, pairs: Iterable[Pair]) -> PairGroup:
        """Build the domain PairGroup from this record and its loaded pairs."""
        return PairGroup(
            id=self.id,
            is_pinned=self.is_pinned,
            pairs=list(pairs),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
