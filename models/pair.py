"""Pair model for pairs/<id> records."""
from dataclasses import dataclass
from typing import Any


def require(d: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    """Return d[key]; raise ValueError if missing or not of the given JSON type."""
    if key not in d:
        raise ValueError(f"missing field '{key}'")
    value = d[key]
    # bool is an int subclass; never accept it where a number is expected
    if isinstance(value, bool) and bool not in (kind if isinstance(kind, tuple) else (kind,)):
        raise ValueError(f"field '{key}' has wrong type bool")
    if not isinstance(value, kind):
        raise ValueError(f"field '{key}' has wrong type {type(value).__name__}")
    return value


@dataclass
class Pair:
    id: str
    base: str
    comparison: str
    value: float
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "base": self.base,
            "comparison": self.comparison,
            "value": self.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Pair":
        if not isinstance(d, dict):
            raise ValueError(f"expected object, got {type(d).__name__}")
        return cls(
            id=require(d, "id", str),
            base=require(d, "base", str),
            comparison=require(d, "comparison", str),
            value=float(require(d, "value", (int, float))),
            created_at=require(d, "created_at", str),
            updated_at=require(d, "updated_at", str),
        )
