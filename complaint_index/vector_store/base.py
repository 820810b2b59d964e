"""
Vector index interface and shared types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

DEFAULT_NAMESPACE = ""


@dataclass
class StoredRecord:
    id: str
    values: List[float]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "values": self.values, "metadata": self.metadata}


@dataclass
class Match:
    id: str
    score: float
    values: List[float] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


class VectorIndex(Protocol):
    def upsert(self, records: List[StoredRecord], namespace: str = DEFAULT_NAMESPACE) -> None:
        ...

    def query(
        self,
        vector: List[float],
        top_k: int,
        include_values: bool = False,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> List[Match]:
        ...


__all__ = ["DEFAULT_NAMESPACE", "StoredRecord", "Match", "VectorIndex"]
