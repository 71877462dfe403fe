"""Embedding vectors and the documents they describe."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = ["Embedding", "Document", "to_float32"]

Embedding = list[float]


def to_float32(embedding: Sequence[float]) -> list[float]:
    """Return the embedding with each value rounded to single precision."""
    return array("f", embedding).tolist()


@dataclass
class Document:
    """Text content with arbitrary metadata."""

    content: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "metadata": self.metadata}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        return cls(content=data.get("content", ""), metadata=dict(data.get("metadata") or {}))