"""Shared pieces of vector indexes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence, runtime_checkable

from lingoose.embedding import Document

__all__ = [
    "DEFAULT_KEY_ID",
    "DEFAULT_KEY_CONTENT",
    "IndexInternalError",
    "Embedder",
    "SearchResponse",
    "SearchResponses",
    "filter_search_responses",
    "deep_copy_metadata",
]

DEFAULT_KEY_ID = "id"
DEFAULT_KEY_CONTENT = "content"


class IndexInternalError(Exception):
    """Raised when an index operation fails."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"internal index error: {detail}")


@runtime_checkable
class Embedder(Protocol):
    """Turns texts into embedding vectors."""

    def embed(self, texts: Sequence[str]) -> list[list[float]]: ...


@dataclass
class SearchResponse:
    """A document found by a similarity search."""

    id: str
    document: Document
    score: float


class SearchResponses(list):
    """A list of search responses."""

    def to_documents(self) -> list[Document]:
        return [response.document for response in self]


def filter_search_responses(
    search_responses: Iterable[SearchResponse], top_k: int
) -> SearchResponses:
    """Sort responses by descending score and keep the best ``top_k``."""
    if top_k < 0:
        raise ValueError("top_k must not be negative")
    ordered = sorted(search_responses, key=lambda r: r.score, reverse=True)
    return SearchResponses(ordered[:top_k])


def deep_copy_metadata(metadata: dict[str, Any] | None) -> dict[str, Any]:
    """Return a new metadata mapping with the same entries."""
    return dict(metadata or {})