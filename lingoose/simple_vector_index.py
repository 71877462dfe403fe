"""A vector index kept in a JSON file on disk."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from typing import Callable, Sequence

from lingoose.embedding import Document, Embedding
from lingoose.index import (
    DEFAULT_KEY_ID,
    Embedder,
    IndexInternalError,
    SearchResponse,
    SearchResponses,
    filter_search_responses,
)

__all__ = ["SimpleVectorIndex", "cosine_similarity"]

DEFAULT_BATCH_SIZE = 32
DEFAULT_TOP_K = 10

FilterFn = Callable[[list[SearchResponse]], list[SearchResponse]]


@dataclass
class _Entry:
    document: Document
    embedding: Embedding


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors; zero when either has zero norm."""
    if len(b) < len(a):
        raise ValueError("second vector is shorter than the first")
    dot = norm_a = norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


class SimpleVectorIndex:
    """Stores documents and their embeddings in ``<output_path>/<name>.json``."""

    def __init__(self, name: str, output_path: str, embedder: Embedder) -> None:
        self.name = name
        self.output_path = output_path
        self.embedder = embedder
        self._data: list[_Entry] = []

    @property
    def database(self) -> str:
        return os.path.join(self.output_path, self.name + ".json")

    def load_from_documents(self, documents: list[Document]) -> None:
        """Embed the documents, tag them with their position and save the index."""
        self._data = []
        for start in range(0, len(documents), DEFAULT_BATCH_SIZE):
            batch = documents[start : start + DEFAULT_BATCH_SIZE]
            try:
                embeddings = self.embedder.embed([doc.content for doc in batch])
            except Exception as err:
                raise IndexInternalError(err) from err
            for offset, (document, embedding) in enumerate(zip(batch, embeddings)):
                self._data.append(_Entry(document=document, embedding=list(embedding)))
                document.metadata[DEFAULT_KEY_ID] = str(start + offset)
        try:
            self._save()
        except (OSError, TypeError, ValueError) as err:
            raise IndexInternalError(err) from err

    def _save(self) -> None:
        payload = [
            {"document": entry.document.to_dict(), "embedding": entry.embedding}
            for entry in self._data
        ]
        with open(self.database, "w", encoding="utf-8") as handle:
            json.dump(payload, handle)

    def _load(self) -> None:
        try:
            with open(self.database, encoding="utf-8") as handle:
                payload = json.load(handle)
            self._data = [
                _Entry(
                    document=Document.from_dict(item["document"]),
                    embedding=list(item["embedding"]),
                )
                for item in payload or []
            ]
        except (OSError, ValueError, KeyError, TypeError) as err:
            raise IndexInternalError(err) from err

    def is_empty(self) -> bool:
        """Whether the saved index holds no documents."""
        self._load()
        return not self._data

    def similarity_search(
        self, query: str, top_k: int = DEFAULT_TOP_K, filter: FilterFn | None = None
    ) -> SearchResponses:
        """Return the documents closest to the query, best first."""
        self._load()
        try:
            embeddings = self.embedder.embed([query])
        except Exception as err:
            raise IndexInternalError(err) from err
        query_embedding = embeddings[0]

        responses = [
            SearchResponse(
                id=entry.document.metadata[DEFAULT_KEY_ID],
                document=entry.document,
                score=cosine_similarity(query_embedding, entry.embedding),
            )
            for entry in self._data
        ]
        if filter is not None:
            responses = filter(responses)
        return filter_search_responses(responses, top_k)