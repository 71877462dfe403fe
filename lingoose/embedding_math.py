"""Vector helpers for combining chunk embeddings."""

from __future__ import annotations

import math
from typing import Sequence

from lingoose.embedding import Embedding

__all__ = ["average", "norm", "normalize_embeddings"]


def average(embeddings: Sequence[Sequence[float]], lens: Sequence[float]) -> Embedding:
    """Weighted average of the embeddings, each weighted by its length."""
    if not embeddings:
        raise ValueError("no embeddings to average")
    result = [0.0] * len(embeddings[0])
    total_weight = 0.0
    for embedding, weight in zip(embeddings, lens):
        total_weight += weight
        for position, value in enumerate(embedding):
            result[position] += value * weight
    return [value / total_weight for value in result]


def norm(vector: Sequence[float]) -> float:
    """Euclidean norm of a vector."""
    total = 0.0
    for value in vector:
        total += value**2
    return math.sqrt(total)


def normalize_embeddings(
    embeddings: Sequence[Sequence[float]], lens: Sequence[float]
) -> Embedding:
    """Weighted average of the embeddings scaled to unit length."""
    averaged = average(embeddings, lens)
    length = norm(averaged)
    return [value / length for value in averaged]