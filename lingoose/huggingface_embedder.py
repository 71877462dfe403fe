"""Embeddings from the Hugging Face feature-extraction pipeline."""

from __future__ import annotations

import json
import os
from typing import Sequence

from lingoose.embedding import Embedding
from lingoose.huggingface_http import post_json

__all__ = ["API_BASE_URL", "DEFAULT_MODEL", "HuggingFaceEmbedder"]

API_BASE_URL = "https://api-inference.huggingface.co/pipeline/feature-extraction/"
DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


class HuggingFaceEmbedder:
    """Embeds texts through the Hugging Face inference API."""

    def __init__(self, token: str | None = None, model: str = DEFAULT_MODEL) -> None:
        self.token = os.environ.get("HUGGING_FACE_HUB_TOKEN", "") if token is None else token
        self.model = model

    def embed(self, texts: Sequence[str]) -> list[Embedding]:
        """Return one embedding per text."""
        payload: dict = {"options": {"wait_for_model": True}}
        if texts:
            payload["inputs"] = list(texts)
        body = post_json(API_BASE_URL + self.model, self.token, payload)
        return [[float(value) for value in vector] for vector in json.loads(body)]