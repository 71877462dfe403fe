"""Embeddings computed by a local llama.cpp embedding binary."""

from __future__ import annotations

import os
import subprocess
from typing import Sequence

from lingoose.embedding import Embedding

__all__ = ["LlamaCppEmbedder", "parse_embeddings"]

DEFAULT_LLAMACPP_PATH = "./llama.cpp/embedding"
DEFAULT_MODEL_PATH = "./llama.cpp/models/7B/ggml-model-q4_0.bin"


def parse_embeddings(text: str) -> Embedding:
    """Parse space separated floats; raises ValueError on a bad value."""
    return [float(part) for part in text.strip().split(" ")]


class LlamaCppEmbedder:
    """Runs the llama.cpp embedding program once per text."""

    def __init__(
        self,
        llamacpp_path: str = DEFAULT_LLAMACPP_PATH,
        model_path: str = DEFAULT_MODEL_PATH,
        args: Sequence[str] = (),
    ) -> None:
        self.llamacpp_path = llamacpp_path
        self.model_path = model_path
        self.args = list(args)

    def embed(self, texts: Sequence[str]) -> list[Embedding]:
        """Return one embedding per text."""
        return [self._embed(text) for text in texts]

    def _embed(self, text: str) -> Embedding:
        os.stat(self.llamacpp_path)
        command = [self.llamacpp_path, "-m", self.model_path, "-p", text, *self.args]
        result = subprocess.run(command, check=True, capture_output=True, text=True)
        return parse_embeddings(result.stdout)