"""Text completion with a local llama.cpp binary."""

from __future__ import annotations

import os
import re
import subprocess
from typing import Sequence

__all__ = [
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "LlamaCpp",
    "sanitize_output",
]

DEFAULT_MAX_TOKENS = 256
DEFAULT_TEMPERATURE = 0.8
DEFAULT_LLAMACPP_PATH = "./llama.cpp/main"
DEFAULT_MODEL_PATH = "./llama.cpp/models/7B/ggml-model-q4_0.bin"

_SANITIZE = re.compile(r"\[.*?\]")


def sanitize_output(text: str) -> str:
    """Remove bracketed markers such as ``[end of text]``."""
    return _SANITIZE.sub("", text)


class LlamaCpp:
    """Completion model backed by the llama.cpp main program."""

    def __init__(
        self,
        llamacpp_path: str = DEFAULT_LLAMACPP_PATH,
        model_path: str = DEFAULT_MODEL_PATH,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        verbose: bool = False,
        args: Sequence[str] = (),
    ) -> None:
        self.llamacpp_path = llamacpp_path
        self.model_path = model_path
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.verbose = verbose
        self.args = list(args)

    def completion(self, prompt: str) -> str:
        """Run the model on ``prompt`` and return its cleaned output."""
        os.stat(self.llamacpp_path)
        command = [
            self.llamacpp_path,
            "-m",
            self.model_path,
            "-p",
            prompt,
            "-n",
            str(self.max_tokens),
            "--temp",
            f"{self.temperature:.2f}",
            *self.args,
        ]
        result = subprocess.run(command, check=True, capture_output=True, text=True)
        output = result.stdout
        if self.verbose:
            print(f"---USER---\n{prompt}")
            print(f"---AI---\n{output}")
        return sanitize_output(output)