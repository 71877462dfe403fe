"""Completions from the Hugging Face inference API."""

from __future__ import annotations

import json
import os
from enum import IntEnum
from typing import Any, Sequence

import requests

from lingoose.huggingface_http import HuggingFaceAPIError, post_json

__all__ = [
    "API_BASE_URL",
    "HuggingFaceError",
    "HuggingFaceMode",
    "HuggingFace",
]

API_BASE_URL = "https://api-inference.huggingface.co/models/"

_COMPLETION_ERROR = "huggingface completion error"

_REQUEST_ERRORS = (
    requests.RequestException,
    HuggingFaceAPIError,
    ValueError,
    TypeError,
    AttributeError,
)


class HuggingFaceError(Exception):
    """Raised when a Hugging Face completion fails."""


class HuggingFaceMode(IntEnum):
    """Inference task used for completions."""

    CONVERSATIONAL = 0
    TEXT_GENERATION = 1


def _debug_completion(prompt: str, content: str) -> None:
    print(f"---USER---\n{prompt}")
    print(f"---AI---\n{content}")


def _without_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class HuggingFace:
    """Text completion through a hosted inference endpoint."""

    def __init__(
        self,
        model: str,
        temperature: float,
        verbose: bool = False,
        token: str | None = None,
        mode: HuggingFaceMode = HuggingFaceMode.CONVERSATIONAL,
        max_length: int | None = None,
        min_length: int | None = None,
        top_k: int | None = None,
        top_p: float | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.verbose = verbose
        self.token = os.environ.get("HUGGING_FACE_HUB_TOKEN", "") if token is None else token
        self.mode = HuggingFaceMode(mode)
        self.max_length = max_length
        self.min_length = min_length
        self.top_k = top_k
        self.top_p = top_p

    def completion(self, prompt: str) -> str:
        """Return the model's answer to ``prompt``."""
        try:
            if self.mode is HuggingFaceMode.TEXT_GENERATION:
                return self._text_generation([prompt])[0]
            return self._conversational(prompt)
        except (HuggingFaceError, *_REQUEST_ERRORS) as err:
            raise HuggingFaceError(f"{_COMPLETION_ERROR}: {err}") from err

    def batch_completion(self, prompts: Sequence[str]) -> list[str]:
        """Return one answer per prompt; only text generation supports batches."""
        if self.mode is not HuggingFaceMode.TEXT_GENERATION:
            raise HuggingFaceError("batch completion not supported for conversational mode")
        try:
            return self._text_generation(list(prompts))
        except (HuggingFaceError, *_REQUEST_ERRORS) as err:
            raise HuggingFaceError(f"{_COMPLETION_ERROR}: {err}") from err

    def _post(self, payload: dict[str, Any]) -> str:
        return post_json(API_BASE_URL + self.model, self.token, payload)

    def _conversational(self, prompt: str) -> str:
        payload = {
            "inputs": _without_none({"text": prompt or None}),
            "parameters": _without_none(
                {
                    "min_length": self.min_length,
                    "max_length": self.max_length,
                    "top_k": self.top_k,
                    "top_p": self.top_p,
                    "temperature": self.temperature,
                }
            ),
            "options": {"wait_for_model": True},
        }
        body = self._post(payload)
        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError(f"unexpected conversational response: {body}")
        output = data.get("generated_text") or ""
        if self.verbose:
            _debug_completion(prompt, output)
        return output

    def _text_generation(self, prompts: list[str]) -> list[str]:
        payload: dict[str, Any] = {
            "parameters": _without_none(
                {
                    "top_k": self.top_k,
                    "temperature": self.temperature,
                    "num_return_sequences": 1,
                }
            ),
            "options": {"wait_for_model": True},
        }
        if prompts:
            payload["inputs"] = prompts
        body = self._post(payload)
        data = json.loads(body)
        if data is None:
            data = []
        if not isinstance(data, list):
            raise ValueError(f"unexpected text generation response: {body}")
        if len(data) != len(prompts):
            raise HuggingFaceError(
                f"{_COMPLETION_ERROR}: expected {len(prompts)} responses, "
                f"got {len(data)}; response={body}"
            )

        outputs = [""] * len(prompts)
        for position, (prompt, sequences) in enumerate(zip(prompts, data)):
            for sequence in sequences or []:
                text = (sequence or {}).get("generated_text") or ""
                outputs[position] = text.lstrip(prompt).strip()
                if self.verbose:
                    _debug_completion(prompt, outputs[position])
        return outputs