"""HTTP helpers shared by the Hugging Face inference clients."""

from __future__ import annotations

import json
from typing import Any

import requests

__all__ = ["HuggingFaceAPIError", "check_response_for_error", "post_json"]


class HuggingFaceAPIError(Exception):
    """Raised when the inference API answers with an error body."""


def check_response_for_error(body: str | bytes) -> None:
    """Raise HuggingFaceAPIError if ``body`` is an API error object.

    A body that is not a JSON object is never treated as an error.
    """
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        parsed = json.loads(text)
    except ValueError:
        return
    if not isinstance(parsed, dict):
        return
    error = parsed.get("error")
    if isinstance(error, str) and error:
        raise HuggingFaceAPIError(text)
    if isinstance(error, list):
        raise HuggingFaceAPIError(text)


def post_json(url: str, token: str, payload: Any) -> str:
    """POST ``payload`` as JSON with a bearer token and return the checked body."""
    response = requests.post(
        url,
        data=json.dumps(payload),
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        },
    )
    body = response.text
    check_response_for_error(body)
    return body