"""In-memory conversation history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["HistoryMessage", "HistoryRam"]


@dataclass
class HistoryMessage:
    """One entry of the history."""

    content: str
    meta: dict[str, Any] | None = field(default=None)


class HistoryRam:
    """History kept in memory."""

    def __init__(self) -> None:
        self._history: list[HistoryMessage] = []

    def add(self, content: str, meta: dict[str, Any] | None = None) -> None:
        self._history.append(HistoryMessage(content=content, meta=meta))

    def all(self) -> list[HistoryMessage]:
        return list(self._history)

    def clear(self) -> None:
        self._history = []