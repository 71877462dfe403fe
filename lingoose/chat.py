"""Chat prompt templates built from typed prompt messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable

__all__ = [
    "ChatError",
    "MessageType",
    "Prompt",
    "PromptMessage",
    "Message",
    "Chat",
]


class ChatError(Exception):
    """Raised when chat prompt messages cannot be turned into messages."""


class MessageType(str, Enum):
    """Role of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"


@runtime_checkable
class Prompt(Protocol):
    """A prompt renders to text and can be formatted with inputs."""

    def __str__(self) -> str: ...

    def format(self, inputs: Mapping[str, Any]) -> None: ...


@dataclass
class PromptMessage:
    """A prompt together with the role it plays in a chat."""

    type: MessageType
    prompt: Prompt | None = None
    name: str | None = None


@dataclass
class Message:
    """A rendered chat message."""

    type: MessageType
    content: str = ""
    name: str | None = None


class Chat:
    """An ordered collection of prompt messages."""

    def __init__(self, *args: PromptMessage) -> None:
        self._prompt_messages: list[PromptMessage] = list(args)

    def add_prompt_messages(self, messages) -> None:
        """Append prompt messages to the chat."""
        self._prompt_messages.extend(messages)

    def to_messages(self) -> list[Message]:
        """Render every prompt message, formatting prompts not yet rendered."""
        messages = []
        for prompt_message in self._prompt_messages:
            content = ""
            prompt = prompt_message.prompt
            if prompt is not None:
                if not str(prompt):
                    try:
                        prompt.format({})
                    except Exception as err:
                        raise ChatError(f"unable to convert chat messages: {err}") from err
                content = str(prompt)
            messages.append(
                Message(type=prompt_message.type, content=content, name=prompt_message.name)
            )
        return messages

    @property
    def prompt_messages(self) -> list[PromptMessage]:
        """The prompt messages of the chat, in order."""
        return list(self._prompt_messages)