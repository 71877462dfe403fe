import pytest

from lingoose.chat import Chat, ChatError, Message, MessageType, PromptMessage


class _TemplatePrompt:
    def __init__(self, template, inputs=None):
        self._template = template
        self._inputs = dict(inputs or {})
        self._value = ""

    def format(self, inputs):
        merged = {**self._inputs, **inputs}
        self._value = self._template.format_map(merged)

    def __str__(self):
        return self._value


class _TextPrompt:
    def __init__(self, text):
        self._text = text

    def format(self, inputs):
        pass

    def __str__(self):
        return self._text


def test_to_messages_source_case():
    prompt1 = _TemplatePrompt(
        "You are a helpful assistant that translates {input_language} to {output_language}.",
        {"input_language": "English", "output_language": "Spanish"},
    )
    prompt2 = _TextPrompt("What is your name?")
    chat = Chat(
        PromptMessage(type=MessageType.SYSTEM, prompt=prompt1),
        PromptMessage(type=MessageType.USER, prompt=prompt2),
    )
    assert chat.to_messages() == [
        Message(
            type=MessageType.SYSTEM,
            content="You are a helpful assistant that translates English to Spanish.",
        ),
        Message(type=MessageType.USER, content="What is your name?"),
    ]


def test_missing_prompt_gives_empty_content_and_keeps_name():
    chat = Chat(PromptMessage(type=MessageType.FUNCTION, name="lookup"))
    assert chat.to_messages() == [Message(type=MessageType.FUNCTION, content="", name="lookup")]


def test_format_failure_raises_chat_error():
    chat = Chat(PromptMessage(type=MessageType.USER, prompt=_TemplatePrompt("{missing}")))
    with pytest.raises(ChatError, match="unable to convert chat messages"):
        chat.to_messages()


def test_add_prompt_messages_appends_in_order():
    first = PromptMessage(type=MessageType.SYSTEM, prompt=_TextPrompt("a"))
    second = PromptMessage(type=MessageType.USER, prompt=_TextPrompt("b"))
    chat = Chat(first)
    chat.add_prompt_messages([second])
    assert chat.prompt_messages == [first, second]
    assert [m.content for m in chat.to_messages()] == ["a", "b"]


def test_message_type_values():
    assert MessageType.ASSISTANT.value == "assistant"
    assert MessageType("function") is MessageType.FUNCTION