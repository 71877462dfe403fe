import json

import pytest
import responses

from lingoose.huggingface_llm import (
    API_BASE_URL,
    HuggingFace,
    HuggingFaceError,
    HuggingFaceMode,
)

MODEL = "gpt2"
URL = API_BASE_URL + MODEL


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def _body(call):
    return json.loads(call.request.body)


def test_conversational_completion_returns_generated_text(mocked):
    mocked.add(responses.POST, URL, json={"generated_text": "fine thanks"})
    llm = HuggingFace(MODEL, 0.5, token="token")
    assert llm.completion("how are you?") == "fine thanks"


def test_conversational_request_payload_and_headers(mocked):
    mocked.add(responses.POST, URL, json={"generated_text": "ok"})
    llm = HuggingFace(MODEL, 0.5, token="token", max_length=10, top_k=3)
    assert llm.completion("hello") == "ok"
    call = mocked.calls[0]
    assert call.request.headers["Authorization"] == "Bearer token"
    assert call.request.headers["Content-Type"] == "application/json"
    body = _body(call)
    assert body["inputs"] == {"text": "hello"}
    assert body["parameters"] == {"max_length": 10, "top_k": 3, "temperature": 0.5}
    assert body["options"] == {"wait_for_model": True}


def test_text_generation_strips_prompt_characters_and_spaces(mocked):
    mocked.add(responses.POST, URL, json=[[{"generated_text": "Hello world"}]])
    llm = HuggingFace(MODEL, 0.1, token="token", mode=HuggingFaceMode.TEXT_GENERATION)
    assert llm.completion("Hello") == "world"
    body = _body(mocked.calls[0])
    assert body["inputs"] == ["Hello"]
    assert body["parameters"]["num_return_sequences"] == 1


def test_batch_completion_returns_one_output_per_prompt(mocked):
    mocked.add(
        responses.POST,
        URL,
        json=[[{"generated_text": "A first"}], [{"generated_text": "B second"}]],
    )
    llm = HuggingFace(MODEL, 0.1, token="token", mode=HuggingFaceMode.TEXT_GENERATION)
    outputs = llm.batch_completion(["A", "B"])
    assert outputs == ["first", "second"]


def test_text_generation_response_count_mismatch_raises(mocked):
    mocked.add(responses.POST, URL, json=[[{"generated_text": "x"}]])
    llm = HuggingFace(MODEL, 0.1, token="token", mode=HuggingFaceMode.TEXT_GENERATION)
    with pytest.raises(HuggingFaceError, match="expected 2 responses, got 1"):
        llm.batch_completion(["a", "b"])


def test_batch_completion_not_supported_in_conversational_mode():
    llm = HuggingFace(MODEL, 0.1, token="token")
    with pytest.raises(HuggingFaceError, match="not supported for conversational mode"):
        llm.batch_completion(["a"])


def test_api_error_is_wrapped(mocked):
    mocked.add(responses.POST, URL, json={"error": "Model is loading"})
    llm = HuggingFace(MODEL, 0.1, token="token")
    with pytest.raises(HuggingFaceError) as info:
        llm.completion("hi")
    assert str(info.value).startswith("huggingface completion error: ")
    assert "Model is loading" in str(info.value)


def test_verbose_prints_prompt_and_answer(mocked, capsys):
    mocked.add(responses.POST, URL, json={"generated_text": "answer"})
    llm = HuggingFace(MODEL, 0.1, verbose=True, token="token")
    assert llm.completion("question") == "answer"
    out = capsys.readouterr().out
    assert "---USER---\nquestion\n" in out
    assert "---AI---\nanswer\n" in out


def test_token_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("HUGGING_FACE_HUB_TOKEN", "secret")
    llm = HuggingFace(MODEL, 0.1)
    assert llm.token == "secret"
    assert llm.mode is HuggingFaceMode.CONVERSATIONAL