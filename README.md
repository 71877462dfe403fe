# lingoose

Small, composable building blocks for applications built on large language
models:

- **Chats** (`lingoose.chat`): ordered lists of prompt messages (`system`,
  `user`, `assistant`, `function`) that render into plain `Message` objects.
- **Decoders** (`lingoose.decoder`): turn raw model output into structured
  data with `JSONDecoder` or `RegExDecoder`.
- **Documents and embeddings** (`lingoose.embedding`, `lingoose.embedding_math`):
  a `Document` type with metadata, `to_float32`, and helpers to average and
  normalise embedding vectors.
- **History** (`lingoose.history`): an in-memory `HistoryRam` for storing
  conversation turns.
- **Indexes** (`lingoose.index`, `lingoose.simple_vector_index`): search
  responses, top-k filtering and a JSON-file backed `SimpleVectorIndex` that
  ranks documents by cosine similarity.
- **Embedders**: `HuggingFaceEmbedder` (hosted feature extraction, in
  `lingoose.huggingface_embedder`) and `LlamaCppEmbedder` (a local llama.cpp
  `embedding` binary, in `lingoose.llamacpp_embedder`).
- **LLMs**: `HuggingFace` (conversational and text-generation modes, in
  `lingoose.huggingface_llm`) and `LlamaCpp` (a local llama.cpp `main`
  binary, in `lingoose.llamacpp_llm`).

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Chats

A chat holds `PromptMessage` entries. Any object with a `__str__` and a
`format(inputs)` method serves as a prompt; a prompt that renders to an empty
string is formatted with no inputs before its text is taken.

```python
from lingoose.chat import Chat, MessageType, PromptMessage


class Text:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text

    def format(self, inputs):
        pass


chat = Chat(
    PromptMessage(type=MessageType.SYSTEM, prompt=Text("You are a joke writer")),
    PromptMessage(type=MessageType.USER, prompt=Text("Write a joke about a goose")),
)
chat.to_messages()
# [Message(type=MessageType.SYSTEM, content="You are a joke writer", name=None), ...]
```

If formatting a prompt fails, `to_messages` raises `ChatError`.

## Decoding model output

```python
from lingoose.decoder import JSONDecoder, RegExDecoder

JSONDecoder().decode('{"test": "test"}')
# {"output": {"test": "test"}}

RegExDecoder(r"([a-z]+)(\d+)").decode("test123")
# {"output": ["test", "123"]}
```

Malformed JSON, JSON that is not an object, or an invalid pattern raises
`DecodingError`. When the pattern does not match, the output is an empty list.

## Keeping a conversation history

```python
from lingoose.history import HistoryRam

history = HistoryRam()
history.add("Hello!", {"role": "user"})
history.all()    # [HistoryMessage(content="Hello!", meta={"role": "user"})]
history.clear()
```

## A local vector index

`SimpleVectorIndex` stores documents and their embeddings in
`<output_path>/<name>.json`. Any object with an `embed(texts)` method that
returns one vector per text can act as the embedder.

```python
from lingoose.embedding import Document
from lingoose.simple_vector_index import SimpleVectorIndex


class KeywordEmbedder:
    def embed(self, texts):
        return [[float("goose" in t), float("duck" in t)] for t in texts]


index = SimpleVectorIndex("docs", ".", KeywordEmbedder())
index.load_from_documents([
    Document(content="A goose on the lake"),
    Document(content="A duck in the pond"),
])

for hit in index.similarity_search("goose", top_k=1):
    print(hit.score, hit.document.content)
```

Loading embeds documents in batches of 32 and writes each document's position
into its metadata under `id`. `similarity_search` takes an optional `filter`
callable applied to the list of responses before the top `top_k` (default 10)
are kept. `is_empty()` reads the stored file and tells whether it holds any
documents. Failures of the embedder or of the file raise `IndexInternalError`.

## Embedding helpers

```python
from lingoose.embedding_math import average, norm, normalize_embeddings

average([[1, 2, 3], [4, 5, 6]], [1, 1])   # [2.5, 3.5, 4.5]
norm([1, 2, 3])                            # 3.7416573867739413
normalize_embeddings([[1, 2, 3], [4, 5, 6]], [1, 1])
```

## Hugging Face

The Hugging Face classes read `HUGGING_FACE_HUB_TOKEN` from the environment
unless a token is passed.

```python
from lingoose.huggingface_embedder import HuggingFaceEmbedder
from lingoose.huggingface_llm import HuggingFace, HuggingFaceMode

vectors = HuggingFaceEmbedder().embed(["hello", "world"])

llm = HuggingFace("gpt2", 0.1, mode=HuggingFaceMode.TEXT_GENERATION)
llm.completion("What is a goose?")
llm.batch_completion(["Write a joke about geese.", "What is a duck?"])
```

`batch_completion` is only available in text-generation mode; in
conversational mode it raises `HuggingFaceError`. An error body from the API
raises `HuggingFaceAPIError` inside the helpers, reported by the LLM as
`HuggingFaceError`.

## llama.cpp

The llama.cpp classes run a local binary:

```python
from lingoose.llamacpp_llm import LlamaCpp
from lingoose.llamacpp_embedder import LlamaCppEmbedder

llm = LlamaCpp(temperature=0.1, max_tokens=10, verbose=True)
print(llm.completion("Where is Rome?"))

embedder = LlamaCppEmbedder(llamacpp_path="./llama.cpp/embedding")
embedder.embed(["hello", "world"])
```

Bracketed markers such as `[end of text]` are removed from completions. A
missing binary raises `FileNotFoundError`; a failing run raises
`subprocess.CalledProcessError`.

## What this package does not do

There is no client for OpenAI models here: no OpenAI completion, chat,
streaming or function calling. There is also no prompt template class; chats
accept any object that provides `__str__` and `format`. The package has no
command-line program.