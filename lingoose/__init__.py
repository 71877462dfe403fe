"""Building blocks for LLM applications: chats, decoders, embeddings, indexes, Hugging Face and llama.cpp clients."""

__version__ = "0.1.0"