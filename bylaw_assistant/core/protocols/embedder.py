"""Embedder protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbedderProtocol(Protocol):
    """Protocol for embedding service."""

    def embed(self, text: str) -> list[float]:
        """Embed a single query text.

        Args:
            text: Text to embed.

        Returns:
            Fixed-length embedding vector.
        """
        ...

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed many texts, batching requests to respect rate limits.

        Args:
            texts: Texts to embed.

        Returns:
            One vector per input text, in input order.
        """
        ...
