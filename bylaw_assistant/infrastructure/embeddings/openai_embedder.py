import logging
import time
from typing import Callable, Optional

from openai import OpenAI

logger = logging.getLogger(__name__)


class OpenAIEmbedder:
    """Hosted embeddings via the OpenAI embeddings API."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "text-embedding-3-small",
        batch_size: int = 10,
        batch_delay: float = 0.5,
        client: Optional[OpenAI] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize embedder.

        Args:
            api_key: OpenAI API key. Empty means read OPENAI_API_KEY.
            model: Embedding model name.
            batch_size: Texts per embeddings request.
            batch_delay: Seconds to wait between batch requests.
            client: Preconfigured client (tests).
            sleep: Delay function (tests).
        """
        self._api_key = api_key
        self._model = model
        self._batch_size = batch_size
        self._batch_delay = batch_delay
        self._sleep = sleep
        self._client = client

    @property
    def client(self) -> OpenAI:
        """Lazy create the OpenAI client."""
        if self._client is None:
            logger.info(f"Creating OpenAI client for embeddings: {self._model}")
            self._client = OpenAI(api_key=self._api_key or None)
        return self._client

    def embed(self, text: str) -> list[float]:
        # The API rejects empty input
        safe_text = (text or "").strip() or "Empty text"

        try:
            response = self.client.embeddings.create(model=self._model, input=safe_text)
        except Exception as e:
            logger.error(f"Error embedding query: {e}")
            raise

        return list(response.data[0].embedding)

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        vectors: list[list[float]] = []

        for i in range(0, len(texts), self._batch_size):
            batch = texts[i : i + self._batch_size]

            try:
                response = self.client.embeddings.create(model=self._model, input=batch)
                vectors.extend(list(item.embedding) for item in response.data)
            except Exception as e:
                logger.error(f"Error embedding batch starting at index {i}: {e}")
                logger.info(f"Falling back to individual requests for batch at index {i}")
                vectors.extend(self.embed(text) for text in batch)

            if i + self._batch_size < len(texts):
                self._sleep(self._batch_delay)

        return vectors
