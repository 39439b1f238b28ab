"""Ollama embedding client (local, via Ollama API)."""

import logging
from typing import Any

import httpx

from lancedb_mcp.errors import EmbeddingError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:11434/api/embeddings"
DEFAULT_MODEL = "nomic-embed-text:latest"


class OllamaEmbedding:
    """Embedding generation using Ollama's embedding models.

    Posts ``{"model": ..., "prompt": ...}`` to the embeddings endpoint and
    reads the ``embedding`` array from the JSON response.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: int = 30,
    ):
        """Initialize Ollama embedding client.

        Args:
            model: Ollama model name (e.g., "nomic-embed-text:latest")
            endpoint: Full URL of the embeddings endpoint
            timeout: Request timeout in seconds
        """
        self._model = model
        self._endpoint = endpoint
        self._timeout = timeout
        self._dimension: int | None = None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for a list of texts.

        Args:
            texts: List of text strings to embed

        Returns:
            List of embedding vectors

        Raises:
            EmbeddingError: On a non-2xx response or a malformed payload
        """
        if not texts:
            return []

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            embeddings = []
            for text in texts:
                try:
                    response = await client.post(
                        self._endpoint,
                        json={"model": self._model, "prompt": text},
                    )
                except httpx.RequestError as e:
                    raise EmbeddingError(f"Ollama API request to {self._endpoint} failed: {e}") from e

                if response.is_error:
                    logger.error(
                        "Error generating embedding: %s %s", response.status_code, response.reason_phrase
                    )
                    raise EmbeddingError(
                        f"Ollama API error: {response.status_code} {response.reason_phrase}",
                        status_code=response.status_code,
                    )
                embedding = _parse_embedding(response.json())
                embeddings.append(embedding)

                if self._dimension is None:
                    self._dimension = len(embedding)

            return embeddings

    async def embed_single(self, text: str) -> list[float]:
        """Generate embedding for a single text.

        Args:
            text: Text string to embed

        Returns:
            Embedding vector
        """
        embeddings = await self.embed([text])
        return embeddings[0]

    @property
    def dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        if self._dimension is None:
            msg = "Dimension unknown until first embedding is generated"
            raise ValueError(msg)
        return self._dimension

    @property
    def model_name(self) -> str:
        """Get the name of the embedding model."""
        return self._model


def _parse_embedding(data: Any) -> list[float]:
    embedding = data.get("embedding") if isinstance(data, dict) else None
    if not isinstance(embedding, list) or not embedding:
        raise EmbeddingError("Ollama API response has no 'embedding' array")
    if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in embedding):
        raise EmbeddingError("Ollama API returned a non-numeric embedding")
    return [float(x) for x in embedding]
