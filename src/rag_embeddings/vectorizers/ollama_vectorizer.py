"""Ollama vectorizer implementation."""

import time
import logging
from typing import Any, List, Optional

import requests

from ..embedding.base import DEFAULT_DTYPE
from ..utils.config import Config
from .base import BaseVectorizer


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:11434/api/embed"
DEFAULT_MODEL = "llama3.2"


class OllamaVectorizer(BaseVectorizer):
    """Ollama ``/api/embed`` vectorizer with batch support and retry logic.

    Features:
    - Batch processing (several inputs per request)
    - Exponential backoff retry
    - Timeout control
    - Expected-dimension check before building an Embedding
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        batch_size: int = 32,
        max_retries: int = 3,
        timeout: int = 60,
        dimension: int = 3072,
        dtype: Any = DEFAULT_DTYPE
    ):
        """Initialize Ollama vectorizer.

        Args:
            api_url: Ollama embed endpoint URL
            model: Name of the Ollama model used for embeddings
            batch_size: Number of texts to send per request
            max_retries: Maximum retry attempts on failure
            timeout: Request timeout in seconds
            dimension: Expected embedding dimension
            dtype: Storage dtype of the Embedding objects produced
        """
        super().__init__(dimension, dtype)
        self.api_url = api_url
        self.model = model
        self.batch_size = batch_size
        self.max_retries = max_retries
        self.timeout = timeout

        logger.info(
            f"Ollama Vectorizer initialized: {api_url} "
            f"(model={model}, batch_size={batch_size}, timeout={timeout}s)"
        )

    @classmethod
    def from_config(cls, config: Config) -> "OllamaVectorizer":
        """Build a vectorizer from the ``ollama`` and ``embedding`` config sections."""
        ollama = config.ollama
        return cls(
            api_url=ollama.api_url,
            model=ollama.model,
            batch_size=ollama.get('batch_size', 32),
            max_retries=ollama.get('max_retries', 3),
            timeout=ollama.get('timeout', 60),
            dimension=config.embedding.expected_dimension,
            dtype=config.embedding.get('dtype', 'float32'),
        )

    def embed(self, texts: List[str]) -> List[List[float]]:
        """Convert texts to embeddings using the configured batch size.

        Raises:
            ValueError: If texts is empty
            RuntimeError: If vectorization fails after all retries
        """
        if not texts:
            raise ValueError("Cannot embed empty text list")

        return self.embed_batch(texts, self.batch_size)

    def embed_batch(
        self,
        texts: List[str],
        batch_size: int
    ) -> List[List[float]]:
        """Convert texts to embeddings in batches.

        Args:
            texts: List of text strings to embed
            batch_size: Number of texts to process per request

        Returns:
            List of embedding vectors in same order as input

        Raises:
            ValueError: If texts is empty or batch_size is invalid
            RuntimeError: If vectorization fails
        """
        if not texts:
            raise ValueError("Cannot embed empty text list")
        if batch_size <= 0:
            raise ValueError(f"Invalid batch_size: {batch_size}")

        logger.debug(f"Embedding {len(texts)} texts in batches of {batch_size}")

        all_embeddings: List[List[float]] = []

        for i in range(0, len(texts), batch_size):
            batch = texts[i:i + batch_size]
            all_embeddings.extend(self._embed_batch_with_retry(batch))

            logger.debug(
                f"Batch {i // batch_size + 1}/{(len(texts) - 1) // batch_size + 1} "
                f"completed ({len(batch)} texts)"
            )

        if len(all_embeddings) != len(texts):
            raise RuntimeError(
                f"Embedding count mismatch: expected {len(texts)}, "
                f"got {len(all_embeddings)}"
            )

        return all_embeddings

    def _embed_batch_with_retry(self, texts: List[str]) -> List[List[float]]:
        """Embed a batch with exponential backoff retry.

        Raises:
            RuntimeError: If all retry attempts fail
            ValueError: If the response is malformed (not retried)
        """
        last_error: Optional[Exception] = None

        for attempt in range(self.max_retries):
            try:
                return self._embed_batch_request(texts)

            except requests.exceptions.Timeout as e:
                last_error = e
                reason = "timeout"

            except requests.exceptions.RequestException as e:
                last_error = e
                reason = f"error: {e}"

            if attempt < self.max_retries - 1:
                wait_time = 2 ** attempt  # Exponential backoff: 1s, 2s, 4s
                logger.warning(
                    f"Ollama request {reason} (attempt {attempt + 1}/{self.max_retries}). "
                    f"Retrying in {wait_time}s..."
                )
                time.sleep(wait_time)

        logger.error(f"Ollama request failed after all retries: {last_error}")
        raise RuntimeError(
            f"Ollama vectorization failed after {self.max_retries} attempts: {last_error}"
        )

    def _embed_batch_request(self, texts: List[str]) -> List[List[float]]:
        """Make a single Ollama API request.

        Raises:
            requests.exceptions.Timeout: If request times out
            requests.exceptions.RequestException: If request fails
            ValueError: If response format is invalid
        """
        response = requests.post(
            self.api_url,
            json={"model": self.model, "input": texts},
            timeout=self.timeout,
            headers={"Content-Type": "application/json"}
        )
        response.raise_for_status()

        payload = response.json()
        embeddings = payload.get("embeddings") if isinstance(payload, dict) else None

        if not isinstance(embeddings, list):
            raise ValueError("Ollama response must contain an 'embeddings' list")

        if len(embeddings) != len(texts):
            raise ValueError(
                f"Ollama returned {len(embeddings)} embeddings "
                f"for {len(texts)} texts"
            )

        return embeddings

    def health_check(self) -> bool:
        """Check if the Ollama service answers an embed request."""
        try:
            self._embed_batch_request(["test"])
            logger.info("Ollama service health check passed")
            return True

        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning(f"Ollama service health check failed: {e}")
            return False
