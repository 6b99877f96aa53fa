"""Base class for vectorizers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from ..embedding.base import DEFAULT_DTYPE
from ..embedding.strict import Embedding
from ..errors import DimensionMismatchError


logger = logging.getLogger(__name__)


class BaseVectorizer(ABC):
    """Abstract base class for text vectorizers.

    Subclasses fetch raw vectors from a model backend. This class holds the
    expected dimension and storage dtype, and turns raw vectors into strict
    ``Embedding`` objects only after checking their size.
    """

    def __init__(self, dimension: int, dtype: Any = DEFAULT_DTYPE):
        """Initialize the expected output shape.

        Args:
            dimension: Number of components every embedding must have
            dtype: Storage dtype of the Embedding objects produced
        """
        self.dimension = dimension
        self.dtype = dtype

    @abstractmethod
    def embed(self, texts: List[str]) -> List[List[float]]:
        """Convert texts to raw embedding vectors.

        Raises:
            ValueError: If texts is empty
            RuntimeError: If vectorization fails
        """

    @abstractmethod
    def embed_batch(
        self,
        texts: List[str],
        batch_size: int
    ) -> List[List[float]]:
        """Convert texts to raw embedding vectors, batch_size texts per request.

        Returns:
            List of embedding vectors in the same order as input texts

        Raises:
            ValueError: If texts is empty or batch_size is invalid
            RuntimeError: If vectorization fails
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Return True if the backend answers, False otherwise."""

    def get_dimension(self) -> int:
        """Get the expected dimension of output embeddings."""
        return self.dimension

    def to_embedding(self, values: Sequence[float]) -> Embedding:
        """Wrap one raw vector after checking its size.

        Raises:
            DimensionMismatchError: If the vector has an unexpected size
            NonNumericElementError: If a component is not a real number
        """
        if len(values) != self.dimension:
            logger.error(
                f"Wrong embedding size {len(values)}, {self.dimension} was "
                f"expected. Check the {type(self).__name__} model and the configuration."
            )
            raise DimensionMismatchError(self.dimension, len(values))
        return Embedding.from_array(values, dtype=self.dtype)

    def embed_one(self, text: str) -> Embedding:
        """Embed a single text into a strict Embedding."""
        return self.to_embedding(self.embed([text])[0])

    def embed_many(self, texts: List[str]) -> List[Embedding]:
        """Embed several texts, one strict Embedding per text, order preserved."""
        return [self.to_embedding(values) for values in self.embed(texts)]
