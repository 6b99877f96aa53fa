"""Fixed-precision embedding vectors and the math used to compare them.

Example:
    >>> from rag_embeddings import Embedding
    >>>
    >>> a = Embedding.from_array([1.0, 0.0])
    >>> b = Embedding.from_array([0.0, 1.0])
    >>> a.cosine_similarity(b)
    0.0
"""

from .embedding import (
    BaseEmbedding,
    DynamicEmbedding,
    Embedding,
    MAX_DIMENSION,
    create,
    create_empty,
)
from .errors import (
    DimensionMismatchError,
    DimensionTooLargeError,
    EmbeddingError,
    EmptyInputError,
    IndexOutOfRangeError,
    NegativeIndexError,
    NonNumericElementError,
    ZeroVectorError,
)

__version__ = "0.1.0"

__all__ = [
    "BaseEmbedding",
    "DynamicEmbedding",
    "Embedding",
    "MAX_DIMENSION",
    "create",
    "create_empty",
    "DimensionMismatchError",
    "DimensionTooLargeError",
    "EmbeddingError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "NegativeIndexError",
    "NonNumericElementError",
    "ZeroVectorError",
]
