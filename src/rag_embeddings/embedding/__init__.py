"""Embedding vector types.

Two construction policies share one set of vector operations:
- Embedding: fixed dimension, 1 to 65535 components (default policy)
- DynamicEmbedding: may start empty, grows on out-of-range ``set``
"""

from .base import BaseEmbedding, DEFAULT_DTYPE
from .strict import Embedding, MAX_DIMENSION
from .dynamic import DynamicEmbedding
from .factory import DEFAULT_POLICY, create, create_empty, get_embedding_class

__all__ = [
    "BaseEmbedding",
    "DEFAULT_DTYPE",
    "Embedding",
    "MAX_DIMENSION",
    "DynamicEmbedding",
    "DEFAULT_POLICY",
    "create",
    "create_empty",
    "get_embedding_class",
]
