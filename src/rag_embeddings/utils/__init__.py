"""Utility modules for rag_embeddings.

Common utilities used across the project.
"""

from .config import Config, load_config, validate_config
from .logger import get_logger, setup_logging
from .similarity import (
    cosine_similarity,
    dot_product,
    euclidean_distance,
    l2_norm,
    normalize_in_place,
)

__all__ = [
    "Config",
    "load_config",
    "validate_config",
    "get_logger",
    "setup_logging",
    "cosine_similarity",
    "dot_product",
    "euclidean_distance",
    "l2_norm",
    "normalize_in_place",
]
