"""Construction policy selection."""

import logging
from typing import Any, Dict, Optional, Type

from .base import DEFAULT_DTYPE, ArrayInput, BaseEmbedding
from .dynamic import DynamicEmbedding
from .strict import Embedding


logger = logging.getLogger(__name__)

POLICIES: Dict[str, Type[BaseEmbedding]] = {
    "strict": Embedding,
    "dynamic": DynamicEmbedding,
}
DEFAULT_POLICY = "strict"


def get_embedding_class(policy: Optional[str] = None) -> Type[BaseEmbedding]:
    """Return the embedding class for a policy name.

    Args:
        policy: "strict" or "dynamic" (None means DEFAULT_POLICY)

    Raises:
        ValueError: If the policy is unknown
    """
    name = (policy or DEFAULT_POLICY).lower()
    if name not in POLICIES:
        raise ValueError(
            f"Unknown embedding policy: {policy!r} "
            f"(expected one of {sorted(POLICIES)})"
        )
    return POLICIES[name]


def create(
    values: ArrayInput,
    policy: Optional[str] = None,
    dtype: Any = DEFAULT_DTYPE
) -> BaseEmbedding:
    """Create an embedding from a sequence of numbers using the given policy."""
    cls = get_embedding_class(policy)
    logger.debug(f"Creating {cls.__name__} (dtype={dtype})")
    return cls.from_array(values, dtype=dtype)


def create_empty(
    policy: Optional[str] = None,
    dtype: Any = DEFAULT_DTYPE
) -> BaseEmbedding:
    """Create a zero-length embedding.

    Raises:
        EmptyInputError: Under the strict policy, which forbids empty vectors
    """
    return get_embedding_class(policy).empty(dtype=dtype)
