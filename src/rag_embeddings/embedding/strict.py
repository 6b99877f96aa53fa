"""Fixed-dimension embedding (strict construction policy)."""

import operator
from typing import Any

from ..errors import (
    DimensionTooLargeError,
    EmptyInputError,
    IndexOutOfRangeError,
    NegativeIndexError,
)
from .base import (
    DEFAULT_DTYPE,
    ArrayInput,
    BaseEmbedding,
    as_items,
    coerce_element,
    coerce_values,
    resolve_dtype,
)


# dimension is stored as an unsigned 16-bit count
MAX_DIMENSION = 65535


class Embedding(BaseEmbedding):
    """Embedding whose dimension is fixed at construction.

    Construction rejects empty input and inputs longer than
    ``MAX_DIMENSION``. Components can be overwritten in place but the
    dimension never changes.

    Example:
        >>> emb = Embedding.from_array([3, 4])
        >>> emb.magnitude()
        5.0
        >>> emb.dim
        2
    """

    @classmethod
    def from_array(
        cls,
        values: ArrayInput,
        dtype: Any = DEFAULT_DTYPE
    ) -> "Embedding":
        """Create an embedding from a non-empty sequence of numbers.

        Raises:
            EmptyInputError: If the sequence is empty
            DimensionTooLargeError: If it has more than MAX_DIMENSION elements
            NonNumericElementError: If an element is not a real number
        """
        storage_dtype = resolve_dtype(dtype)
        items = as_items(values)

        if len(items) == 0:
            raise EmptyInputError()
        if len(items) > MAX_DIMENSION:
            raise DimensionTooLargeError(len(items), MAX_DIMENSION)

        return cls(coerce_values(items, storage_dtype))

    def set(self, index: int, value: Any) -> None:
        """Overwrite one component; the index must already exist.

        Raises:
            NegativeIndexError: If index is negative
            IndexOutOfRangeError: If index >= dim
            NonNumericElementError: If value is not a real number
        """
        index = operator.index(index)
        if index < 0:
            raise NegativeIndexError(index)
        if index >= self.dim:
            raise IndexOutOfRangeError(index, self.dim)
        self._values[index] = coerce_element(index, value)
