"""Growable embedding (dynamic construction policy)."""

import operator
from typing import Any

import numpy as np

from ..errors import NegativeIndexError
from .base import (
    DEFAULT_DTYPE,
    ArrayInput,
    BaseEmbedding,
    as_items,
    coerce_element,
    coerce_values,
    resolve_dtype,
)


class DynamicEmbedding(BaseEmbedding):
    """Embedding that may start empty and grows on out-of-range writes.

    Writing past the end extends the storage, zero-filling every slot
    between the old end and the written index.
    """

    @classmethod
    def from_array(
        cls,
        values: ArrayInput,
        dtype: Any = DEFAULT_DTYPE
    ) -> "DynamicEmbedding":
        storage_dtype = resolve_dtype(dtype)
        return cls(coerce_values(as_items(values), storage_dtype))

    def set(self, index: int, value: Any) -> None:
        """Write one component, growing the storage when needed.

        Raises:
            NegativeIndexError: If index is negative
            NonNumericElementError: If value is not a real number
        """
        index = operator.index(index)
        if index < 0:
            raise NegativeIndexError(index)
        number = coerce_element(index, value)

        if index >= self.dim:
            grown = np.zeros(index + 1, dtype=self.dtype)
            grown[:self.dim] = self._values
            self._values = grown

        self._values[index] = number
