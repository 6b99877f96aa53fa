"""Base class for embedding vectors."""

import logging
import numbers
import operator
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from ..errors import DimensionMismatchError, NonNumericElementError, ZeroVectorError
from ..utils import similarity


logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float32
SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

ArrayInput = Union[Sequence[Any], np.ndarray]


def resolve_dtype(dtype: Any) -> np.dtype:
    """Return the numpy storage dtype, accepting float32 or float64 only."""
    resolved = np.dtype(dtype)
    if resolved not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported embedding dtype: {resolved} "
            f"(expected one of {[str(d) for d in SUPPORTED_DTYPES]})"
        )
    return resolved


def as_items(values: ArrayInput) -> ArrayInput:
    """Materialize the input so its length can be checked before coercion."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(
                f"Embedding input must be 1-dimensional, got {values.ndim} dimensions"
            )
        return values
    if isinstance(values, (str, bytes)):
        raise TypeError("Embedding input must be a sequence of numbers, not a string")
    try:
        return list(values)
    except TypeError as e:
        raise TypeError(
            f"Embedding input must be a sequence of numbers, got {type(values).__name__}"
        ) from e


def coerce_element(index: int, value: Any) -> float:
    """Coerce one input element, rejecting bools and non-real objects."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise NonNumericElementError(index, value)
    try:
        return float(value)
    except (OverflowError, ValueError, TypeError) as e:
        # e.g. an int beyond the float range
        raise NonNumericElementError(index, value) from e


def coerce_values(items: ArrayInput, dtype: np.dtype) -> np.ndarray:
    """Build a fresh storage array from already-materialized input.

    Raises:
        NonNumericElementError: For the first element that is not a real number
    """
    if isinstance(items, np.ndarray):
        kind = items.dtype.kind
        if kind in "iuf":
            return items.astype(dtype, copy=True)
        if kind != "O":
            if items.size == 0:
                return np.empty(0, dtype=dtype)
            raise NonNumericElementError(0, items[0])
        items = items.tolist()

    coerced = [coerce_element(i, value) for i, value in enumerate(items)]
    return np.array(coerced, dtype=dtype)


class BaseEmbedding(ABC):
    """Abstract base class for embedding vectors.

    An embedding owns a 1-D numpy array of float32 (default) or float64
    components. Read operations borrow their arguments; only ``set``,
    ``assign`` and ``normalize`` mutate, and only their receiver.

    Thread safety: read-only operations may run concurrently. Mutating
    calls need exclusive access to the instance; external synchronization
    is required, there is no internal locking.

    Subclasses decide the construction policy (fixed vs growable dimension).
    """

    def __init__(self, values: np.ndarray):
        """Wrap a storage array. Use ``from_array`` to build from user input.

        Args:
            values: 1-D float32/float64 array, owned by the new instance
        """
        self._values = values

    @classmethod
    @abstractmethod
    def from_array(
        cls,
        values: ArrayInput,
        dtype: Any = DEFAULT_DTYPE
    ) -> "BaseEmbedding":
        """Create an embedding from an ordered sequence of numbers.

        Args:
            values: List, tuple or 1-D array of real numbers
            dtype: Storage precision (float32 or float64)

        Returns:
            New embedding holding a copy of the coerced values

        Raises:
            NonNumericElementError: If an element is not a real number
        """
        pass

    @abstractmethod
    def set(self, index: int, value: Any) -> None:
        """Write a single component.

        Raises:
            NegativeIndexError: If index is negative
            NonNumericElementError: If value is not a real number
        """
        pass

    @classmethod
    def empty(cls, dtype: Any = DEFAULT_DTYPE) -> "BaseEmbedding":
        """Create a zero-length embedding (if the policy allows it)."""
        return cls.from_array([], dtype=dtype)

    # --- Properties ---
    @property
    def dim(self) -> int:
        """Number of components."""
        return int(self._values.shape[0])

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype of the components."""
        return self._values.dtype

    def __len__(self) -> int:
        return self.dim

    # --- Element access ---
    def get(self, index: int) -> Optional[float]:
        """Return the component at ``index``, or None when out of range.

        Negative indices are never wrapped around; they return None.
        """
        index = operator.index(index)
        if index < 0 or index >= self.dim:
            return None
        return float(self._values[index])

    def to_list(self) -> List[float]:
        """Return a copy of all components as Python floats."""
        return self._values.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the storage array."""
        return self._values.copy()

    def assign(self, values: ArrayInput) -> None:
        """Replace every component, keeping the dimension.

        Args:
            values: Sequence of exactly ``dim`` real numbers

        Raises:
            DimensionMismatchError: If the length differs from ``dim``
            NonNumericElementError: If an element is not a real number
        """
        items = as_items(values)
        if len(items) != self.dim:
            raise DimensionMismatchError(self.dim, len(items))
        # coerce into a scratch array first so a bad element leaves us untouched
        self._values[:] = coerce_values(items, self.dtype)

    # --- Vector math ---
    def magnitude(self) -> float:
        """Return the L2 norm; exactly 0.0 for a zero vector."""
        return similarity.l2_norm(self._values)

    def normalize(self) -> "BaseEmbedding":
        """Scale to unit length in place and return self.

        Raises:
            ZeroVectorError: If the magnitude is 0.0 (components unchanged)
        """
        try:
            similarity.normalize_in_place(self._values)
        except ZeroVectorError:
            logger.debug(f"Refusing to normalize zero vector (dim={self.dim})")
            raise
        return self

    def dot(self, other: "BaseEmbedding") -> float:
        """Dot product with another embedding of the same dimension."""
        return similarity.dot_product(self._values, self._other_values(other))

    def distance(self, other: "BaseEmbedding") -> float:
        """Euclidean distance to another embedding of the same dimension."""
        return similarity.euclidean_distance(
            self._values, self._other_values(other)
        )

    def cosine_similarity(self, other: "BaseEmbedding") -> float:
        """Cosine similarity in [-1, 1]; 0.0 when either side is a zero vector.

        Raises:
            DimensionMismatchError: If the dimensions differ
        """
        return similarity.cosine_similarity(
            self._values, self._other_values(other)
        )

    def _other_values(self, other: "BaseEmbedding") -> np.ndarray:
        if not isinstance(other, BaseEmbedding):
            raise TypeError(
                f"Expected an embedding, got {type(other).__name__}"
            )
        return other._values

    def __repr__(self) -> str:
        preview_len = 3
        if self.dim <= preview_len * 2:
            data_str = ", ".join(f"{x:.4f}" for x in self._values)
        else:
            head = ", ".join(f"{x:.4f}" for x in self._values[:preview_len])
            tail = ", ".join(f"{x:.4f}" for x in self._values[-preview_len:])
            data_str = f"{head}, ..., {tail}"
        return f"{type(self).__name__}(dim={self.dim}, values=[{data_str}])"
