"""
Custom exceptions for the embedding types.

Every error also derives from the closest builtin exception so callers that
only know about ``ValueError``/``IndexError`` keep working.
"""


class EmbeddingError(Exception):
    """Base exception for all embedding errors."""
    pass


class EmptyInputError(EmbeddingError, ValueError):
    """Raised when a strict embedding is built from an empty sequence."""

    def __init__(self, message: str = "Cannot create embedding from empty array"):
        super().__init__(message)


class DimensionTooLargeError(EmbeddingError, ValueError):
    """
    Raised when a strict embedding input exceeds the dimension ceiling.

    The ceiling guards against accidental misuse (e.g. passing a flattened
    matrix); it is not a mathematical limit.
    """

    def __init__(self, dimension: int, max_dimension: int):
        super().__init__(
            f"Array too large: maximum {max_dimension} dimensions allowed, "
            f"got {dimension}"
        )
        self.dimension = dimension
        self.max_dimension = max_dimension


class NonNumericElementError(EmbeddingError, TypeError):
    """Raised when an input element cannot be coerced to a number."""

    def __init__(self, index: int, value: object = None):
        super().__init__(
            f"Array element at index {index} is not numeric: {value!r}"
        )
        self.index = index
        self.value = value


class NegativeIndexError(EmbeddingError, IndexError):
    """Raised when a negative index is used to write a component."""

    def __init__(self, index: int):
        super().__init__(f"Negative index not allowed: {index}")
        self.index = index


class IndexOutOfRangeError(EmbeddingError, IndexError):
    """Raised when writing past the end of a fixed-dimension embedding."""

    def __init__(self, index: int, dimension: int):
        super().__init__(
            f"Index {index} out of range for embedding of dimension {dimension}"
        )
        self.index = index
        self.dimension = dimension


class DimensionMismatchError(EmbeddingError, ValueError):
    """
    Raised when two vectors of different length meet in a pairwise operation.

    Attributes:
        left: dimension of the receiver / first operand
        right: dimension of the other operand
    """

    def __init__(self, left: int, right: int):
        super().__init__(f"Dimension mismatch: {left} != {right}")
        self.left = left
        self.right = right


class ZeroVectorError(EmbeddingError, ZeroDivisionError):
    """Raised when normalizing a vector whose magnitude is exactly zero."""

    def __init__(self, message: str = "Cannot normalize zero vector"):
        super().__init__(message)
