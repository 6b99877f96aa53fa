"""Similarity computation utilities.

Stateless vector math shared by the embedding types. Every function accepts
1-D numpy arrays of any float storage type and accumulates in float64.
"""

import logging
import math
import sys
from typing import Tuple

import numpy as np

from ..errors import DimensionMismatchError, ZeroVectorError


logger = logging.getLogger(__name__)

ACCUMULATOR_DTYPE = np.float64


def check_dimensions(vec_a: np.ndarray, vec_b: np.ndarray) -> None:
    """Raise DimensionMismatchError unless both vectors have the same length."""
    if vec_a.shape[0] != vec_b.shape[0]:
        raise DimensionMismatchError(int(vec_a.shape[0]), int(vec_b.shape[0]))


def _max_abs(vec: np.ndarray) -> float:
    if vec.size == 0:
        return 0.0
    return float(np.max(np.abs(vec)))


def _rescaled(vec: np.ndarray) -> np.ndarray:
    """Divide by the largest absolute component (no-op for zero/non-finite)."""
    scale = _max_abs(vec)
    if scale == 0.0 or not math.isfinite(scale):
        return vec
    return vec / scale


def sum_of_squares(vec: np.ndarray) -> float:
    """Return sum(x_i^2) accumulated in float64."""
    values = np.asarray(vec, dtype=ACCUMULATOR_DTYPE)
    return float(np.dot(values, values))


def _out_of_range(vec: np.ndarray, squared_norm: float) -> bool:
    """True when a float64 sum of squares overflowed or fell below the normal range."""
    if not math.isfinite(squared_norm):
        return True
    # zero or subnormal although the vector is not null
    return squared_norm < sys.float_info.min and bool(np.any(vec))


def l2_norm(vec: np.ndarray) -> float:
    """Compute the L2 norm (magnitude) of a vector.

    A zero vector has norm exactly 0.0. When the float64 sum of squares
    overflows, or underflows into the subnormal range for a non-zero vector,
    the norm is computed on the vector scaled by its largest absolute
    component and scaled back.

    Args:
        vec: 1-D vector

    Returns:
        Non-negative magnitude
    """
    values = np.asarray(vec, dtype=ACCUMULATOR_DTYPE)
    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        squares = sum_of_squares(values)
        if not _out_of_range(values, squares):
            return math.sqrt(squares)

        scale = _max_abs(values)
        if not math.isfinite(scale):
            # inf or nan components, nothing to rescue
            return math.sqrt(squares)

        logger.debug(f"Sum of squares out of range, rescaling by {scale:.3e}")
        return scale * math.sqrt(sum_of_squares(values / scale))


def dot_product(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
    """Compute the dot product of two vectors of equal dimension.

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    check_dimensions(vec_a, vec_b)
    a = np.asarray(vec_a, dtype=ACCUMULATOR_DTYPE)
    b = np.asarray(vec_b, dtype=ACCUMULATOR_DTYPE)
    return float(np.dot(a, b))


def euclidean_distance(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
    """Compute the Euclidean (L2) distance between two vectors.

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    check_dimensions(vec_a, vec_b)
    a = np.asarray(vec_a, dtype=ACCUMULATOR_DTYPE)
    b = np.asarray(vec_b, dtype=ACCUMULATOR_DTYPE)

    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        distance = l2_norm(a - b)
        if math.isfinite(distance):
            return distance

        # the difference itself overflowed
        scale = max(_max_abs(a), _max_abs(b))
        if scale == 0.0 or not math.isfinite(scale):
            return distance
        return scale * l2_norm(a / scale - b / scale)


def _gram_terms(a: np.ndarray, b: np.ndarray) -> Tuple[float, float, float]:
    """Return (a.b, a.a, b.b) from a single product over the stacked pair."""
    pair = np.stack((a, b))
    gram = pair @ pair.T
    return float(gram[0, 1]), float(gram[0, 0]), float(gram[1, 1])


def _needs_rescale(
    vec: np.ndarray,
    squared_norm: float,
    dot: float
) -> bool:
    return not math.isfinite(dot) or _out_of_range(vec, squared_norm)


def cosine_similarity(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
    """Compute cosine similarity between two vectors.

    Dot product and both squared norms come out of one pass over the pair.
    Similarity to a zero vector is 0.0, and the result is clamped to
    [-1, 1] to absorb rounding.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Cosine similarity in range [-1, 1]

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    check_dimensions(vec_a, vec_b)
    a = np.asarray(vec_a, dtype=ACCUMULATOR_DTYPE)
    b = np.asarray(vec_b, dtype=ACCUMULATOR_DTYPE)

    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        dot, norm_a, norm_b = _gram_terms(a, b)

        if _needs_rescale(a, norm_a, dot) or _needs_rescale(b, norm_b, dot):
            logger.debug("Cosine accumulators out of range, rescaling inputs")
            dot, norm_a, norm_b = _gram_terms(_rescaled(a), _rescaled(b))

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    similarity = dot / (math.sqrt(norm_a) * math.sqrt(norm_b))
    return float(np.clip(similarity, -1.0, 1.0))


def _divide_in_place(vec: np.ndarray, divisor: float) -> None:
    # the ufunc loop runs in float64 and casts back into the storage array
    np.divide(vec, divisor, out=vec, dtype=ACCUMULATOR_DTYPE, casting="same_kind")


def normalize_in_place(vec: np.ndarray) -> None:
    """Scale a float array to unit length without allocating a new one.

    Raises:
        ZeroVectorError: If the magnitude is exactly 0.0 (array untouched)
    """
    magnitude = l2_norm(vec)
    if magnitude == 0.0:
        raise ZeroVectorError()

    if not math.isfinite(magnitude) or magnitude < sys.float_info.min:
        # float64 storage near the overflow or subnormal limit
        _divide_in_place(vec, _max_abs(vec))
        magnitude = l2_norm(vec)

    _divide_in_place(vec, magnitude)
