"""
Domain service: vector arithmetic used for similarity ranking.
Pure, stateless functions over numpy arrays.
"""

from typing import Sequence

import numpy as np

from src.domain.errors import InvalidInputError


def as_vector(values: Sequence[float]) -> np.ndarray:
    """Convert *values* to a 1-D float array of finite numbers.

    Raises:
        InvalidInputError: on non-numeric, nested, NaN or infinite components.
    """
    try:
        vector = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Vector components must be numbers: {exc}") from exc
    if vector.ndim != 1:
        raise InvalidInputError(f"Vector must be one-dimensional, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise InvalidInputError("Vector components must be finite")
    return vector


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Sum of the element-wise products of *a* and *b*.

    Raises:
        InvalidInputError: if the vectors differ in length.
    """
    if len(a) != len(b):
        raise InvalidInputError(
            f"Vector dimensionality mismatch: {len(a)} != {len(b)}"
        )
    return float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))


def magnitude(v: Sequence[float]) -> float:
    """Euclidean norm of *v*."""
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between *a* and *b*, in [-1, 1].

    A zero vector has similarity 0.0 with everything, itself included.
    """
    product = dot(a, b)
    magnitude_a = magnitude(a)
    magnitude_b = magnitude(b)
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0
    return product / (magnitude_a * magnitude_b)
