"""Scaling of provider vectors before they reach similarity grouping."""

import math
from typing import Callable, Literal

NormType = Literal["L2", "L1", "none"]

_NORMS: dict[str, Callable[[list[float]], float]] = {
    "L2": lambda vec: math.sqrt(sum(x * x for x in vec)),
    "L1": lambda vec: sum(abs(x) for x in vec),
}


def resolve_norm_type(normalize: bool, normalization_type: str) -> NormType:
    """Map config flags to a norm type. Unknown types fall back to L2 when normalizing."""
    if not normalize or normalization_type == "none":
        return "none"
    return "L1" if normalization_type == "L1" else "L2"


def normalize_vector(vec: list[float], norm_type: NormType) -> list[float]:
    """
    Return vec scaled to unit norm as a new list of floats. A zero vector comes back unchanged.
    Raises ValueError for NaN or infinite components: cosine grouping cannot compare them.
    """
    values = [float(x) for x in vec]
    if not all(math.isfinite(x) for x in values):
        raise ValueError("Embedding contains non-finite values")
    if norm_type == "none":
        return values
    norm = _NORMS[norm_type](values)
    if norm == 0.0:
        return values
    return [x / norm for x in values]
