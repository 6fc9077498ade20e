"""Vector helpers for embedding-driven grouping: cosine similarity and the running-mean accumulator."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _check_finite(vec: list[float], name: str) -> None:
    if not all(math.isfinite(x) for x in vec):
        raise ValueError(f"Vector {name} contains non-finite values")


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """
    dot(a, b) / (|a| * |b|), or 0.0 when either norm is zero.
    Raises ValueError for vectors of different length or with NaN/inf components.
    """
    if len(a) != len(b):
        raise ValueError(f"Vectors must have the same length ({len(a)} != {len(b)})")
    _check_finite(a, "a")
    _check_finite(b, "b")
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (norm_a * norm_b)


def mean_consecutive_similarity(vectors: list[list[float]]) -> float:
    """Mean cosine similarity of each vector with the next one; 0.0 for fewer than two vectors."""
    if len(vectors) < 2:
        return 0.0
    sims = [cosine_similarity(vectors[i], vectors[i + 1]) for i in range(len(vectors) - 1)]
    return sum(sims) / len(sims)


@dataclass(frozen=True)
class GroupAccumulator:
    """
    State of the open group during similarity grouping. Every step returns a new value,
    so grouping decisions can be tested one step at a time.
    """

    text: str
    start: int
    vector_sum: tuple[float, ...]
    count: int

    @classmethod
    def start_with(cls, sentence: str, embedding: list[float], start: int) -> GroupAccumulator:
        return cls(text=sentence, start=start, vector_sum=tuple(embedding), count=1)

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.start + self.length

    def mean(self) -> list[float]:
        return [x / self.count for x in self.vector_sum]

    def fits(self, sentence: str, max_size: int) -> bool:
        """Whether appending the sentence (space-joined) keeps the group at or under max_size."""
        return self.length + 1 + len(sentence) <= max_size

    def append(self, sentence: str, embedding: list[float]) -> GroupAccumulator:
        if len(embedding) != len(self.vector_sum):
            raise ValueError(f"Vectors must have the same length ({len(self.vector_sum)} != {len(embedding)})")
        return GroupAccumulator(
            text=f"{self.text} {sentence}",
            start=self.start,
            vector_sum=tuple(s + x for s, x in zip(self.vector_sum, embedding)),
            count=self.count + 1,
        )
