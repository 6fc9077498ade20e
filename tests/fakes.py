"""Fake embedders used across the test suite."""

import asyncio

CATS = [1.0, 0.0, 0.0]
STOCKS = [0.0, 1.0, 0.0]
OTHER = [0.0, 0.0, 1.0]


class KeywordEmbedder:
    """Returns the vector of the first topic keyword found in the text; records every call."""

    def __init__(self, topics: dict[str, list[float]] | None = None, default: list[float] | None = None) -> None:
        self.topics = topics if topics is not None else {"cat": CATS, "stock": STOCKS}
        self.default = default if default is not None else OTHER
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        lowered = text.lower()
        for keyword, vector in self.topics.items():
            if keyword in lowered:
                return list(vector)
        return list(self.default)


class FailingEmbedder:
    async def embed(self, text: str) -> list[float]:
        raise RuntimeError("embedding backend unavailable")


class SlowEmbedder:
    def __init__(self, delay: float = 1.0) -> None:
        self.delay = delay

    async def embed(self, text: str) -> list[float]:
        await asyncio.sleep(self.delay)
        return list(OTHER)


class RaggedEmbedder:
    """Returns vectors whose dimension grows with every call."""

    def __init__(self) -> None:
        self.n = 0

    async def embed(self, text: str) -> list[float]:
        self.n += 1
        return [1.0] * self.n


class ConcurrencyTrackingEmbedder:
    def __init__(self) -> None:
        self.in_flight = 0
        self.max_in_flight = 0

    async def embed(self, text: str) -> list[float]:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return [float(len(text)), 1.0]

