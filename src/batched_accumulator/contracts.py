"""ABC contract for in-memory batch accumulators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class AccumulatorABC(ABC, Generic[T]):
    """Contract for accumulators that group items into ordered batches."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Accumulate a single item."""
        raise NotImplementedError

    @abstractmethod
    def extract(self) -> list[list[T]]:
        """Hand over all held batches and reset to an empty state."""
        raise NotImplementedError

    @property
    @abstractmethod
    def batches_count(self) -> int:
        """Number of batches currently held."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Whether no items are currently held."""
        raise NotImplementedError

    @property
    @abstractmethod
    def accumulated_items_count(self) -> int:
        """Total number of items across all held batches."""
        raise NotImplementedError
