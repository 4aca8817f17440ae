"""Fixed-size batch accumulator with ownership-transferring extraction."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from batched_accumulator.contracts import AccumulatorABC
from batched_accumulator.errors import InvalidArgument
from batched_accumulator.validation import is_natural_number

logger = logging.getLogger(__name__)

T = TypeVar("T")

BatchProcessorFn = Callable[[list[list[T]]], None]


class BatchedAccumulator(AccumulatorABC[T]):
    """
    Accumulates items into fixed-size batches, preserving insertion order.

    Given a capacity of 4, adding the items 1..7 yields the batches
    ``[1, 2, 3, 4]`` and ``[5, 6, 7]``. Every batch except the last holds
    exactly ``capacity`` items; the last one is never empty.

    Accumulated batches cannot be peeked at. ``extract`` hands the whole batch
    list over to the caller and leaves a fresh empty list behind, so no
    reference to internal storage escapes while the instance keeps running.
    Use ``batches_count``, ``is_empty`` and ``accumulated_items_count`` to
    decide when extraction is worthwhile.

    Not thread-safe: concurrent producers must serialize access externally.
    """

    def __init__(self, capacity: int):
        """
        Initialize accumulator.

        Args:
            capacity: Maximum number of items per batch (integer >= 1)

        Raises:
            InvalidArgument: If capacity is not a natural number
        """
        if not is_natural_number(capacity):
            raise InvalidArgument(
                f"{type(self).__name__} expects a natural number for "
                f"capacity, received {capacity!r}"
            )
        self._capacity = int(capacity)
        self._batches: list[list[T]] = []
        logger.debug("BatchedAccumulator: Created with capacity=%d", self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def batches_count(self) -> int:
        return len(self._batches)

    @property
    def is_empty(self) -> bool:
        return self.batches_count == 0

    @property
    def accumulated_items_count(self) -> int:
        """
        Total number of items across all held batches.

        Derived from the batch count and the last batch's length, since every
        batch before the last is full.
        """
        if not self._batches:
            return 0
        return (self.batches_count - 1) * self._capacity + len(self._batches[-1])

    def add(self, item: T) -> None:
        """Append an item, starting a new batch when the last one is full."""
        if not self._batches or len(self._batches[-1]) == self._capacity:
            self._batches.append([item])
        else:
            self._batches[-1].append(item)

    def extract(self) -> list[list[T]]:
        """
        Extract all accumulated batches and reset the accumulator.

        Ownership of the returned list moves to the caller; the accumulator
        keeps no reference to it. Every call returns a distinct list object,
        including when nothing was accumulated.

        Returns:
            Batches in insertion order, each a list of at most ``capacity`` items
        """
        taken = self._batches
        self._batches = []
        if taken:
            logger.debug(
                "BatchedAccumulator: Extracted %d batches (%d items)",
                len(taken),
                (len(taken) - 1) * self._capacity + len(taken[-1]),
            )
        return taken

    def flush(self, process_fn: BatchProcessorFn) -> int:
        """
        Extract the held batches and pass them to ``process_fn``.

        The accumulator is reset before ``process_fn`` runs. Nothing is called
        when the accumulator is empty. Exceptions raised by ``process_fn`` are
        logged and propagated; the extracted batches are not restored.

        Args:
            process_fn: Callable receiving the extracted batches

        Returns:
            Number of items handed to ``process_fn``
        """
        items_count = self.accumulated_items_count
        batches = self.extract()
        if not batches:
            return 0
        try:
            process_fn(batches)
        except Exception as exc:
            logger.error("BatchedAccumulator: processing failed: %s", exc, exc_info=True)
            raise
        return items_count

    def __len__(self) -> int:
        return self.accumulated_items_count

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"batches={self.batches_count}, items={self.accumulated_items_count})"
        )
