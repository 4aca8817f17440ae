"""
In-memory accumulation of items into fixed-size batches.

Items are added one at a time and grouped into ordered batches of a fixed
capacity. Callers periodically extract the batches (e.g. for bulk writes to a
database or blob storage), which transfers ownership and resets the
accumulator.
"""

from batched_accumulator.accumulator import BatchedAccumulator, BatchProcessorFn
from batched_accumulator.contracts import AccumulatorABC
from batched_accumulator.errors import InvalidArgument
from batched_accumulator.validation import is_natural_number

__all__ = [
    "AccumulatorABC",
    "BatchedAccumulator",
    "BatchProcessorFn",
    "InvalidArgument",
    "is_natural_number",
]
