"""Exceptions raised by batched_accumulator."""


class InvalidArgument(ValueError):
    """Raised when an accumulator is constructed with an invalid argument."""
