"""Exceptions raised by the sequence operations."""

__all__ = [
    "SequenceError",
    "InvalidRange",
    "EmptySequence",
    "SequenceAssertionError",
]


class SequenceError(ValueError):
    """Base class for errors raised when an operation cannot be evaluated."""


class InvalidRange(SequenceError):
    """The half-open range ``[lower, upper)`` is not valid for the sequence.

    Attributes:
        lower: Requested lower bound.
        upper: Requested upper bound.
        length: Length of the sequence the range was checked against.
    """

    def __init__(self, lower, upper, length: int, reason: str):
        self.lower = lower
        self.upper = upper
        self.length = length
        self.reason = reason
        super().__init__(
            f"Invalid range [{lower}, {upper}) for sequence of length {length}: {reason}"
        )


class EmptySequence(SequenceError):
    """An operation that needs at least one element received an empty sequence."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty sequence")


class SequenceAssertionError(AssertionError):
    """A demonstrated assertion over a sequence does not hold."""
