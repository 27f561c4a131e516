"""Core types, ranges and errors shared by the sequence operations."""

from seqlogic.core.errors import (
    SequenceError,
    InvalidRange,
    EmptySequence,
    SequenceAssertionError,
)
from seqlogic.core.ranges import check_range
from seqlogic.core.types import Predicate, PairwisePredicate, Combiner, IntSequence

__all__ = [
    "SequenceError",
    "InvalidRange",
    "EmptySequence",
    "SequenceAssertionError",
    "check_range",
    "Predicate",
    "PairwisePredicate",
    "Combiner",
    "IntSequence",
]
