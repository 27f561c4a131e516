"""Reusable type definitions for the seqlogic package.

This module provides type aliases and constrained types that can be used across
different parts of the package for type safety and validation.

Type Aliases:
    Predicate: A function mapping one integer to a boolean.
    PairwisePredicate: A function mapping two adjacent integers to a boolean.
    Combiner: A function folding two integers into one.
    IntSequence: A list of integers with at least one element.

These types can be reused across different modules for consistent type checking
and validation.
"""

import operator
from typing import Annotated, Any, Callable, List, Sequence
import annotated_types as at
from pydantic.functional_validators import BeforeValidator
import numpy as np

__all__ = [
    "Predicate",
    "PairwisePredicate",
    "Combiner",
    "IntSequence",
]

Predicate = Callable[[int], bool]
PairwisePredicate = Callable[[int, int], bool]
Combiner = Callable[[int, int], int]


def validate_integers(values: Any) -> List[int]:
    """Validator to ensure every item of a sequence is an integer.

    Args:
        values: Candidate sequence of values.

    Returns:
        The values as a list of ints.

    Raises:
        ValueError: If the input is not a sequence or holds non-integers.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        # arrays: anything with tolist()
        if not hasattr(values, "tolist"):
            raise ValueError(f"Expected a sequence of integers, got {type(values)!r}")
        values = values.tolist()

    items = []
    for i, value in enumerate(values):
        message = f"Item {i} must be an integer, got {value!r} ({type(value).__name__})."
        # bool and numpy.bool_ are rejected, numpy integer scalars become ints
        if isinstance(value, (bool, np.bool_)):
            raise ValueError(message)
        try:
            items.append(operator.index(value))
        except TypeError:
            raise ValueError(message) from None
    return items


# A list of integers with at least one element
IntSequence = Annotated[List[int], at.MinLen(1), BeforeValidator(validate_integers)]
