"""Catalogue of ready-made predicates and combiners.

These are the building blocks the demonstration driver wires into the
quantifiers. They are plain functions (or factories returning closures), so
any other callable with the same shape can be used in their place.

The predicates use only comparison and arithmetic operators, so they also
work element-wise on ``jax.Array`` and ``numpy.ndarray`` inputs and can be
handed to the vectorized backend unchanged. :func:`maximum` and
:func:`minimum` branch on their arguments and are scalar only; pass
``jnp.maximum`` / ``jnp.minimum`` to the vectorized backend instead.
"""

import typing as tp

from seqlogic.core.types import PairwisePredicate, Predicate

__all__ = [
    "positive",
    "even",
    "odd",
    "equal_to",
    "greater_than",
    "less_than",
    "ascending",
    "descending",
    "maximum",
    "minimum",
    "negate",
]


def positive(x: int) -> bool:
    return x > 0


def even(x: int) -> bool:
    return x % 2 == 0


def odd(x: int) -> bool:
    return x % 2 != 0


def equal_to(value: int) -> Predicate:
    """Predicate that holds for items equal to ``value``."""

    def predicate(x):
        return x == value

    predicate.__name__ = f"equal_to_{value}"
    return predicate


def greater_than(threshold: int) -> Predicate:
    """Predicate that holds for items strictly greater than ``threshold``."""

    def predicate(x):
        return x > threshold

    predicate.__name__ = f"greater_than_{threshold}"
    return predicate


def less_than(threshold: int) -> Predicate:
    """Predicate that holds for items strictly less than ``threshold``."""

    def predicate(x):
        return x < threshold

    predicate.__name__ = f"less_than_{threshold}"
    return predicate


def ascending(previous: int, current: int) -> bool:
    """Pairwise predicate for non-decreasing order."""
    return previous <= current


def descending(previous: int, current: int) -> bool:
    """Pairwise predicate for non-increasing order."""
    return previous >= current


def maximum(a: int, b: int) -> int:
    # ties keep the running value
    return a if a >= b else b


def minimum(a: int, b: int) -> int:
    return a if a <= b else b


@tp.overload
def negate(predicate: Predicate) -> Predicate: ...


@tp.overload
def negate(predicate: PairwisePredicate) -> PairwisePredicate: ...


def negate(predicate):
    """Logical complement of a unary or pairwise predicate.

    Uses ``~`` for array results so the negation stays element-wise on
    ``jax.Array`` / ``numpy.ndarray`` inputs.
    """

    def negated(*args):
        result = predicate(*args)
        if hasattr(result, "dtype"):
            return ~result
        return not result

    negated.__name__ = f"not_{getattr(predicate, '__name__', 'predicate')}"
    return negated

