"""Aggregations and folds over integer sequences.

Summation and product are computed with Python integers, which never overflow:
``product([2, 4, ..., 20])`` is ``3715891200``. Fixed-width 32-bit behaviour
(wraparound) is available from :mod:`seqlogic.functional.vectorized`.

:func:`min_max` folds a two-argument combiner over the range, starting from the
first item of the sequence. The seed is always ``sequence[0]`` whatever the
lower bound is, so a fold over the whole sequence should start at ``lower=1``
to avoid combining the seed with itself (harmless for ``max``/``min``, not for
arbitrary combiners).
"""

import logging
import typing as tp
from functools import reduce

from seqlogic.core.errors import EmptySequence
from seqlogic.core.ranges import check_range
from seqlogic.core.types import Combiner

__all__ = [
    "summation",
    "product",
    "min_max",
]

logger = logging.getLogger(__name__)


def summation(sequence: tp.Sequence[int], lower: int, upper: int) -> int:
    """Sum of the items in ``[lower, upper)``; ``0`` for an empty range.

    Raises:
        InvalidRange: If the range does not fit the sequence.
    """
    total = 0
    for i in check_range(sequence, lower, upper):
        total += sequence[i]
    return total


def product(sequence: tp.Sequence[int], lower: int, upper: int) -> int:
    """Product of the items in ``[lower, upper)``; ``1`` for an empty range.

    Raises:
        InvalidRange: If the range does not fit the sequence.
    """
    result = 1
    for i in check_range(sequence, lower, upper):
        result *= sequence[i]
    return result


def min_max(
    sequence: tp.Sequence[int], lower: int, upper: int, func: Combiner
) -> int:
    """Fold ``func`` over ``[lower, upper)`` seeded with ``sequence[0]``.

    With a combiner returning the larger argument this is the maximum of the
    sequence, with one returning the smaller it is the minimum. Any other
    two-argument integer combiner is folded the same way:
    ``func(...func(func(sequence[0], sequence[lower]), sequence[lower + 1])...)``.

    Args:
        sequence: Non-empty sequence of integers.
        lower: Inclusive lower bound of the range (``1`` for a whole-sequence fold).
        upper: Exclusive upper bound of the range.
        func: Combiner taking the running result and the next item.

    Returns:
        The folded value, or ``sequence[0]`` for an empty range.

    Raises:
        EmptySequence: If the sequence has no items.
        InvalidRange: If the range does not fit the sequence.
    """
    if len(sequence) == 0:
        logger.debug("min_max called with an empty sequence")
        raise EmptySequence("min_max")

    indices = check_range(sequence, lower, upper)
    return reduce(lambda acc, i: func(acc, sequence[i]), indices, sequence[0])
