"""Universal and existential quantifiers over integer sequences.

This module provides stateless functions that evaluate a caller supplied
predicate over the items of a sequence whose indices fall in the half-open
range ``[lower, upper)``:

    - **for_all**: conjunction of ``pred(seq[i])`` over the range
    - **for_all_pairs**: conjunction of ``pred(seq[i - 1], seq[i])`` over the range
    - **there_exists**: disjunction of ``pred(seq[i])`` over the range
    - **cardinality**: number of indices for which ``pred(seq[i])`` holds

Empty ranges evaluate to the identity of the underlying connective (``True``
for conjunction, ``False`` for disjunction, ``0`` for counting) without reading
the sequence. Predicates are expected to be pure, so the quantifiers stop as
soon as the result is decided.

Examples:
    >>> from seqlogic.core.predicates import even, ascending
    >>> from seqlogic.functional.quantifiers import for_all, for_all_pairs
    >>>
    >>> f = [2, 4, 6, 8, 10]
    >>> for_all(f, 0, len(f), even)
    True
    >>> for_all_pairs(f, 1, len(f), ascending)
    True
"""

import typing as tp

from seqlogic.core.ranges import check_range
from seqlogic.core.types import PairwisePredicate, Predicate

__all__ = [
    "for_all",
    "for_all_pairs",
    "there_exists",
    "cardinality",
]


def for_all(
    sequence: tp.Sequence[int], lower: int, upper: int, pred: Predicate
) -> bool:
    """Check that ``pred`` holds for every item in ``[lower, upper)``.

    Args:
        sequence: Sequence of integers.
        lower: Inclusive lower bound of the range.
        upper: Exclusive upper bound of the range.
        pred: Unary predicate applied to each item.

    Returns:
        ``True`` if the predicate holds for all items, vacuously ``True`` for
        an empty range.

    Raises:
        InvalidRange: If the range does not fit the sequence.
    """
    return all(pred(sequence[i]) for i in check_range(sequence, lower, upper))


def for_all_pairs(
    sequence: tp.Sequence[int], lower: int, upper: int, pred: PairwisePredicate
) -> bool:
    """Check that ``pred`` holds for every adjacent pair ending in ``[lower, upper)``.

    Each index ``i`` of the range is tested as ``pred(sequence[i - 1],
    sequence[i])``, so checking the order of a whole sequence uses
    ``lower=1``.

    Args:
        sequence: Sequence of integers.
        lower: Inclusive lower bound of the range, at least 1.
        upper: Exclusive upper bound of the range.
        pred: Pairwise predicate applied to ``(previous, current)``.

    Returns:
        ``True`` if the predicate holds for all pairs, vacuously ``True`` for
        an empty range.

    Raises:
        InvalidRange: If ``lower < 1`` or the range does not fit the sequence.
    """
    indices = check_range(sequence, lower, upper, min_lower=1)
    return all(pred(sequence[i - 1], sequence[i]) for i in indices)


def there_exists(
    sequence: tp.Sequence[int], lower: int, upper: int, pred: Predicate
) -> bool:
    """Check that ``pred`` holds for at least one item in ``[lower, upper)``.

    Returns:
        ``True`` if some item satisfies the predicate, ``False`` for an empty
        range.

    Raises:
        InvalidRange: If the range does not fit the sequence.
    """
    return any(pred(sequence[i]) for i in check_range(sequence, lower, upper))


def cardinality(
    sequence: tp.Sequence[int], lower: int, upper: int, pred: Predicate
) -> int:
    """Count the items in ``[lower, upper)`` that satisfy ``pred``.

    Raises:
        InvalidRange: If the range does not fit the sequence.
    """
    return sum(1 for i in check_range(sequence, lower, upper) if pred(sequence[i]))
