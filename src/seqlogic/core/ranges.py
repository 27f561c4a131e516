"""Half-open index ranges and their validity checks.

Every sequence operation is bounded by a range ``[lower, upper)`` supplied by
the caller. The range is validated against the sequence before any element is
read, so a bad range surfaces as :class:`~seqlogic.core.errors.InvalidRange`
instead of an ``IndexError`` halfway through a loop (or, worse, a silent read
from the end of the sequence through a negative index).
"""

import logging
import operator
import typing as tp

from seqlogic.core.errors import InvalidRange

__all__ = ["check_range"]

logger = logging.getLogger(__name__)


def check_range(
    sequence: tp.Sized, lower: int, upper: int, min_lower: int = 0
) -> range:
    """Validate ``[lower, upper)`` against ``sequence``.

    Args:
        sequence: Sequence the range indexes into.
        lower: Inclusive lower bound.
        upper: Exclusive upper bound.
        min_lower: Smallest admissible lower bound. Pairwise operations read
            ``sequence[i - 1]`` and pass ``1``.

    Returns:
        The validated ``range(lower, upper)``.

    Raises:
        InvalidRange: If a bound is not an integer, ``lower < min_lower``,
            ``lower > upper`` or ``upper > len(sequence)``.
    """
    length = len(sequence)

    try:
        lo = operator.index(lower)
        hi = operator.index(upper)
    except TypeError:
        reason = "bounds must be integers"
    else:
        if isinstance(lower, bool) or isinstance(upper, bool):
            reason = "bounds must be integers"
        elif lo < min_lower:
            reason = f"lower bound must be at least {min_lower}"
        elif lo > hi:
            reason = "lower bound exceeds upper bound"
        elif hi > length:
            reason = "upper bound exceeds sequence length"
        else:
            return range(lo, hi)

    logger.debug(f"Rejected range [{lower}, {upper}) (length={length}): {reason}")
    raise InvalidRange(lower, upper, length, reason)
