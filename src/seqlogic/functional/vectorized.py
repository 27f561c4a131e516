r"""Vectorized sequence operations with fixed-width integer arithmetic.

This module mirrors :mod:`seqlogic.functional.quantifiers` and
:mod:`seqlogic.functional.aggregates` on top of JAX. Sequences are converted to
``int32`` arrays, so summation and product wrap around on overflow exactly like
32-bit two's-complement integers:

.. math::

    \prod_{i=0}^{9} 2(i + 1) = 3715891200 \equiv -579076096 \pmod{2^{32}}

Rather than slicing (which needs static bounds under ``jax.jit``), every
operation builds a boolean mask over ``jnp.arange(n)`` selecting the range and
reduces with the identity of the operation outside it. Ranges are still
validated eagerly against the concrete Python bounds, with the same errors as
the pure-Python functions.

Predicates must be element-wise (``lambda x: x > 0`` works on arrays as-is).
:func:`min_max` folds item by item with ``jax.lax.fori_loop``, so its combiner
is applied to scalars but must be traceable: use ``jnp.maximum`` /
``jnp.minimum`` or an expression built from ``jnp.where`` rather than a Python
``if``.

Key Functions:
    - for_all, for_all_pairs, there_exists, cardinality: masked reductions
    - summation, product: ``int32`` reductions with wraparound
    - min_max: seeded fold with ``jax.lax.fori_loop``
"""

import logging
import typing as tp

import jax
import jax.numpy as jnp
import numpy as np

from seqlogic.core.errors import EmptySequence
from seqlogic.core.ranges import check_range
from seqlogic.core.types import Combiner, PairwisePredicate, Predicate

__all__ = [
    "as_int32",
    "range_mask",
    "for_all",
    "for_all_pairs",
    "there_exists",
    "cardinality",
    "summation",
    "product",
    "min_max",
]

logger = logging.getLogger(__name__)


def as_int32(sequence: tp.Any) -> jax.Array:
    """Convert a sequence of integers to a 1D ``int32`` array.

    Values outside the ``int32`` range are wrapped, as a cast would in a
    fixed-width language. The cast goes through NumPy because JAX refuses
    Python integers that do not fit its default integer type.
    """
    x = np.asarray(sequence, dtype=np.int64)
    if x.ndim != 1:
        raise ValueError(f"Expected a 1D sequence, got shape {x.shape}.")
    return jnp.asarray(x.astype(np.int32))


def range_mask(n: int, lower: int, upper: int) -> jax.Array:
    """Boolean mask of length ``n`` selecting the indices in ``[lower, upper)``."""
    idx = jnp.arange(n)
    return (idx >= lower) & (idx < upper)


def for_all(sequence: tp.Any, lower: int, upper: int, pred: Predicate) -> bool:
    """Vectorized universal quantifier; ``True`` for an empty range."""
    check_range(sequence, lower, upper)
    x = as_int32(sequence)
    mask = range_mask(x.shape[0], lower, upper)
    return bool(jnp.all(jnp.where(mask, pred(x), True)))


def for_all_pairs(
    sequence: tp.Any, lower: int, upper: int, pred: PairwisePredicate
) -> bool:
    """Vectorized pairwise universal quantifier over ``(x[i - 1], x[i])``.

    Pair ``k`` of ``pred(x[:-1], x[1:])`` ends at index ``k + 1``, so the mask
    selects pairs ``[lower - 1, upper - 1)``.
    """
    check_range(sequence, lower, upper, min_lower=1)
    if lower == upper:
        return True
    x = as_int32(sequence)
    mask = range_mask(x.shape[0] - 1, lower - 1, upper - 1)
    return bool(jnp.all(jnp.where(mask, pred(x[:-1], x[1:]), True)))


def there_exists(sequence: tp.Any, lower: int, upper: int, pred: Predicate) -> bool:
    """Vectorized existential quantifier; ``False`` for an empty range."""
    check_range(sequence, lower, upper)
    x = as_int32(sequence)
    mask = range_mask(x.shape[0], lower, upper)
    return bool(jnp.any(jnp.where(mask, pred(x), False)))


def cardinality(sequence: tp.Any, lower: int, upper: int, pred: Predicate) -> int:
    """Vectorized count of the items in range satisfying ``pred``."""
    check_range(sequence, lower, upper)
    x = as_int32(sequence)
    mask = range_mask(x.shape[0], lower, upper)
    return int(jnp.sum(mask & pred(x), dtype=jnp.int32))


def summation(sequence: tp.Any, lower: int, upper: int) -> int:
    """``int32`` sum of the items in range, wrapping on overflow."""
    check_range(sequence, lower, upper)
    x = as_int32(sequence)
    mask = range_mask(x.shape[0], lower, upper)
    return int(jnp.sum(jnp.where(mask, x, 0), dtype=jnp.int32))


def product(sequence: tp.Any, lower: int, upper: int) -> int:
    """``int32`` product of the items in range, wrapping on overflow."""
    check_range(sequence, lower, upper)
    x = as_int32(sequence)
    mask = range_mask(x.shape[0], lower, upper)
    return int(jnp.prod(jnp.where(mask, x, 1), dtype=jnp.int32))


def min_max(sequence: tp.Any, lower: int, upper: int, func: Combiner) -> int:
    """Fold a traceable combiner over the range, seeded with ``sequence[0]``.

    Raises:
        EmptySequence: If the sequence has no items.
        InvalidRange: If the range does not fit the sequence.
    """
    if len(sequence) == 0:
        logger.debug("min_max called with an empty sequence")
        raise EmptySequence("min_max")
    check_range(sequence, lower, upper)
    x = as_int32(sequence)

    def body(i, acc):
        return jnp.asarray(func(acc, x[i]), dtype=jnp.int32)

    return int(jax.lax.fori_loop(lower, upper, body, x[0]))
