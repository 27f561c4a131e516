"""Demonstration driver for the sequence quantifiers and aggregations."""

import typing as tp

from pydantic import TypeAdapter

from seqlogic.app.core.config import Settings
from seqlogic.app.schemas.statement import Statement
from seqlogic.core.errors import SequenceAssertionError
from seqlogic.core.predicates import (
    ascending,
    descending,
    equal_to,
    even,
    greater_than,
    maximum,
    minimum,
    odd,
    positive,
)
from seqlogic.core.types import IntSequence
from seqlogic.functional.aggregates import min_max, product, summation
from seqlogic.functional.quantifiers import (
    cardinality,
    for_all,
    for_all_pairs,
    there_exists,
)
from seqlogic.logger.logger import setup_logger


def evaluate(sequence: tp.Sequence[int]) -> tp.List[Statement]:
    """Evaluate every demonstrated statement over ``sequence``.

    Args:
        sequence: Non-empty sequence of integers.

    Returns:
        One statement per computed result, in display order.

    Raises:
        pydantic.ValidationError: If the sequence is empty or holds non-integers.
    """
    f = TypeAdapter(IntSequence).validate_python(sequence)
    n = len(f)

    return [
        Statement(
            description="Contains all positive values",
            value=for_all(f, 0, n, positive),
        ),
        Statement(
            description="Contains all even values", value=for_all(f, 0, n, even)
        ),
        Statement(
            description="Contains all odd values", value=for_all(f, 0, n, odd)
        ),
        Statement(
            description="Is sorted in ascending order",
            value=for_all_pairs(f, 1, n, ascending),
        ),
        Statement(
            description="Is sorted in descending order",
            value=for_all_pairs(f, 1, n, descending),
        ),
        Statement(
            description="Contains the value 6",
            value=there_exists(f, 0, n, equal_to(6)),
        ),
        Statement(
            description="Contains an odd value", value=there_exists(f, 0, n, odd)
        ),
        Statement(
            description="Frequency of the values > 4",
            value=cardinality(f, 0, n, greater_than(4)),
        ),
        Statement(description="Sum of values", value=summation(f, 0, n)),
        Statement(description="Product of values", value=product(f, 0, n)),
        # f[0] is the assumed extremum, so fold over the rest
        Statement(description="Max value", value=min_max(f, 1, n, maximum)),
        Statement(description="Min value", value=min_max(f, 1, n, minimum)),
    ]


def check_positive(sequence: tp.Sequence[int]) -> None:
    """Raise :class:`SequenceAssertionError` unless every item is positive."""
    if not for_all(sequence, 0, len(sequence), positive):
        raise SequenceAssertionError("Error: contains negatives!")


def main(settings: tp.Optional[Settings] = None) -> None:
    """Main function to run the demonstration."""
    settings = settings or Settings.load()
    logger = setup_logger(level=settings.LOG_LEVEL)

    logger.info(f"Evaluating statements over {len(settings.SEQUENCE)} values")
    statements = evaluate(settings.SEQUENCE)
    for statement in statements:
        print(statement)

    check_positive(settings.SEQUENCE)
    logger.info("All assertions hold")


if __name__ == "__main__":
    main()
