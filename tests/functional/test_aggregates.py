from concurrent.futures import ThreadPoolExecutor

import pytest
from seqlogic.core.errors import EmptySequence, InvalidRange
from seqlogic.core.predicates import even, greater_than, maximum, minimum
from seqlogic.functional.aggregates import min_max, product, summation
from seqlogic.functional.quantifiers import cardinality, for_all


def test_summation_sample(sample_sequence):
    assert summation(sample_sequence, 0, 10) == 110
    assert summation(sample_sequence, 2, 5) == 6 + 8 + 10


def test_product_sample_is_exact(sample_sequence):
    # no 32-bit wraparound on the pure-Python path
    assert product(sample_sequence, 0, 10) == 3715891200
    assert product(sample_sequence, 0, 3) == 48


def test_empty_range_identities(exploding_sequence):
    assert summation(exploding_sequence, 4, 4) == 0
    assert product(exploding_sequence, 4, 4) == 1


def test_min_max_sample(sample_sequence):
    assert min_max(sample_sequence, 1, 10, maximum) == 20
    assert min_max(sample_sequence, 1, 10, minimum) == 2


def test_min_max_unsorted():
    seq = [7, -2, 15, 3, 15, -9, 0]
    assert min_max(seq, 1, len(seq), maximum) == 15
    assert min_max(seq, 1, len(seq), minimum) == -9


def test_min_max_seed_is_always_first_item():
    seq = [100, 1, 2, 3, 4]
    # seed seq[0] = 100 takes part even though the range starts at 3
    assert min_max(seq, 3, 5, maximum) == 100
    assert min_max(seq, 3, 5, minimum) == 3


def test_min_max_general_combiner():
    seq = [1, 2, 3, 4]
    assert min_max(seq, 1, 4, lambda acc, x: acc + x) == 10
    # lower=0 folds the seed with itself
    assert min_max(seq, 0, 4, lambda acc, x: acc + x) == 11
    assert min_max(seq, 1, 4, lambda acc, x: acc * 10 + x) == 1234


def test_min_max_empty_range_returns_seed():
    assert min_max([42, 1, 2], 1, 1, maximum) == 42
    assert min_max([42], 1, 1, minimum) == 42


def test_min_max_empty_sequence():
    with pytest.raises(EmptySequence):
        min_max([], 0, 0, maximum)
    with pytest.raises(EmptySequence) as excinfo:
        min_max((), 1, 1, minimum)
    assert excinfo.value.operation == "min_max"


@pytest.mark.parametrize("lo, hi", [(-1, 3), (4, 2), (0, 11)])
def test_invalid_ranges(sample_sequence, lo, hi):
    with pytest.raises(InvalidRange):
        summation(sample_sequence, lo, hi)
    with pytest.raises(InvalidRange):
        product(sample_sequence, lo, hi)
    with pytest.raises(InvalidRange):
        min_max(sample_sequence, lo, hi, maximum)


def test_tuple_input():
    seq = (3, -4, 5)
    assert summation(seq, 0, 3) == 4
    assert product(seq, 0, 3) == -60


def test_concurrent_calls_share_one_sequence(sample_sequence):
    def evaluate_all(_):
        return (
            for_all(sample_sequence, 0, 10, even),
            cardinality(sample_sequence, 0, 10, greater_than(4)),
            summation(sample_sequence, 0, 10),
            product(sample_sequence, 0, 10),
            min_max(sample_sequence, 1, 10, maximum),
            min_max(sample_sequence, 1, 10, minimum),
        )

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate_all, range(200)))

    assert set(results) == {(True, 8, 110, 3715891200, 20, 2)}
    assert sample_sequence == [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]
