import jax.numpy as jnp
import numpy as np
from seqlogic.core.predicates import (
    ascending,
    descending,
    equal_to,
    even,
    greater_than,
    less_than,
    maximum,
    minimum,
    negate,
    odd,
    positive,
)


def test_unary_predicates():
    assert positive(1) and not positive(0) and not positive(-3)
    assert even(0) and even(-4) and not even(7)
    assert odd(-3) and not odd(10)
    assert equal_to(6)(6) and not equal_to(6)(7)
    assert greater_than(4)(5) and not greater_than(4)(4)
    assert less_than(4)(3) and not less_than(4)(4)


def test_factory_names():
    assert equal_to(6).__name__ == "equal_to_6"
    assert greater_than(4).__name__ == "greater_than_4"
    assert negate(positive).__name__ == "not_positive"


def test_pairwise_predicates():
    assert ascending(1, 2) and ascending(2, 2) and not ascending(3, 2)
    assert descending(3, 2) and descending(2, 2) and not descending(1, 2)


def test_combiners():
    assert maximum(3, 9) == 9
    assert maximum(9, 3) == 9
    assert minimum(3, 9) == 3
    assert minimum(-1, -1) == -1


def test_negate_scalar():
    not_even = negate(even)
    assert not_even(3) is True
    assert not_even(4) is False
    assert negate(ascending)(3, 2) is True


def test_negate_elementwise():
    x = np.array([1, 2, 3, 4])
    assert negate(even)(x).tolist() == [True, False, True, False]

    y = jnp.array([1, 2, 3, 4])
    assert negate(greater_than(2))(y).tolist() == [True, True, False, False]


def test_predicates_are_elementwise():
    x = jnp.array([-1, 0, 1, 2])
    assert positive(x).tolist() == [False, False, True, True]
    assert odd(x).tolist() == [True, False, True, False]
    assert ascending(x[:-1], x[1:]).tolist() == [True, True, True]
