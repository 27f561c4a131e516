import pytest


@pytest.fixture
def sample_sequence():
    return [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]


class ExplodingSequence:
    """Sequence of a given length that fails on any item access."""

    def __init__(self, length):
        self.length = length

    def __len__(self):
        return self.length

    def __getitem__(self, index):
        raise AssertionError(f"item {index} was read")


@pytest.fixture
def exploding_sequence():
    return ExplodingSequence(10)
