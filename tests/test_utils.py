import string

import pytest

from deploykit.utils import generate_random_string

_ALLOWED = set(string.digits + string.ascii_letters)


@pytest.mark.parametrize("length", [1, 8, 64])
def test_length_and_alphabet(length):
    value = generate_random_string(length)
    assert len(value) == length
    assert set(value) <= _ALLOWED


def test_zero_length_is_empty():
    assert generate_random_string(0) == ""


def test_values_differ():
    values = {generate_random_string(32) for _ in range(10)}
    assert len(values) == 10


def test_negative_length_raises():
    with pytest.raises(ValueError):
        generate_random_string(-1)