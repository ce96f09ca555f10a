import math

import pytest

from hivecmap.quadcode import code_to_str, nearly_equal, pow2


def test_zero_length_is_empty():
    assert code_to_str(12345, 0) == ""


@pytest.mark.parametrize("length", [1, 2, 3, 8, 15])
def test_digit_count(length):
    assert len(code_to_str(0, length)) == math.ceil(length / 2)


@pytest.mark.parametrize("code", [0, 1, 7, 255, 1023, 0xABCDE])
def test_digits_reassemble_code(code):
    text = code_to_str(code, 20)
    rebuilt = sum(int(d) << (2 * i) for i, d in enumerate(text))
    assert rebuilt == code
    assert set(text) <= set("0123")


def test_bits_beyond_length_ignored():
    assert code_to_str(0b110000, 4) == code_to_str(0, 4)


def test_nearly_equal_same_value():
    assert nearly_equal(3.5, 3.5)


def test_nearly_equal_rejects_distinct():
    assert not nearly_equal(1.0, 1.0 + 1e-9)


def test_nearly_equal_zero_only_matches_zero():
    assert nearly_equal(0.0, 0.0)
    assert not nearly_equal(0.0, 1e-300)


@pytest.mark.parametrize("x", [0.0, 1.5, 3.0, 12.0])
def test_pow2_symmetric_and_root(x):
    assert pow2(-x) == pow2(x)
    assert math.sqrt(pow2(x)) == x