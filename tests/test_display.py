import random

import pytest

from scicalc.display import format_result, round_result


def test_tiny_values_become_zero():
    assert round_result(1e-13) == 0
    assert round_result(-9.9e-13) == 0
    assert format_result(-1e-15) == "0"


def test_float_noise_is_masked():
    assert round_result(0.1 + 0.2) == 0.3
    assert format_result(0.1 + 0.2) == "0.3"
    assert format_result(1.0000000000001) == "1"


def test_rounds_to_twelve_places_half_up():
    assert round_result(0.1234567890125) == pytest.approx(0.123456789013)
    assert round_result(2.0000000000006) == pytest.approx(2.000000000001)


@pytest.mark.parametrize("value, text", [
    (14.0, "14"),
    (14, "14"),
    (-29.0, "-29"),
    (0.5, "0.5"),
    (123456789.0, "123456789"),
    (1e300, "1e+300"),
    (2.5e300, "2.5e+300"),
    (0.00001, "0.00001"),
])
def test_number_text(value, text):
    assert format_result(value) == text


def test_non_numbers_pass_through():
    assert round_result(None) is None
    assert round_result("abc") == "abc"
    assert format_result(None) == ""
    assert format_result("Error") == "Error"


@pytest.mark.parametrize("value", [0.1 + 0.2, 1 / 3, 2 / 3, 123.456, -0.75, 1e-9, 42.0])
def test_rounding_is_idempotent(value):
    once = round_result(value)
    assert round_result(once) == once
    assert format_result(once) == format_result(value)


@pytest.mark.parametrize("value", [
    8202.110912365077,
    8470.145501101517,
    4503.599627370497,
    -9007.199254740991,
    999.9999999999999,
    123456.78901234567,
    1e15 / 3,
])
def test_rounding_is_idempotent_above_a_thousand(value):
    once = round_result(value)
    assert round_result(once) == once
    assert round_result(round_result(once)) == once


def test_large_values_keep_fifteen_significant_digits():
    assert round_result(8202.110912365077) == 8202.11091236508
    assert round_result(3000.0000000000005) == 3000.0
    assert round_result(999.9999999999999) == 1000.0


def test_rounding_is_idempotent_across_magnitudes():
    rng = random.Random(20261018)
    for exp in range(-14, 21):
        for _ in range(300):
            v = rng.uniform(1, 10) * 10.0 ** exp * rng.choice((1, -1))
            once = round_result(v)
            assert round_result(once) == once, v
