import math

from utils.numeric import INT64_MAX, INT64_MIN, approx_pow, round_half_up, to_hex_string


def test_hex_small_values() -> None:
    assert to_hex_string(0) == "0"
    assert to_hex_string(9) == "9"
    assert to_hex_string(10) == "a"
    assert to_hex_string(16) == "10"
    assert to_hex_string(255) == "ff"
    assert to_hex_string(0xDEADBEEF) == "deadbeef"


def test_hex_non_negative_has_no_leading_zero_and_parses_back() -> None:
    for n in [1, 15, 16, 4095, 4096, 123456789, 2**32, 2**40 + 7, INT64_MAX]:
        text = to_hex_string(n)
        assert not text.startswith("0")
        assert text == text.lower()
        assert int(text, 16) == n


def test_hex_negative_is_full_width_bit_pattern() -> None:
    assert to_hex_string(-1) == "ffffffffffffffff"
    assert to_hex_string(INT64_MIN) == "8000000000000000"
    assert to_hex_string(INT64_MAX) == "7fffffffffffffff"
    for n in [-2, -16, -255, -(2**32), INT64_MIN + 1]:
        text = to_hex_string(n)
        assert len(text) == 16
        assert int(text, 16) == n + 2**64


def test_hex_wraps_out_of_range_ints_to_64_bits() -> None:
    assert to_hex_string(2**64 + 5) == "5"
    assert to_hex_string(2**63) == "8000000000000000"


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1
    assert round_half_up(2.4) == 2
    assert round_half_up(2.6) == 3
    assert round_half_up(-2.6) == -3
    assert round_half_up(0.0) == 0


def test_round_nan_is_zero() -> None:
    assert round_half_up(float("nan")) == 0


def test_round_saturates() -> None:
    assert round_half_up(math.inf) == INT64_MAX
    assert round_half_up(-math.inf) == INT64_MIN
    assert round_half_up(1e300) == INT64_MAX
    assert round_half_up(-1e300) == INT64_MIN


def test_approx_pow_identity_exponent_keeps_high_word() -> None:
    assert approx_pow(2.0, 1.0) == 2.0
    assert approx_pow(0.5, 1.0) == 0.5
    assert approx_pow(1024.0, 1.0) == 1024.0


def test_approx_pow_is_rough_estimate() -> None:
    assert abs(approx_pow(4.0, 0.5) - 2.0) < 0.1
    assert abs(approx_pow(3.0, 0.0) - 1.0) < 0.05
    assert 7.0 < approx_pow(2.0, 3.0) < 10.0


def test_approx_pow_nan_exponent() -> None:
    assert approx_pow(2.0, float("nan")) == 0.0


def test_approx_pow_negative_fraction_wraps_to_nan() -> None:
    for a in (-0.5, -0.25, -0.0):
        assert math.isnan(approx_pow(a, 1.0))


def test_approx_pow_negative_base_without_wrap() -> None:
    assert approx_pow(-2.0, 1.0) == -2.0


def test_round_accepts_ints() -> None:
    assert round_half_up(7) == 7
    assert round_half_up(-7) == -7
    assert round_half_up(10**400) == INT64_MAX
    assert round_half_up(-(10**400)) == INT64_MIN
