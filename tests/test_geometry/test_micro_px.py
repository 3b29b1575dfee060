"""Tests for the µpx fixed-point scalar."""

from __future__ import annotations

import pytest

from artboard.geometry.micro_px import (
    MAX_PX_U,
    MIN_PX_U,
    PX_U_SCALE,
    ParseError,
    clamp_micro_px,
    clamp_position_px_u,
    parse_integer_string,
)


SAMPLES = [
    -(10**30),
    -MAX_PX_U,
    -1,
    0,
    1,
    MIN_PX_U - 1,
    MIN_PX_U,
    123_456_789,
    MAX_PX_U,
    MAX_PX_U + 1,
    10**30,
]


def test_constants():
    assert PX_U_SCALE == 1_000_000
    assert MIN_PX_U == PX_U_SCALE
    assert MAX_PX_U == 32_768 * PX_U_SCALE


def test_clamp_boundaries():
    assert clamp_micro_px(MIN_PX_U - 1) == MIN_PX_U
    assert clamp_micro_px(MAX_PX_U + 1) == MAX_PX_U
    assert clamp_micro_px(MIN_PX_U) == MIN_PX_U
    assert clamp_micro_px(MAX_PX_U) == MAX_PX_U
    assert clamp_micro_px(0) == MIN_PX_U


@pytest.mark.parametrize("value", SAMPLES)
def test_clamp_idempotent_and_in_range(value):
    once = clamp_micro_px(value)
    assert clamp_micro_px(once) == once
    assert MIN_PX_U <= once <= MAX_PX_U


def test_clamp_leaves_in_range_values_untouched():
    assert clamp_micro_px(123_456_789) == 123_456_789


def test_clamp_position_keeps_zero_and_negatives():
    assert clamp_position_px_u(0) == 0
    assert clamp_position_px_u(-5_000_000) == -5_000_000
    assert clamp_position_px_u(-MAX_PX_U - 1) == -MAX_PX_U
    assert clamp_position_px_u(MAX_PX_U + 1) == MAX_PX_U


class TestParseIntegerString:
    def test_plain_and_signed(self):
        assert parse_integer_string("123") == 123
        assert parse_integer_string("-5") == -5
        assert parse_integer_string("+7") == 7
        assert parse_integer_string("0") == 0

    def test_arbitrary_precision(self):
        text = "123456789012345678901234567890"
        assert parse_integer_string(text) == 123456789012345678901234567890
        assert str(parse_integer_string(text)) == text

    def test_does_not_clamp(self):
        assert parse_integer_string(str(MAX_PX_U + 1)) == MAX_PX_U + 1

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "1 2", "1.5", "1_000", "abc", "1e6", "--1", "+", "٣"])
    def test_malformed_strings(self, text):
        with pytest.raises(ParseError):
            parse_integer_string(text)

    @pytest.mark.parametrize("value", [None, 12, 1.0, b"12"])
    def test_non_strings(self, value):
        with pytest.raises(ParseError):
            parse_integer_string(value)

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)
