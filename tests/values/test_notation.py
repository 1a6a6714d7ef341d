"""Tests for parsing and formatting photographic notations."""

import random

import pytest

from exposure_engine.values.notation import (
    FormatError,
    FormatErrorKind,
    describe,
    format_value,
    parse,
)
from exposure_engine.values.types import Aperture, Iso, ParameterKind, ShutterSpeed

SHUTTER = ParameterKind.SHUTTER_SPEED
APERTURE = ParameterKind.APERTURE
ISO = ParameterKind.ISO


# ── Parsing ────────────────────────────────────────────────────────────────────


class TestParseShutter:
    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("1/125", 1 / 125),
            ("1/8000", 1 / 8000),
            ("1/4", 0.25),
            ('2"', 2.0),
            ('0.5"', 0.5),
            ('30"', 30.0),
            ("0.5", 0.5),
            ("1", 1.0),
            ("  1/60  ", 1 / 60),
        ],
    )
    def test_accepted_notations(self, text, seconds):
        result = parse(text, SHUTTER)
        assert isinstance(result, ShutterSpeed)
        assert result.seconds == pytest.approx(seconds)

    @pytest.mark.parametrize("text", ["1/125sec", "1/125s", "fast", "1//125", '2""', "-1/125"])
    def test_malformed(self, text):
        result = parse(text, SHUTTER)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.MALFORMED
        assert result.parameter == SHUTTER
        assert result.text == text

    @pytest.mark.parametrize("text", ["1/0", "0", '0"', "0/125"])
    def test_out_of_range(self, text):
        result = parse(text, SHUTTER)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.OUT_OF_RANGE

    def test_empty_is_malformed(self):
        result = parse("   ", SHUTTER)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.MALFORMED

    def test_message_names_parameter_and_text(self):
        result = parse("1/125sec", SHUTTER)
        assert result.message.startswith("Invalid shutter speed format: 1/125sec")


class TestParseAperture:
    @pytest.mark.parametrize(
        "text,f_number",
        [("f/2.8", 2.8), ("F/8", 8.0), ("5.6", 5.6), ("f/22", 22.0), ("f/1", 1.0)],
    )
    def test_accepted_notations(self, text, f_number):
        assert parse(text, APERTURE) == Aperture(f_number=f_number)

    @pytest.mark.parametrize("text", ["f-5.6", "f5.6", "f/", "f/2.8/", "wide"])
    def test_malformed(self, text):
        result = parse(text, APERTURE)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.MALFORMED

    def test_zero_is_out_of_range(self):
        result = parse("f/0", APERTURE)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.OUT_OF_RANGE
        assert result.message.startswith("Invalid aperture value: f/0")


class TestParseIso:
    @pytest.mark.parametrize("text,sensitivity", [("100", 100), ("25", 25), ("102400", 102400)])
    def test_accepted(self, text, sensitivity):
        assert parse(text, ISO) == Iso(sensitivity=sensitivity)

    @pytest.mark.parametrize("text", ["ISO100", "100.5", "-100", "1e3", "hundred"])
    def test_malformed(self, text):
        result = parse(text, ISO)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.MALFORMED
        assert result.parameter_name == "ISO"

    @pytest.mark.parametrize("text", ["0", "24", "102401", "204800"])
    def test_out_of_range(self, text):
        result = parse(text, ISO)
        assert isinstance(result, FormatError)
        assert result.kind == FormatErrorKind.OUT_OF_RANGE
        assert "25" in result.message
        assert "102400" in result.message


# ── Formatting ─────────────────────────────────────────────────────────────────


class TestFormatValue:
    @pytest.mark.parametrize(
        "seconds,text",
        [
            (1 / 1000, "1/1000"),
            (1 / 125, "1/125"),
            (0.25, "1/4"),
            (0.5, '0.5"'),
            (0.3, '0.3"'),
            (1.0, '1"'),
            (2.5, '2.5"'),
            (30.0, '30"'),
        ],
    )
    def test_shutter(self, seconds, text):
        assert format_value(ShutterSpeed(seconds=seconds)) == text

    @pytest.mark.parametrize(
        "f_number,text", [(1.0, "f/1"), (2.8, "f/2.8"), (5.6, "f/5.6"), (22.0, "f/22")]
    )
    def test_aperture(self, f_number, text):
        assert format_value(Aperture(f_number=f_number)) == text

    def test_iso(self):
        assert format_value(Iso(sensitivity=3200)) == "3200"

    def test_rejects_non_value(self):
        with pytest.raises(TypeError):
            format_value(1.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kind,text",
        [
            (SHUTTER, "1/8000"),
            (SHUTTER, "1/90"),
            (SHUTTER, '1.3"'),
            (SHUTTER, '15"'),
            (APERTURE, "f/1.4"),
            (APERTURE, "f/7.1"),
            (ISO, "640"),
        ],
    )
    def test_canonical_text_survives_parse_and_format(self, kind, text):
        assert format_value(parse(text, kind)) == text


class TestDescribe:
    def test_fast_shutter_as_fraction(self):
        assert describe(SHUTTER, 1 / 1043) == "1/1043"

    def test_slow_shutter_with_seconds_mark(self):
        assert describe(SHUTTER, 36.76) == '36.8"'

    def test_aperture(self):
        assert describe(APERTURE, 0.7071) == "f/0.7"

    def test_iso(self):
        assert describe(ISO, 150000.4) == "150000"

    def test_shutter_too_short_for_a_reciprocal(self):
        # 1/1e-320 is inf; the raw seconds are shown instead.
        text = describe(SHUTTER, 1e-320)
        assert text.endswith('"')
        assert parse(text, SHUTTER) == ShutterSpeed(1e-320)


# ── Value round trip ───────────────────────────────────────────────────────────


class TestValueRoundTrip:
    @pytest.mark.parametrize(
        "value",
        [
            ShutterSpeed(1 / 3),
            ShutterSpeed(0.2999),
            ShutterSpeed(0.3),
            # Non-integer reciprocals: written 1/<decimal> or with a seconds mark.
            ShutterSpeed(1 / 7.5),
            ShutterSpeed(1 / 12.5),
            ShutterSpeed(1 / 2.6),
            ShutterSpeed(1 / 6.4),
            # Reciprocal overflows to inf.
            ShutterSpeed(1e-320),
            ShutterSpeed(1e300),
            Aperture(1 / 3),
            Aperture(0.1 + 0.2),
            Aperture(1e-300),
            Iso(25),
            Iso(102400),
        ],
    )
    def test_parse_of_format_is_identity(self, value):
        assert parse(format_value(value), value.kind) == value

    def test_subnormal_shutter_uses_seconds_mark(self):
        assert format_value(ShutterSpeed(1e-320)).endswith('"')

    def test_random_sweep(self):
        rng = random.Random(1729)
        mismatches = []
        for _ in range(2000):
            for value in (
                ShutterSpeed(10 ** rng.uniform(-5, 3)),
                Aperture(10 ** rng.uniform(-1, 2)),
            ):
                if parse(format_value(value), value.kind) != value:
                    mismatches.append(value)
        assert mismatches == []
