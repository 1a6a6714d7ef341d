"""
Parsing and formatting of photographic notations.

Accepted input notations:

    shutter speed   1/125   0.5   2"   (fraction, bare seconds, seconds mark)
    aperture        f/2.8   2.8
    ISO             400     (integer in [ISO_MIN, ISO_MAX])

parse() never raises for bad text; it returns a FormatError value naming the
parameter and the offending text so the caller can re-prompt. format_value()
produces the canonical form, which parse() maps back to an equal value.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from .types import (
    ISO_MAX,
    ISO_MIN,
    Aperture,
    ExposureValue,
    Iso,
    ParameterKind,
    ShutterSpeed,
)

# Shutter speeds at or above this many seconds are written with a seconds mark.
SECONDS_MARK_THRESHOLD: float = 0.3

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
_FRACTION_RE = re.compile(rf"{_NUMBER}/{_NUMBER}")
_SECONDS_MARK_RE = re.compile(rf'{_NUMBER}"')
_DECIMAL_RE = re.compile(_NUMBER)
_APERTURE_RE = re.compile(rf"(?:[fF]/)?{_NUMBER}")
_ISO_RE = re.compile(r"\d+")


class FormatErrorKind(str, Enum):
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class FormatError:
    """Textual input that does not describe a valid exposure value."""

    kind: FormatErrorKind
    parameter: ParameterKind
    text: str
    detail: str

    @property
    def parameter_name(self) -> str:
        return self.parameter.display_name

    @property
    def message(self) -> str:
        if self.kind == FormatErrorKind.OUT_OF_RANGE:
            return f"Invalid {self.parameter_name} value: {self.text} ({self.detail})"
        return f"Invalid {self.parameter_name} format: {self.text} ({self.detail})"


ParseResult = Union[ExposureValue, FormatError]

# ── Parsing ────────────────────────────────────────────────────────────────────


def parse(text: str, kind: ParameterKind) -> ParseResult:
    """Parse *text* as a value of *kind*; return the value or a FormatError."""
    parser = _PARSERS.get(kind)
    if parser is None:
        raise KeyError(f"Unknown parameter kind: {kind!r}")
    stripped = text.strip()
    if not stripped:
        return _malformed(kind, text, "value is empty")
    return parser(stripped)


def _malformed(kind: ParameterKind, text: str, detail: str) -> FormatError:
    return FormatError(FormatErrorKind.MALFORMED, kind, text, detail)


def _out_of_range(kind: ParameterKind, text: str, detail: str) -> FormatError:
    return FormatError(FormatErrorKind.OUT_OF_RANGE, kind, text, detail)


def _parse_shutter(text: str) -> ParseResult:
    kind = ParameterKind.SHUTTER_SPEED
    fraction = _FRACTION_RE.fullmatch(text)
    single = _SECONDS_MARK_RE.fullmatch(text) or _DECIMAL_RE.fullmatch(text)
    if fraction is not None:
        numerator, denominator = float(fraction.group(1)), float(fraction.group(2))
        if denominator == 0:
            return _out_of_range(kind, text, "denominator must be positive")
        seconds = numerator / denominator
    elif single is not None:
        seconds = float(single.group(1))
    else:
        return _malformed(kind, text, 'expected 1/N, S" or decimal seconds')
    if not (seconds > 0 and math.isfinite(seconds)):
        return _out_of_range(kind, text, "duration must be positive")
    return ShutterSpeed(seconds=seconds)


def _parse_aperture(text: str) -> ParseResult:
    kind = ParameterKind.APERTURE
    m = _APERTURE_RE.fullmatch(text)
    if m is None:
        return _malformed(kind, text, "expected f/N or a decimal f-number")
    f_number = float(m.group(1))
    if not (f_number > 0 and math.isfinite(f_number)):
        return _out_of_range(kind, text, "f-number must be positive")
    return Aperture(f_number=f_number)


def _parse_iso(text: str) -> ParseResult:
    kind = ParameterKind.ISO
    if not _ISO_RE.fullmatch(text):
        return _malformed(kind, text, "expected a whole number such as 100 or 1600")
    sensitivity = int(text)
    if not ISO_MIN <= sensitivity <= ISO_MAX:
        return _out_of_range(kind, text, f"ISO must be between {ISO_MIN} and {ISO_MAX}")
    return Iso(sensitivity=sensitivity)


_PARSERS: dict[ParameterKind, Callable[[str], ParseResult]] = {
    ParameterKind.SHUTTER_SPEED: _parse_shutter,
    ParameterKind.APERTURE: _parse_aperture,
    ParameterKind.ISO: _parse_iso,
}

# ── Formatting ─────────────────────────────────────────────────────────────────


def format_value(value: ExposureValue) -> str:
    """Canonical text for *value*: 1/N or S" for shutter, f/N, integer ISO."""
    if isinstance(value, ShutterSpeed):
        return _format_shutter(value.seconds)
    if isinstance(value, Aperture):
        return f"f/{_plain(value.f_number)}"
    if isinstance(value, Iso):
        return str(value.sensitivity)
    raise TypeError(f"not an exposure value: {value!r}")


def _format_shutter(seconds: float) -> str:
    if seconds < SECONDS_MARK_THRESHOLD and math.isfinite(1.0 / seconds):
        whole = round(1.0 / seconds)
        if 1.0 / whole == seconds:
            return f"1/{whole}"
        denominator = _plain(1.0 / seconds)
        if 1.0 / float(denominator) == seconds:
            return f"1/{denominator}"
    return f'{_plain(seconds)}"'


def _plain(x: float) -> str:
    """Shortest round-tripping positional notation, without a trailing .0."""
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def describe(kind: ParameterKind, native: float) -> str:
    """Approximate display text for a raw (unrounded) native-unit value."""
    if kind == ParameterKind.SHUTTER_SPEED:
        if native >= SECONDS_MARK_THRESHOLD:
            return f'{_plain(round(native, 1))}"'
        if not math.isfinite(1.0 / native):
            return f'{_plain(native)}"'
        return f"1/{round(1.0 / native)}"
    if kind == ParameterKind.APERTURE:
        return f"f/{_plain(round(native, 1))}"
    return str(round(native))
