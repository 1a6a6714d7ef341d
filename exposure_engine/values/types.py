"""
Core type definitions for exposure values.

Enums are the canonical vocabulary; the value classes are frozen dataclasses
with fail-fast validation in __post_init__. ExposureValue is the tagged union
of the three parameter kinds and is the only type passed between the
parsers, the stop tables and the solver.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

# Accepted ISO sensitivity range, inclusive.
ISO_MIN: int = 25
ISO_MAX: int = 102400

# ── Enums ──────────────────────────────────────────────────────────────────────


class ParameterKind(str, Enum):
    """The three sides of the exposure triangle."""

    SHUTTER_SPEED = "shutter_speed"
    APERTURE = "aperture"
    ISO = "iso"

    @property
    def display_name(self) -> str:
        """Human-readable name used in user-facing messages."""
        return _DISPLAY_NAMES[self]


class IncrementStep(str, Enum):
    """Granularity of the marked values a camera offers."""

    FULL = "full"
    HALF = "half"
    THIRD = "third"

    @property
    def steps_per_stop(self) -> int:
        return _STEPS_PER_STOP[self]

    @property
    def spacing(self) -> float:
        """Distance in stops between adjacent marked values."""
        return 1.0 / self.steps_per_stop


_DISPLAY_NAMES = {
    ParameterKind.SHUTTER_SPEED: "shutter speed",
    ParameterKind.APERTURE: "aperture",
    ParameterKind.ISO: "ISO",
}

_STEPS_PER_STOP = {
    IncrementStep.FULL: 1,
    IncrementStep.HALF: 2,
    IncrementStep.THIRD: 3,
}

# ── Values ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ShutterSpeed:
    """Exposure duration in seconds."""

    seconds: float

    def __post_init__(self) -> None:
        if not (self.seconds > 0 and math.isfinite(self.seconds)):
            raise ValueError(f"seconds must be positive and finite, got {self.seconds}")

    @property
    def kind(self) -> ParameterKind:
        return ParameterKind.SHUTTER_SPEED


@dataclass(frozen=True)
class Aperture:
    """Lens opening expressed as an f-number."""

    f_number: float

    def __post_init__(self) -> None:
        if not (self.f_number > 0 and math.isfinite(self.f_number)):
            raise ValueError(f"f_number must be positive and finite, got {self.f_number}")

    @property
    def kind(self) -> ParameterKind:
        return ParameterKind.APERTURE


@dataclass(frozen=True)
class Iso:
    """Sensor sensitivity."""

    sensitivity: int

    def __post_init__(self) -> None:
        if isinstance(self.sensitivity, bool) or not isinstance(self.sensitivity, int):
            raise ValueError(f"sensitivity must be an integer, got {self.sensitivity!r}")
        if self.sensitivity <= 0:
            raise ValueError(f"sensitivity must be positive, got {self.sensitivity}")

    @property
    def kind(self) -> ParameterKind:
        return ParameterKind.ISO


ExposureValue = Union[ShutterSpeed, Aperture, Iso]


def native_value(value: ExposureValue) -> float:
    """The value's payload in its native unit (seconds, f-number or ISO)."""
    if isinstance(value, ShutterSpeed):
        return value.seconds
    if isinstance(value, Aperture):
        return value.f_number
    if isinstance(value, Iso):
        return float(value.sensitivity)
    raise TypeError(f"not an exposure value: {value!r}")


@dataclass(frozen=True)
class ExposureTriple:
    """A complete exposure: one value for each parameter kind."""

    shutter: ShutterSpeed
    aperture: Aperture
    iso: Iso

    def __post_init__(self) -> None:
        for name, expected in (("shutter", ShutterSpeed), ("aperture", Aperture), ("iso", Iso)):
            if not isinstance(getattr(self, name), expected):
                raise ValueError(
                    f"{name} must be a {expected.__name__}, got {getattr(self, name)!r}"
                )

    def get(self, kind: ParameterKind) -> ExposureValue:
        """Return the value held for *kind*."""
        return getattr(self, _TRIPLE_FIELDS[kind])

    def with_value(self, value: ExposureValue) -> ExposureTriple:
        """Return a copy with the slot matching *value*'s kind replaced."""
        return replace(self, **{_TRIPLE_FIELDS[value.kind]: value})

    def values(self) -> tuple[ShutterSpeed, Aperture, Iso]:
        return (self.shutter, self.aperture, self.iso)


_TRIPLE_FIELDS = {
    ParameterKind.SHUTTER_SPEED: "shutter",
    ParameterKind.APERTURE: "aperture",
    ParameterKind.ISO: "iso",
}
