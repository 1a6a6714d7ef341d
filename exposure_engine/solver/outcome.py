"""
Solve outcomes: a resolved value or a structured exposure error.

Expected domain failures are values, not exceptions. Every error carries
enough structured data for a caller to render its own message, and a
``message`` property with the standard wording.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from exposure_engine.values.notation import FormatError, format_value
from exposure_engine.values.types import ExposureValue


@dataclass(frozen=True)
class Resolved:
    """A successfully solved, table-snapped value.

    Attributes:
        value: The marked value nearest to the equivalent exposure.
        stops_applied: Unrounded shift from the base value, in the solved
            parameter's own stop-space (includes EV compensation).
    """

    value: ExposureValue
    stops_applied: float

    @property
    def text(self) -> str:
        return format_value(self.value)


@dataclass(frozen=True)
class OverexposedError:
    """The equivalent exposure needs more light than the parameter can give."""

    stops_overexposed: float

    @property
    def message(self) -> str:
        return f"Image will be overexposed by approximately {self.stops_overexposed:.1f} stops"


@dataclass(frozen=True)
class UnderexposedError:
    """The equivalent exposure needs less light than the parameter can give."""

    stops_underexposed: float

    @property
    def message(self) -> str:
        return f"Image will be underexposed by approximately {self.stops_underexposed:.1f} stops"


@dataclass(frozen=True)
class ExposureParameterLimitError:
    """A specific value lies outside the stop table's range.

    Attributes:
        parameter_name: Display name of the parameter ("shutter speed", ...).
        requested_value: The value asked for, as text.
        available_limit: The closest table entry, as text.
        excess_stops: How far beyond the table edge the request lies.
        brighter: True if the excess is in the direction that adds light.
    """

    parameter_name: str
    requested_value: str
    available_limit: str
    excess_stops: float = 0.0
    brighter: bool = True

    @property
    def message(self) -> str:
        return (
            f"The requested {self.parameter_name} ({self.requested_value}) exceeds available "
            f"limits. The closest available value is {self.available_limit}."
        )


ExposureError = Union[OverexposedError, UnderexposedError, ExposureParameterLimitError]

SolveOutcome = Union[Resolved, ExposureError, FormatError]

ERROR_TYPES = (OverexposedError, UnderexposedError, ExposureParameterLimitError, FormatError)


def is_error(outcome: SolveOutcome) -> bool:
    """True for every outcome except Resolved."""
    return isinstance(outcome, ERROR_TYPES)
