"""
Request-shape validation for the text-level calculation API.

validate_request() checks that a calculation request is complete before any
parsing happens: base values present, a known parameter to calculate, a
known increment, EV compensation in range, and the two target values that
the chosen calculation needs. It returns every problem found as a list of
messages (empty when the request is well-formed) and never raises.

Value formats are not checked here; the parsers report those as
FormatError outcomes.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from exposure_engine.solver.request import EV_COMPENSATION_MAX, EV_COMPENSATION_MIN
from exposure_engine.values.types import IncrementStep, ParameterKind


def coerce_kind(value: Union[ParameterKind, str]) -> Optional[ParameterKind]:
    """
    Resolve a ParameterKind from an enum member or its text.

    Accepts the enum value, name, or display name in any case, with spaces
    or hyphens in place of underscores ("shutter speed", "ISO"). Returns None
    if nothing matches.
    """
    if isinstance(value, ParameterKind):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().lower().replace(" ", "_").replace("-", "_")
    for kind in ParameterKind:
        if key in (kind.value, kind.display_name.lower().replace(" ", "_")):
            return kind
    return None


def coerce_increment(value: Union[IncrementStep, str, int]) -> Optional[IncrementStep]:
    """
    Resolve an IncrementStep from an enum member, its text, or steps per stop.

    ``"third"``, ``"THIRD"`` and ``3`` all resolve to IncrementStep.THIRD.
    Returns None for anything else.
    """
    if isinstance(value, IncrementStep):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        for step in IncrementStep:
            if step.steps_per_stop == value:
                return step
        return None
    if isinstance(value, str):
        try:
            return IncrementStep(value.strip().lower())
        except ValueError:
            return None
    return None


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not str(text).strip()


def validate_request(
    base_shutter: Optional[str],
    base_aperture: Optional[str],
    base_iso: Optional[str],
    to_calculate: Union[ParameterKind, str],
    target_shutter: Optional[str] = None,
    target_aperture: Optional[str] = None,
    target_iso: Optional[str] = None,
    increment: Union[IncrementStep, str, int] = IncrementStep.FULL,
    ev_compensation: float = 0.0,
) -> list[str]:
    """Return every shape problem with a calculation request."""
    errors: list[str] = []

    if _is_blank(base_shutter):
        errors.append("Base shutter speed is required")
    if _is_blank(base_aperture):
        errors.append("Base aperture is required")
    if _is_blank(base_iso):
        errors.append("Base ISO is required")

    if coerce_increment(increment) is None:
        errors.append(f"Unsupported increment type: {increment!r}")

    if not _ev_in_range(ev_compensation):
        errors.append(
            f"EV compensation must be between {EV_COMPENSATION_MIN:g} and "
            f"+{EV_COMPENSATION_MAX:g} stops"
        )

    kind = coerce_kind(to_calculate)
    if kind is None:
        errors.append(f"Invalid calculation type: {to_calculate!r}")
        return errors

    targets = {
        ParameterKind.SHUTTER_SPEED: target_shutter,
        ParameterKind.APERTURE: target_aperture,
        ParameterKind.ISO: target_iso,
    }
    for fixed in ParameterKind:
        if fixed != kind and _is_blank(targets[fixed]):
            errors.append(f"Target {fixed.display_name} is required")
    return errors


def _ev_in_range(ev_compensation: object) -> bool:
    if isinstance(ev_compensation, bool) or not isinstance(ev_compensation, (int, float)):
        return False
    return (
        math.isfinite(ev_compensation)
        and EV_COMPENSATION_MIN <= ev_compensation <= EV_COMPENSATION_MAX
    )
