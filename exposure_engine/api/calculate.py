"""
Public exposure calculation API.

calculate_exposure() is the single text-level entry point: it takes the
base exposure and target values as the user typed them, validates the
request shape, parses every value, solves, and returns an ExposureReport
regardless of whether any stage succeeds, so callers can render the outcome
without catching anything.

get_scale() lists the marked values offered at an increment, for building
pickers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from exposure_engine.solver.engine import ExposureEngine, get_engine
from exposure_engine.solver.outcome import Resolved, SolveOutcome
from exposure_engine.solver.request import SolveRequest
from exposure_engine.values.notation import FormatError, format_value, parse
from exposure_engine.values.types import ExposureTriple, IncrementStep, ParameterKind

from .validate import coerce_increment, coerce_kind, validate_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExposureSettings:
    """A complete exposure as display text."""

    shutter_speed: str
    aperture: str
    iso: str


@dataclass(frozen=True)
class ExposureReport:
    """Outcome of a text-level exposure calculation.

    Attributes:
        passed: True only when validation, parsing and solving all succeeded.
        settings: The resulting exposure (targets plus the solved value), or
            None if the calculation did not succeed.
        outcome: The solver outcome or the FormatError that stopped parsing;
            None if request validation failed.
        validation_errors: Request-shape problems; empty unless validation failed.
    """

    passed: bool
    settings: Optional[ExposureSettings]
    outcome: Optional[SolveOutcome]
    validation_errors: tuple[str, ...] = ()

    @property
    def error_message(self) -> Optional[str]:
        """User-facing description of the failure, or None on success."""
        if self.validation_errors:
            return "; ".join(self.validation_errors)
        if self.outcome is None or isinstance(self.outcome, Resolved):
            return None
        return self.outcome.message

    @property
    def stops_applied(self) -> Optional[float]:
        if isinstance(self.outcome, Resolved):
            return self.outcome.stops_applied
        return None


def calculate_exposure(
    base_shutter: Optional[str],
    base_aperture: Optional[str],
    base_iso: Optional[str],
    to_calculate: Union[ParameterKind, str],
    target_shutter: Optional[str] = None,
    target_aperture: Optional[str] = None,
    target_iso: Optional[str] = None,
    increment: Union[IncrementStep, str, int] = IncrementStep.FULL,
    ev_compensation: float = 0.0,
    engine: Optional[ExposureEngine] = None,
) -> ExposureReport:
    """
    Calculate an equivalent exposure from user-entered text.

    Parameters
    ----------
    base_shutter, base_aperture, base_iso:
        The known, correctly exposed settings, e.g. ``"1/125"``, ``"f/8"``, ``"100"``.
    to_calculate:
        The parameter to solve for; a ParameterKind or its name
        (``"shutter speed"``, ``"aperture"``, ``"iso"``).
    target_shutter, target_aperture, target_iso:
        New values for the two parameters not being calculated. The one
        matching *to_calculate* is ignored.
    increment:
        Marked-value granularity: ``"full"``, ``"half"`` or ``"third"``.
    ev_compensation:
        Stops to brighten (+) or darken (-) the result, in [-5, +5].
    engine:
        Engine to solve with; defaults to the module-level engine.

    Returns
    -------
    ExposureReport
        Always returned; never raises for bad input. Inspect ``passed``,
        ``error_message`` and ``outcome`` for details.
    """
    errors = validate_request(
        base_shutter,
        base_aperture,
        base_iso,
        to_calculate,
        target_shutter,
        target_aperture,
        target_iso,
        increment,
        ev_compensation,
    )
    if errors:
        logger.debug("Rejected exposure calculation request: %s", errors)
        return ExposureReport(
            passed=False, settings=None, outcome=None, validation_errors=tuple(errors)
        )

    kind = coerce_kind(to_calculate)
    step = coerce_increment(increment)

    texts = {
        ParameterKind.SHUTTER_SPEED: (base_shutter, target_shutter),
        ParameterKind.APERTURE: (base_aperture, target_aperture),
        ParameterKind.ISO: (base_iso, target_iso),
    }
    base_values = {}
    target_values = []
    for parameter, (base_text, target_text) in texts.items():
        base_value = parse(str(base_text), parameter)
        if isinstance(base_value, FormatError):
            return _failed(kind, base_value)
        base_values[parameter] = base_value
        if parameter == kind:
            continue
        target_value = parse(str(target_text), parameter)
        if isinstance(target_value, FormatError):
            return _failed(kind, target_value)
        target_values.append(target_value)

    base = ExposureTriple(
        shutter=base_values[ParameterKind.SHUTTER_SPEED],
        aperture=base_values[ParameterKind.APERTURE],
        iso=base_values[ParameterKind.ISO],
    )
    request = SolveRequest(
        base=base,
        which_to_solve=kind,
        target_other_two=(target_values[0], target_values[1]),
        increment=step,
        ev_compensation=float(ev_compensation),
    )
    outcome = (engine or get_engine()).solve(request)
    if not isinstance(outcome, Resolved):
        return _failed(kind, outcome)

    result = base
    for value in (*target_values, outcome.value):
        result = result.with_value(value)
    settings = ExposureSettings(
        shutter_speed=format_value(result.shutter),
        aperture=format_value(result.aperture),
        iso=format_value(result.iso),
    )
    return ExposureReport(passed=True, settings=settings, outcome=outcome)


def get_scale(
    kind: ParameterKind,
    increment: IncrementStep,
    engine: Optional[ExposureEngine] = None,
) -> tuple[str, ...]:
    """Marked values for *kind* at *increment*, in stop order."""
    return (engine or get_engine()).table(kind, increment).labels()


def _failed(kind: ParameterKind, outcome: SolveOutcome) -> ExposureReport:
    logger.warning("Exposure error calculating %s: %s", kind.display_name, outcome.message)
    return ExposureReport(passed=False, settings=None, outcome=outcome)
