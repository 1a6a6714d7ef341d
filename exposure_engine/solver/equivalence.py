"""
Stop-space equivalence arithmetic.

Given a base exposure and new values for two of its parameters, the third
must move by the opposite of the exposure those two changes introduced so
that total exposure (shutter - aperture + ISO, in stops) stays constant.
EV compensation then shifts the result, positive meaning brighter.

Worked example: base 1/125 s, f/8, ISO 100; target f/2.8 at ISO 100.
Opening from f/8 to f/2.8 adds ~3.03 stops of light, so the shutter must
lose ~3.03 stops: 1/125 × 2^-3.03 ≈ 1/1020 s, which the rounding policy
snaps to 1/1000.

All functions are pure; nothing here consults a stop table.
"""

from __future__ import annotations

from dataclasses import dataclass

from exposure_engine.values.stops import EXPOSURE_SIGN, stops_to_native, to_stops
from exposure_engine.values.types import ParameterKind

from .request import SolveRequest


@dataclass(frozen=True)
class RawSolution:
    """Unrounded solution of a SolveRequest.

    Attributes:
        kind: The solved parameter kind.
        base_stops: Stop position of the base value of the solved kind.
        exposure_delta: Exposure change (stops) introduced by the two targets.
        stop_shift: Shift applied to the solved kind in its own stop-space.
        stops: Raw target stop position (``base_stops + stop_shift``).
        native: Raw target in native units (seconds, f-number or ISO); inf or
            0.0 when the position lies outside the float range.
    """

    kind: ParameterKind
    base_stops: float
    exposure_delta: float
    stop_shift: float
    stops: float
    native: float


def exposure_delta(request: SolveRequest) -> float:
    """
    Exposure change, in stops, introduced by the request's two target values.

    Positive means the targets admit more light than the base values they
    replace.
    """
    delta = 0.0
    for kind in request.fixed_kinds:
        change = to_stops(request.target(kind)) - to_stops(request.base.get(kind))
        delta += EXPOSURE_SIGN[kind] * change
    return delta


def required_shift(request: SolveRequest) -> float:
    """
    Shift of the solved parameter in its own stop-space.

    The exposure it must contribute is ``-delta + ev_compensation``; the
    exposure sign converts that into the parameter's own direction, so a
    brighter result lengthens the shutter, raises ISO, and lowers the
    f-number.
    """
    sign = EXPOSURE_SIGN[request.which_to_solve]
    return sign * (request.ev_compensation - exposure_delta(request))


def raw_solution(request: SolveRequest) -> RawSolution:
    """Solve *request* in continuous stop-space, before any rounding."""
    kind = request.which_to_solve
    base_stops = to_stops(request.base.get(kind))
    shift = required_shift(request)
    stops = base_stops + shift
    return RawSolution(
        kind=kind,
        base_stops=base_stops,
        exposure_delta=exposure_delta(request),
        stop_shift=shift,
        stops=stops,
        native=stops_to_native(kind, stops),
    )
