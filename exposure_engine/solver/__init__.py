"""Equivalence solver, rounding policy, and outcome classification."""

from .engine import ExposureEngine, get_engine, solve
from .equivalence import RawSolution, exposure_delta, raw_solution, required_shift
from .outcome import (
    ExposureError,
    ExposureParameterLimitError,
    OverexposedError,
    Resolved,
    SolveOutcome,
    UnderexposedError,
    is_error,
)
from .request import EV_COMPENSATION_MAX, EV_COMPENSATION_MIN, SolveRequest
from .rounding import Placement, place, round_and_clamp

__all__ = [
    # request
    "SolveRequest",
    "EV_COMPENSATION_MIN",
    "EV_COMPENSATION_MAX",
    # outcomes
    "Resolved",
    "OverexposedError",
    "UnderexposedError",
    "ExposureParameterLimitError",
    "ExposureError",
    "SolveOutcome",
    "is_error",
    # equivalence
    "RawSolution",
    "exposure_delta",
    "required_shift",
    "raw_solution",
    # rounding
    "Placement",
    "place",
    "round_and_clamp",
    # engine
    "ExposureEngine",
    "get_engine",
    "solve",
]
