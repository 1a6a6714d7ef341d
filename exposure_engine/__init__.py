"""
Exposure equivalence engine.

Computes photographically equivalent combinations of shutter speed, aperture
and ISO: parse the photographic notations, solve in stop-space, snap the
result to the marked values of a full, half or third stop scale, and report
over/under-exposure and parameter-limit failures as values.
"""

from exposure_engine.api import ExposureReport, calculate_exposure, get_scale
from exposure_engine.solver import (
    ExposureEngine,
    ExposureParameterLimitError,
    OverexposedError,
    Resolved,
    SolveRequest,
    UnderexposedError,
    solve,
)
from exposure_engine.values import (
    Aperture,
    ExposureTriple,
    FormatError,
    IncrementStep,
    Iso,
    ParameterKind,
    ShutterSpeed,
    format_value,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "calculate_exposure",
    "get_scale",
    "ExposureReport",
    "ExposureEngine",
    "SolveRequest",
    "solve",
    "Resolved",
    "OverexposedError",
    "UnderexposedError",
    "ExposureParameterLimitError",
    "FormatError",
    "ParameterKind",
    "IncrementStep",
    "ShutterSpeed",
    "Aperture",
    "Iso",
    "ExposureTriple",
    "parse",
    "format_value",
]
