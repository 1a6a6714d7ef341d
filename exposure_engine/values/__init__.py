"""
Exposure values: the tagged union of shutter speed, aperture and ISO, their
textual notations, and their positions in stop-space.
"""

from .notation import FormatError, FormatErrorKind, describe, format_value, parse
from .stops import (
    EXPOSURE_SIGN,
    exposure_stops,
    is_brighter,
    native_to_stops,
    stops_to_native,
    to_stops,
    total_exposure_stops,
)
from .types import (
    ISO_MAX,
    ISO_MIN,
    Aperture,
    ExposureTriple,
    ExposureValue,
    IncrementStep,
    Iso,
    ParameterKind,
    ShutterSpeed,
    native_value,
)

__all__ = [
    # types
    "ParameterKind",
    "IncrementStep",
    "ShutterSpeed",
    "Aperture",
    "Iso",
    "ExposureValue",
    "ExposureTriple",
    "ISO_MIN",
    "ISO_MAX",
    "native_value",
    # notation
    "FormatError",
    "FormatErrorKind",
    "parse",
    "format_value",
    "describe",
    # stop-space
    "EXPOSURE_SIGN",
    "native_to_stops",
    "stops_to_native",
    "to_stops",
    "exposure_stops",
    "total_exposure_stops",
    "is_brighter",
]
