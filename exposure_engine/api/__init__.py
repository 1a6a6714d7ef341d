"""Text-level exposure calculation entry points."""

from exposure_engine.api.calculate import (
    ExposureReport,
    ExposureSettings,
    calculate_exposure,
    get_scale,
)
from exposure_engine.api.validate import coerce_increment, coerce_kind, validate_request

__all__ = [
    "ExposureReport",
    "ExposureSettings",
    "calculate_exposure",
    "get_scale",
    "coerce_increment",
    "coerce_kind",
    "validate_request",
]
