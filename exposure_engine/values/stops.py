"""
Conversion between native units and stop-space.

Every parameter is mapped onto a base-2 logarithmic scale where one unit is
one stop of light:

    shutter  = log2(seconds)
    aperture = 2 * log2(f_number)    # light falls with the square of f
    iso      = log2(sensitivity)

EXPOSURE_SIGN gives the direction in which a rising stop value moves total
exposure: longer shutter and higher ISO brighten, a larger f-number darkens.
All functions are pure.
"""

from __future__ import annotations

import math
from types import MappingProxyType

from .types import ExposureTriple, ExposureValue, ParameterKind, native_value

EXPOSURE_SIGN: MappingProxyType[ParameterKind, int] = MappingProxyType(
    {
        ParameterKind.SHUTTER_SPEED: 1,
        ParameterKind.APERTURE: -1,
        ParameterKind.ISO: 1,
    }
)

# Stops per doubling of the native value.
_STOPS_PER_DOUBLING = {
    ParameterKind.SHUTTER_SPEED: 1.0,
    ParameterKind.APERTURE: 2.0,
    ParameterKind.ISO: 1.0,
}


def native_to_stops(kind: ParameterKind, native: float) -> float:
    """Stop-space position of a native-unit value of *kind*."""
    if not (native > 0 and math.isfinite(native)):
        raise ValueError(f"{kind.display_name} must be positive and finite, got {native}")
    return _STOPS_PER_DOUBLING[kind] * math.log2(native)


def stops_to_native(kind: ParameterKind, stops: float) -> float:
    """Native-unit value of *kind* at stop-space position *stops*.

    Positions beyond the float range saturate to inf (or underflow to 0.0).
    """
    try:
        return 2.0 ** (stops / _STOPS_PER_DOUBLING[kind])
    except OverflowError:
        return math.inf


def to_stops(value: ExposureValue) -> float:
    """Stop-space position of an ExposureValue."""
    return native_to_stops(value.kind, native_value(value))


def exposure_stops(value: ExposureValue) -> float:
    """Signed contribution of *value* to total exposure, in stops."""
    return EXPOSURE_SIGN[value.kind] * to_stops(value)


def total_exposure_stops(triple: ExposureTriple) -> float:
    """Total exposure of a triple: shutter - aperture + ISO, in stops."""
    return sum(exposure_stops(v) for v in triple.values())


def is_brighter(kind: ParameterKind, stop_shift: float) -> bool:
    """True if moving *kind* by *stop_shift* in its own stop-space adds light."""
    return EXPOSURE_SIGN[kind] * stop_shift > 0
