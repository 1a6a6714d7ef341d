"""
Rounding and clamping of raw values onto a stop table.

place() finds the nearest entry to a stop position and measures how far the
position lies beyond the table's edges. A position beyond an edge by no
more than the registry's clamp tolerance snaps to the edge entry; beyond
that it is out of range and the caller decides how to report it.
"""

from __future__ import annotations

from typing import NamedTuple, Union

from exposure_engine.scales.tables import StopTableCache
from exposure_engine.scales.types import StopEntry, StopTable
from exposure_engine.values.notation import describe
from exposure_engine.values.stops import is_brighter, native_to_stops
from exposure_engine.values.types import ExposureValue, IncrementStep, ParameterKind

from .outcome import ExposureParameterLimitError

# Absorbs floating-point noise when comparing against the clamp tolerance.
_EPSILON: float = 1e-9


class Placement(NamedTuple):
    """
    Where a stop position falls relative to a table.

    ``overflow`` is signed: positive beyond the last entry, negative below
    the first, 0.0 inside the table.
    """

    entry: StopEntry
    overflow: float

    @property
    def excess(self) -> float:
        return abs(self.overflow)

    def exceeds(self, tolerance: float) -> bool:
        """True if the position lies beyond an edge by more than *tolerance*."""
        return self.excess > tolerance + _EPSILON


def place(table: StopTable, stops: float) -> Placement:
    """Nearest entry to *stops* and the signed distance beyond the table edges."""
    if stops > table.last.stops:
        overflow = stops - table.last.stops
    elif stops < table.first.stops:
        overflow = stops - table.first.stops
    else:
        overflow = 0.0
    return Placement(entry=table.nearest(stops), overflow=overflow)


def limit_error(
    kind: ParameterKind, requested: str, placement: Placement
) -> ExposureParameterLimitError:
    """Build the limit error for a placement that exceeds the tolerance."""
    return ExposureParameterLimitError(
        parameter_name=kind.display_name,
        requested_value=requested,
        available_limit=placement.entry.label,
        excess_stops=placement.excess,
        brighter=is_brighter(kind, placement.overflow),
    )


def round_and_clamp(
    raw_value: float,
    kind: ParameterKind,
    increment: IncrementStep,
    tables: StopTableCache | None = None,
) -> Union[ExposureValue, ExposureParameterLimitError]:
    """
    Snap a raw native-unit value onto the (kind, increment) stop table.

    Returns the nearest marked value, the edge value if the raw value lies
    beyond an edge by no more than the clamp tolerance, or an
    ExposureParameterLimitError naming the closest available value.
    """
    tables = tables or _default_tables
    table = tables.get(kind, increment)
    placement = place(table, native_to_stops(kind, raw_value))
    if placement.exceeds(tables.clamp_tolerance_stops):
        return limit_error(kind, describe(kind, raw_value), placement)
    return placement.entry.value


# Shared by module-level callers that do not own an ExposureEngine.
_default_tables: StopTableCache = StopTableCache()
