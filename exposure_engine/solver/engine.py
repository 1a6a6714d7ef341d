"""
ExposureEngine: solve a request and classify the result.

solve() runs in three stages and returns as soon as one fails:

1. Each caller-supplied target value must lie within the stop table's range
   (plus the clamp tolerance); otherwise ExposureParameterLimitError.
2. The raw equivalent value is computed in stop-space.
3. The raw value is placed on the stop table. Beyond the edge that admits
   the most light it is OverexposedError, beyond the other edge
   UnderexposedError, each carrying the excess in stops. Within tolerance
   of an edge it snaps to the edge.

It never raises for domain failures; programmer errors (a malformed
SolveRequest) are rejected when the request is built.
"""

from __future__ import annotations

import logging

from exposure_engine.scales.registry import ScaleRegistry
from exposure_engine.scales.tables import StopTableCache
from exposure_engine.scales.types import StopTable
from exposure_engine.values.notation import format_value
from exposure_engine.values.stops import is_brighter, to_stops
from exposure_engine.values.types import ExposureValue, IncrementStep, ParameterKind

from .equivalence import raw_solution
from .outcome import (
    ExposureParameterLimitError,
    OverexposedError,
    Resolved,
    SolveOutcome,
    UnderexposedError,
)
from .request import SolveRequest
from .rounding import limit_error, place, round_and_clamp

logger = logging.getLogger(__name__)


class ExposureEngine:
    """
    Stateless solver owning a stop table cache.

    One engine may be shared freely between threads; every call is pure
    apart from lazy table generation, which is idempotent.
    """

    def __init__(self, registry: ScaleRegistry | None = None) -> None:
        self.tables = StopTableCache(registry)

    def table(self, kind: ParameterKind, increment: IncrementStep) -> StopTable:
        """Return the stop table for *kind* at *increment*."""
        return self.tables.get(kind, increment)

    def round_and_clamp(
        self, raw_value: float, kind: ParameterKind, increment: IncrementStep
    ) -> ExposureValue | ExposureParameterLimitError:
        """Snap *raw_value* onto this engine's stop table for (kind, increment)."""
        return round_and_clamp(raw_value, kind, increment, self.tables)

    def check_limits(
        self, value: ExposureValue, increment: IncrementStep
    ) -> ExposureParameterLimitError | None:
        """Return a limit error if *value* lies outside its stop table's range."""
        placement = place(self.table(value.kind, increment), to_stops(value))
        if placement.exceeds(self.tables.clamp_tolerance_stops):
            return limit_error(value.kind, format_value(value), placement)
        return None

    def solve(self, request: SolveRequest) -> SolveOutcome:
        """Solve *request* and return Resolved or a structured exposure error."""
        for target in request.target_other_two:
            limit = self.check_limits(target, request.increment)
            if limit is not None:
                logger.debug("Target %s outside table range: %s", target.kind.value, limit.message)
                return limit

        raw = raw_solution(request)
        table = self.table(raw.kind, request.increment)
        placement = place(table, raw.stops)
        logger.debug(
            "Solved %s: shift %+.3f stops, raw %.6g, nearest %s",
            raw.kind.value,
            raw.stop_shift,
            raw.native,
            placement.entry.label,
        )

        if placement.exceeds(self.tables.clamp_tolerance_stops):
            if is_brighter(raw.kind, placement.overflow):
                return OverexposedError(stops_overexposed=placement.excess)
            return UnderexposedError(stops_underexposed=placement.excess)

        return Resolved(value=placement.entry.value, stops_applied=raw.stop_shift)


# Shared by solve() for callers that do not need their own engine.
_default_engine: ExposureEngine = ExposureEngine()


def get_engine() -> ExposureEngine:
    """Return the module-level engine singleton."""
    return _default_engine


def solve(request: SolveRequest) -> SolveOutcome:
    """Solve *request* with the module-level engine."""
    return _default_engine.solve(request)
