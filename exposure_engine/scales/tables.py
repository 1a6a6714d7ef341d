"""
Stop table generation and caching.

generate() builds the geometric progression for a (kind, increment) pair
from the registry's scale definition and attaches the conventional mark to
each position. Tables are values: generating the same key twice yields equal
tables, so StopTableCache needs no locking. Two threads racing on a cold key
both generate, and the last write wins.
"""

from __future__ import annotations

import logging

from exposure_engine.values.notation import parse
from exposure_engine.values.stops import native_to_stops
from exposure_engine.values.types import IncrementStep, ParameterKind

from .registry import ScaleRegistry, get_registry
from .types import StopEntry, StopTable

logger = logging.getLogger(__name__)


def generate(
    kind: ParameterKind,
    increment: IncrementStep,
    registry: ScaleRegistry | None = None,
) -> StopTable:
    """
    Generate the stop table for *kind* at *increment*.

    Entry ``i`` sits at ``anchor + i * increment.spacing`` stops, where the
    anchor is the stop position of the scale's reference value shifted by
    ``min_offset`` whole stops.
    """
    scale = (registry or get_registry()).get_scale(kind)
    marks = scale.marks[increment]
    anchor = native_to_stops(kind, scale.reference) + scale.min_offset
    entries = []
    for index, mark in enumerate(marks):
        # Marks are validated as parseable when the registry loads.
        value = parse(mark, kind)
        entries.append(
            StopEntry(stops=anchor + index * increment.spacing, value=value, label=mark)
        )
    logger.debug(
        "Generated %s stop table for %s: %d entries", increment.value, kind.value, len(entries)
    )
    return StopTable(kind=kind, increment=increment, entries=tuple(entries))


class StopTableCache:
    """
    Lazily populated map from (kind, increment) to StopTable.

    Owned by an ExposureEngine; safe for concurrent reads. Duplicate
    generation on a cold key is wasteful but harmless.
    """

    def __init__(self, registry: ScaleRegistry | None = None) -> None:
        self.registry = registry or get_registry()
        self._tables: dict[tuple[ParameterKind, IncrementStep], StopTable] = {}

    @property
    def clamp_tolerance_stops(self) -> float:
        return self.registry.clamp_tolerance_stops

    def get(self, kind: ParameterKind, increment: IncrementStep) -> StopTable:
        """Return the cached table for the key, generating it on first use."""
        key = (kind, increment)
        table = self._tables.get(key)
        if table is None:
            table = generate(kind, increment, self.registry)
            self._tables[key] = table
        return table

    def __contains__(self, key: object) -> bool:
        return key in self._tables
