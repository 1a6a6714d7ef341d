"""
Type definitions for the stop-scale layer.

ScaleDefinition is loaded from YAML by the scale registry and frozen after
startup. StopEntry and StopTable are the generated, immutable tables that
the rounding policy searches.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from exposure_engine.values.stops import EXPOSURE_SIGN
from exposure_engine.values.types import ExposureValue, IncrementStep, ParameterKind


@dataclass(frozen=True)
class ScaleDefinition:
    """
    Generator parameters for one parameter kind.

    Positions run from ``min_offset`` to ``max_offset`` whole stops relative
    to the stop-space position of ``reference``. ``marks`` holds, per
    increment, the conventional marked text for each generated position.
    """

    kind: ParameterKind
    description: str
    reference: float
    min_offset: int
    max_offset: int
    marks: MappingProxyType[IncrementStep, tuple[str, ...]]

    def position_count(self, increment: IncrementStep) -> int:
        """Number of table entries generated at *increment*."""
        return (self.max_offset - self.min_offset) * increment.steps_per_stop + 1


@dataclass(frozen=True)
class StopEntry:
    """One marked value and its exact position in stop-space."""

    stops: float
    value: ExposureValue
    label: str


@dataclass(frozen=True)
class StopTable:
    """
    Ordered marked values for one (kind, increment) pair.

    Entries are strictly increasing in stop-space and evenly spaced by
    ``increment.spacing``. Tables are never mutated after generation.
    """

    kind: ParameterKind
    increment: IncrementStep
    entries: tuple[StopEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError(f"StopTable for {self.kind.value} has no entries")
        for previous, current in zip(self.entries, self.entries[1:]):
            if current.stops <= previous.stops:
                raise ValueError(
                    f"StopTable for {self.kind.value} is not strictly increasing at "
                    f"{previous.label} -> {current.label}"
                )

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def first(self) -> StopEntry:
        return self.entries[0]

    @property
    def last(self) -> StopEntry:
        return self.entries[-1]

    @property
    def brightest(self) -> StopEntry:
        """The edge entry that admits the most light."""
        return self.last if EXPOSURE_SIGN[self.kind] > 0 else self.first

    @property
    def darkest(self) -> StopEntry:
        """The edge entry that admits the least light."""
        return self.first if EXPOSURE_SIGN[self.kind] > 0 else self.last

    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self.entries)

    def nearest_index(self, stops: float) -> int:
        """
        Index of the entry nearest to *stops*, clamped to the table.

        A position exactly halfway between two entries resolves to the entry
        with the even index (round-half-to-even).
        """
        offset = (stops - self.first.stops) / self.increment.spacing
        return min(max(round(offset), 0), len(self.entries) - 1)

    def nearest(self, stops: float) -> StopEntry:
        return self.entries[self.nearest_index(stops)]
