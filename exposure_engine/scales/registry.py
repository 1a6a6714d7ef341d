"""
Scale registry: loads the stop-scale definitions from YAML at startup,
validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The definitions are loaded and validated once at import time. Nothing writes
to the registry after startup.

──────────────────────────────────────────────────────────────────────────────
Mark contract
──────────────────────────────────────────────────────────────────────────────
For every (kind, increment) the ``marks`` list must:

  - have exactly one entry per generated stop position,
  - parse as a value of that kind,
  - be written in canonical form (format_value(parse(mark)) == mark),
  - lie within half a step of its generated position, so that the marks
    themselves are strictly increasing and nearest-value lookup on the
    generated positions never lands on the wrong mark.

Violations are collected and raised together as a single ValueError.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from exposure_engine.values.notation import FormatError, format_value, parse
from exposure_engine.values.stops import native_to_stops, to_stops
from exposure_engine.values.types import IncrementStep, ParameterKind

from .types import ScaleDefinition

_DATA_DIR = Path(__file__).parent / "data"
_SCALES_FILE = "scales.yaml"


def _problem(exc: Exception) -> str:
    """Short description of an error raised while reading a YAML entry."""
    if isinstance(exc, KeyError):
        return f"missing key {exc}"
    return str(exc)


class ScaleRegistry:
    """
    Read-only registry of stop-scale definitions.

    ``scales`` is wrapped in MappingProxyType after loading and is immutable
    for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_*
        self.scales: MappingProxyType[ParameterKind, ScaleDefinition]
        self.clamp_tolerance_stops: float
        self._load_errors: list[str]

        self._load_all()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Scale data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse scale data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        data = self._load_yaml(_SCALES_FILE)
        if not isinstance(data, dict):
            raise ValueError(f"Scale data file {self._data_dir / _SCALES_FILE} is empty")
        # Problems found while reading entries; reported by _validate().
        self._load_errors = []
        try:
            self.clamp_tolerance_stops = float(data["clamp_tolerance_stops"])
        except (KeyError, TypeError, ValueError) as exc:
            self._load_errors.append(f"clamp_tolerance_stops: {_problem(exc)}")
            self.clamp_tolerance_stops = 0.0
        entries = data.get("scales")
        if not isinstance(entries, list):
            self._load_errors.append("scales: expected a list of scale definitions")
            entries = []
        result: dict[ParameterKind, ScaleDefinition] = {}
        for index, entry in enumerate(entries):
            try:
                scale = self._parse_scale(entry)
            except (KeyError, TypeError, ValueError) as exc:
                self._load_errors.append(f"scales[{index}]: {_problem(exc)}")
                continue
            if scale.kind in result:
                self._load_errors.append(f"Duplicate scale definition for {scale.kind.value}")
                continue
            result[scale.kind] = scale
        self.scales = MappingProxyType(result)

    @staticmethod
    def _parse_scale(entry: Any) -> ScaleDefinition:
        if not isinstance(entry, dict):
            raise TypeError(f"expected a mapping, got {entry!r}")
        marks = entry["marks"]
        if not isinstance(marks, dict):
            raise TypeError(f"marks must map increments to lists, got {marks!r}")
        return ScaleDefinition(
            kind=ParameterKind(entry["kind"]),
            description=str(entry.get("description", "")).strip(),
            reference=float(entry["reference"]),
            min_offset=int(entry["min_offset"]),
            max_offset=int(entry["max_offset"]),
            marks=MappingProxyType(
                {
                    IncrementStep(step): tuple(str(m) for m in step_marks)
                    for step, step_marks in marks.items()
                }
            ),
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if any
        scale is missing, malformed, or has marks that break the mark contract.
        """
        errors: list[str] = list(self._load_errors)
        if self.clamp_tolerance_stops < 0:
            errors.append(
                f"clamp_tolerance_stops must be >= 0, got {self.clamp_tolerance_stops}"
            )
        for kind in ParameterKind:
            scale = self.scales.get(kind)
            if scale is None:
                errors.append(f"no scale defined for {kind.value}")
                continue
            self._check_scale(scale, errors)
        if errors:
            raise ValueError(
                "Scale registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_scale(self, scale: ScaleDefinition, errors: list[str]) -> None:
        prefix = f"scale {scale.kind.value}"
        if not (scale.reference > 0 and math.isfinite(scale.reference)):
            errors.append(
                f"{prefix}: reference must be positive and finite, got {scale.reference}"
            )
            return
        if scale.min_offset >= scale.max_offset:
            errors.append(
                f"{prefix}: min_offset ({scale.min_offset}) must be below "
                f"max_offset ({scale.max_offset})"
            )
            return
        for increment in IncrementStep:
            marks = scale.marks.get(increment)
            if marks is None:
                errors.append(f"{prefix}: no marks for increment {increment.value}")
                continue
            self._check_marks(scale, increment, marks, errors)

    def _check_marks(
        self,
        scale: ScaleDefinition,
        increment: IncrementStep,
        marks: tuple[str, ...],
        errors: list[str],
    ) -> None:
        prefix = f"scale {scale.kind.value} ({increment.value})"
        expected = scale.position_count(increment)
        if len(marks) != expected:
            errors.append(f"{prefix}: expected {expected} marks, got {len(marks)}")
            return
        anchor = native_to_stops(scale.kind, scale.reference) + scale.min_offset
        half_step = increment.spacing / 2
        for index, mark in enumerate(marks):
            value = parse(mark, scale.kind)
            if isinstance(value, FormatError):
                errors.append(f"{prefix}: mark {mark!r} does not parse: {value.message}")
                continue
            if format_value(value) != mark:
                errors.append(
                    f"{prefix}: mark {mark!r} is not canonical (expected {format_value(value)!r})"
                )
            position = anchor + index * increment.spacing
            if abs(to_stops(value) - position) >= half_step:
                errors.append(
                    f"{prefix}: mark {mark!r} is {to_stops(value) - position:+.3f} stops "
                    f"from its position; must be within ±{half_step:.3f}"
                )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_scale(self, kind: ParameterKind) -> ScaleDefinition:
        """Return the scale definition for *kind*.

        Raises KeyError if no scale is defined. Validation guarantees every
        ParameterKind has one after construction.
        """
        try:
            return self.scales[kind]
        except KeyError:
            raise KeyError(f"No scale defined for {kind!r}") from None

    def get_marks(self, kind: ParameterKind, increment: IncrementStep) -> tuple[str, ...]:
        """Return the marked values for *kind* at *increment*, in stop order."""
        return self.get_scale(kind).marks[increment]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The registry is read-only after construction, so
# sharing it across threads is safe.

_registry: ScaleRegistry = ScaleRegistry()


def get_registry() -> ScaleRegistry:
    """Return the module-level registry singleton."""
    return _registry
