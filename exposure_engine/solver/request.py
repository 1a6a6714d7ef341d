"""
SolveRequest: the typed input of the equivalence solver.

A request is a programmer-facing value. Its shape is checked in
__post_init__ and violations raise ValueError; callers working from user
text should go through exposure_engine.api, which validates and parses
before building a request.
"""

from __future__ import annotations

from dataclasses import dataclass

from exposure_engine.values.types import (
    ExposureTriple,
    ExposureValue,
    IncrementStep,
    ParameterKind,
)

EV_COMPENSATION_MIN: float = -5.0
EV_COMPENSATION_MAX: float = 5.0


@dataclass(frozen=True)
class SolveRequest:
    """
    Solve for one exposure parameter given new values for the other two.

    Attributes:
        base: The known, correctly exposed triple.
        which_to_solve: The parameter kind to compute.
        target_other_two: New values for exactly the two other kinds, in any order.
        increment: Granularity of the marked value returned.
        ev_compensation: Stops to brighten (+) or darken (-) the result, in [-5, +5].
    """

    base: ExposureTriple
    which_to_solve: ParameterKind
    target_other_two: tuple[ExposureValue, ExposureValue]
    increment: IncrementStep = IncrementStep.FULL
    ev_compensation: float = 0.0

    def __post_init__(self) -> None:
        expected = set(ParameterKind) - {self.which_to_solve}
        supplied = [value.kind for value in self.target_other_two]
        if len(supplied) != 2 or set(supplied) != expected:
            raise ValueError(
                f"target_other_two must supply {sorted(k.value for k in expected)} "
                f"when solving for {self.which_to_solve.value}, "
                f"got {[k.value for k in supplied]}"
            )
        if not EV_COMPENSATION_MIN <= self.ev_compensation <= EV_COMPENSATION_MAX:
            raise ValueError(
                f"ev_compensation must be in [{EV_COMPENSATION_MIN}, {EV_COMPENSATION_MAX}], "
                f"got {self.ev_compensation}"
            )

    def target(self, kind: ParameterKind) -> ExposureValue:
        """Return the target value supplied for *kind*."""
        for value in self.target_other_two:
            if value.kind == kind:
                return value
        raise KeyError(f"No target supplied for {kind.value}; it is the parameter being solved")

    @property
    def fixed_kinds(self) -> tuple[ParameterKind, ...]:
        """The two kinds whose values the caller fixed, in ParameterKind order."""
        return tuple(k for k in ParameterKind if k != self.which_to_solve)
