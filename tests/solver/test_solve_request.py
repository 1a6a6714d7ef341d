"""Tests for SolveRequest construction."""

import pytest

from exposure_engine.solver import SolveRequest
from exposure_engine.values.types import (
    Aperture,
    ExposureTriple,
    IncrementStep,
    Iso,
    ParameterKind,
    ShutterSpeed,
)


@pytest.fixture(scope="module")
def base():
    return ExposureTriple(ShutterSpeed(1 / 125), Aperture(8.0), Iso(100))


class TestSolveRequest:
    def test_defaults(self, base):
        request = SolveRequest(
            base=base,
            which_to_solve=ParameterKind.SHUTTER_SPEED,
            target_other_two=(Aperture(2.8), Iso(100)),
        )
        assert request.increment == IncrementStep.FULL
        assert request.ev_compensation == 0.0

    def test_targets_in_any_order(self, base):
        request = SolveRequest(
            base=base,
            which_to_solve=ParameterKind.APERTURE,
            target_other_two=(Iso(400), ShutterSpeed(1 / 500)),
        )
        assert request.target(ParameterKind.ISO) == Iso(400)
        assert request.target(ParameterKind.SHUTTER_SPEED) == ShutterSpeed(1 / 500)

    def test_fixed_kinds(self, base):
        request = SolveRequest(
            base=base,
            which_to_solve=ParameterKind.APERTURE,
            target_other_two=(Iso(400), ShutterSpeed(1 / 500)),
        )
        assert request.fixed_kinds == (ParameterKind.SHUTTER_SPEED, ParameterKind.ISO)

    def test_target_of_solved_kind_raises(self, base):
        request = SolveRequest(
            base=base,
            which_to_solve=ParameterKind.ISO,
            target_other_two=(ShutterSpeed(1 / 500), Aperture(8.0)),
        )
        with pytest.raises(KeyError, match="being solved"):
            request.target(ParameterKind.ISO)

    def test_rejects_target_of_solved_kind(self, base):
        with pytest.raises(ValueError, match="target_other_two"):
            SolveRequest(
                base=base,
                which_to_solve=ParameterKind.SHUTTER_SPEED,
                target_other_two=(ShutterSpeed(1 / 60), Iso(100)),
            )

    def test_rejects_duplicate_kinds(self, base):
        with pytest.raises(ValueError, match="target_other_two"):
            SolveRequest(
                base=base,
                which_to_solve=ParameterKind.SHUTTER_SPEED,
                target_other_two=(Iso(100), Iso(200)),
            )

    @pytest.mark.parametrize("ev", [-5.01, 5.5, 10.0])
    def test_rejects_ev_out_of_range(self, base, ev):
        with pytest.raises(ValueError, match="ev_compensation"):
            SolveRequest(
                base=base,
                which_to_solve=ParameterKind.SHUTTER_SPEED,
                target_other_two=(Aperture(2.8), Iso(100)),
                ev_compensation=ev,
            )

    @pytest.mark.parametrize("ev", [-5.0, 5.0])
    def test_accepts_ev_range_ends(self, base, ev):
        request = SolveRequest(
            base=base,
            which_to_solve=ParameterKind.SHUTTER_SPEED,
            target_other_two=(Aperture(2.8), Iso(100)),
            ev_compensation=ev,
        )
        assert request.ev_compensation == ev
