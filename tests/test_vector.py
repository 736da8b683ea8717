"""Tests for PlanarVector."""

from __future__ import annotations

import pytest

from killough.vector import PlanarVector


class TestFromAngle:
    """Unit vectors built from mounting angles."""

    def test_zero_points_forward(self) -> None:
        v = PlanarVector.from_angle(0.0)
        assert v.x == pytest.approx(1.0)
        assert v.y == pytest.approx(0.0)

    def test_ninety_points_right(self) -> None:
        v = PlanarVector.from_angle(90.0)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(1.0)

    @pytest.mark.parametrize("angle", [60.0, 120.0, 270.0, -33.0, 725.0])
    def test_unit_length(self, angle: float) -> None:
        assert PlanarVector.from_angle(angle).magnitude() == pytest.approx(1.0)


class TestRotate:
    """Clockwise-positive rotation."""

    def test_quarter_turn_clockwise(self) -> None:
        v = PlanarVector(1.0, 0.0).rotate(90.0)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(1.0)

    def test_negative_angle_turns_back(self) -> None:
        v = PlanarVector(0.0, 1.0).rotate(-90.0)
        assert v.x == pytest.approx(1.0)
        assert v.y == pytest.approx(0.0, abs=1e-12)

    def test_returns_new_vector(self) -> None:
        v = PlanarVector(3.0, 4.0)
        v.rotate(45.0)
        assert v == PlanarVector(3.0, 4.0)

    def test_preserves_length(self) -> None:
        assert PlanarVector(3.0, 4.0).rotate(37.0).magnitude() == pytest.approx(5.0)


class TestProjection:
    """Dot product and scalar projection."""

    def test_project_onto_axis(self) -> None:
        assert PlanarVector(3.0, 4.0).scalar_project(PlanarVector(1.0, 0.0)) == pytest.approx(3.0)

    def test_project_onto_perpendicular_is_zero(self) -> None:
        assert PlanarVector(0.0, 2.0).scalar_project(PlanarVector(1.0, 0.0)) == 0.0

    def test_dot_matches_array(self) -> None:
        a, b = PlanarVector(1.5, -2.0), PlanarVector(0.5, 4.0)
        assert a.dot(b) == pytest.approx(float(a.as_array() @ b.as_array()))
