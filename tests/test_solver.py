"""Tests for the moment arm and the full pose solver."""

import math

import pytest

from lib_freebody.data import PoseParameters
from lib_freebody.moment import compute_moment
from lib_freebody.solver import solve_pose
from lib_freebody.units import Quantity, UnitMismatchError, Vector2


def _force(x: float, y: float) -> Vector2:
    return Vector2(Quantity.of(x, "N"), Quantity.of(y, "N"))


class TestComputeMoment:
    """Tests for compute_moment."""

    def test_vertical_force_arm_is_horizontal_lever(self):
        result = compute_moment((0.0, 0.0), (100.0, 40.0), _force(0.0, -10.0))
        assert result.moment_arm.x.to_number("mm") == pytest.approx(100.0)
        assert result.moment_arm.y.to_number("mm") == pytest.approx(0.0)
        assert result.moment_arm_length.to_number("mm") == pytest.approx(100.0)
        assert result.moment.to_number("N*m") == pytest.approx(1.0)

    def test_lever_along_force_has_no_moment(self):
        result = compute_moment((0.0, 0.0), (30.0, 40.0), _force(3.0, 4.0))
        assert result.moment_arm_length.to_number("mm") == pytest.approx(0.0, abs=1e-9)
        assert result.moment.to_number("N*m") == pytest.approx(0.0, abs=1e-12)

    def test_arm_is_perpendicular_to_force(self):
        force = _force(2.0, -5.0)
        result = compute_moment((10.0, 20.0), (70.0, 95.0), force)
        arm = result.moment_arm.to_array("mm")
        assert arm[0] * 2.0 + arm[1] * -5.0 == pytest.approx(0.0, abs=1e-9)

    def test_moment_equals_lever_cross_force(self):
        """Only the perpendicular component contributes torque."""
        result = compute_moment((10.0, 20.0), (70.0, 95.0), _force(2.0, -5.0))
        lever_x, lever_y = 60.0 / 1000, 75.0 / 1000
        expected = abs(lever_x * -5.0 - lever_y * 2.0)
        assert result.moment.to_number("N*m") == pytest.approx(expected)

    def test_subnormal_force_keeps_direction(self):
        result = compute_moment((0.0, 0.0), (100.0, 40.0), _force(0.0, -1e-310))
        assert result.moment_arm_length.to_number("mm") == pytest.approx(100.0)

    def test_zero_force_gives_zero_moment(self):
        result = compute_moment((0.0, 0.0), (100.0, 100.0), _force(0.0, 0.0))
        assert result.moment_arm.x.value == 0.0
        assert result.moment_arm.y.value == 0.0
        assert result.moment_arm_length.value == 0.0
        assert result.moment.value == 0.0
        assert result.moment.unit.name == "N*m"


class TestSolvePose:
    """Tests for solve_pose."""

    def test_reference_scenario(self, default_solution):
        offset = 100 * math.cos(math.pi / 4)
        assert default_solution.zero == (500, 500)
        assert default_solution.shoulder.position == pytest.approx((500 + offset, 500 + offset))
        assert default_solution.elbow.position == pytest.approx((600 + offset, 500 + offset))
        assert default_solution.wrist.position == pytest.approx((600 + offset, 600 + offset))

        weight = default_solution.physical.weight.to_number("N")
        assert default_solution.grf.x.to_number("N") == 0.0
        assert default_solution.grf.y.to_number("N") == pytest.approx(weight / -4)

    def test_reference_moment(self, default_solution):
        """The 100 mm horizontal lever carries a quarter of the body weight."""
        weight = default_solution.physical.weight.to_number("N")
        assert default_solution.moment_arm.to_number("mm") == pytest.approx(100.0)
        assert default_solution.moment.to_number("N*m") == pytest.approx(0.1 * weight / 4)

    @pytest.mark.parametrize("adduction, retraction", [(0, 0), (30, 20), (-40, 75)])
    def test_vertical_force_moment_is_lever_x_times_grf(
        self, default_params, deg, adduction, retraction
    ):
        params = default_params.with_changes(
            shoulder_offset_theta=deg(0),
            grf_theta=deg(0),
            adduction_theta=deg(adduction),
            retraction_theta=deg(retraction),
        )
        solution = solve_pose(params)
        lever_x_mm = solution.wrist.x - solution.shoulder.x
        grf_y = solution.grf.y.to_number("N")

        assert solution.physical.moment_arm.x.to_number("mm") == pytest.approx(lever_x_mm)
        assert solution.physical.moment_arm.y.to_number("mm") == pytest.approx(0.0, abs=1e-9)
        assert solution.moment.to_number("N*m") == pytest.approx(
            abs(lever_x_mm / 1000 * grf_y)
        )

    def test_zero_mass_degenerates_cleanly(self, default_params, metres):
        solution = solve_pose(default_params.with_changes(r_x=metres(0)))
        assert solution.mass.to_number("kg") == 0.0
        assert solution.moment_arm.value == 0.0
        assert solution.moment.value == 0.0
        assert not math.isnan(solution.moment.value)

    def test_zero_density_degenerates_cleanly(self, default_params):
        params = default_params.with_changes(tissue_density=Quantity.of(0, "kg/m^3"))
        solution = solve_pose(params)
        assert solution.moment.value == 0.0

    @pytest.mark.parametrize(
        "changes",
        [
            {"r_x": Quantity.of(0.1, "mm"), "r_y": Quantity.of(0.1, "mm")},
            {"tissue_density": Quantity.of(1e-6, "kg/m^3")},
        ],
    )
    def test_tiny_force_keeps_moment_arm(self, default_params, changes):
        """A very small but nonzero GRF still has a line of action."""
        solution = solve_pose(default_params.with_changes(**changes))
        grf_y = solution.grf.y.to_number("N")
        lever_x_mm = solution.wrist.x - solution.shoulder.x

        assert 0 < abs(grf_y) < 1e-7
        assert solution.moment_arm.to_number("mm") == pytest.approx(lever_x_mm)
        assert solution.moment.to_number("N*m") == pytest.approx(abs(lever_x_mm / 1000 * grf_y))

    def test_idempotent(self, default_params, deg):
        params = default_params.with_changes(
            adduction_theta=deg(17), retraction_theta=deg(-33), grf_theta=deg(12)
        )
        assert solve_pose(params) == solve_pose(params)

    def test_any_real_angle_accepted(self, default_params, deg):
        params = default_params.with_changes(
            adduction_theta=deg(90), retraction_theta=deg(-540), grf_theta=deg(1000)
        )
        solution = solve_pose(params)
        assert math.isfinite(solution.moment.value)

    def test_wrong_parameter_unit_fails(self, default_params, deg):
        with pytest.raises(UnitMismatchError):
            default_params.with_changes(r_x=deg(10))
        with pytest.raises(UnitMismatchError):
            default_params.with_changes(grf_theta=Quantity.of(0.1, "m"))

    def test_parameters_are_immutable(self, default_params):
        with pytest.raises(AttributeError):
            default_params.zoom = 10
        assert isinstance(default_params, PoseParameters)
