"""Shared pytest fixtures for free-body tests."""

import pytest

from lib_freebody.config import DEFAULT_PARAMETERS
from lib_freebody.data import PoseParameters, PoseSolution
from lib_freebody.solver import solve_pose
from lib_freebody.units import Quantity


@pytest.fixture
def default_params() -> PoseParameters:
    """The reference pose: 0.1 m radii and limb, 45 deg shoulder offset."""
    return DEFAULT_PARAMETERS


@pytest.fixture
def default_solution(default_params) -> PoseSolution:
    return solve_pose(default_params)


@pytest.fixture
def deg():
    """Build an angle quantity from degrees."""
    return lambda value: Quantity.of(value, "deg")


@pytest.fixture
def metres():
    return lambda value: Quantity.of(value, "m")
