"""PoseSolver: parameters in, fully resolved free-body diagram out."""

from __future__ import annotations

import logging

from .data import PhysicalModel, PoseParameters, PoseSolution
from .kinematics import solve_joints, viewport_origin
from .moment import compute_moment
from .physics import compute_body_loads

__all__ = ["solve_pose"]

logger = logging.getLogger(__name__)


def solve_pose(params: PoseParameters) -> PoseSolution:
    """Solve one static pose.

    Pure function: the same parameters always give an identical solution, so
    an interactive caller simply re-solves after every change.
    """

    loads = compute_body_loads(params)
    pose = solve_joints(params)
    torque = compute_moment(pose.shoulder.position, pose.wrist.position, loads.grf)

    physical = PhysicalModel(
        aspect_ratio=loads.aspect_ratio,
        x_section_area=loads.x_section_area,
        circle_equivalent_r=loads.circle_equivalent_r,
        volume=loads.volume,
        mass=loads.mass,
        weight=loads.weight,
        grf=loads.grf,
        moment_arm=torque.moment_arm,
        moment_arm_length=torque.moment_arm_length,
        moment=torque.moment,
    )
    logger.debug(
        f"Solved pose: shoulder={pose.shoulder.position}, wrist={pose.wrist.position}, "
        f"mass={physical.mass}, moment={physical.moment}"
    )
    return PoseSolution(
        parameters=params,
        zero=viewport_origin(params.zoom),
        pose=pose,
        physical=physical,
    )
