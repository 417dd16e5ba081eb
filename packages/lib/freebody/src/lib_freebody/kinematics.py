"""Joint positions in pixel space.

The viewport origin sits at its centre and one millimetre of anatomy maps to
one pixel. Only the upper segment follows adduction/retraction; the lower
segment always hangs straight down from the elbow.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .data import JointPoint, Pose, PoseParameters
from .units import cos, sin

__all__ = ["LimbChain", "viewport_origin", "solve_limb", "solve_joints"]


Point = Tuple[float, float]


class LimbChain(NamedTuple):
    shoulder: Point
    elbow: Point
    wrist: Point


def viewport_origin(zoom: float) -> Point:
    return zoom / 2, zoom / 2


def solve_limb(params: PoseParameters, mirrored: bool = False) -> LimbChain:
    """Place shoulder, elbow and wrist for one side of the torso.

    ``mirrored`` flips every horizontal offset about the torso axis, which is
    how the ghost limb is drawn. Vertical coordinates are identical for both
    sides.
    """

    sign = -1.0 if mirrored else 1.0
    zero_x, zero_y = viewport_origin(params.zoom)
    r_x_px = params.r_x.to_number("mm")
    r_y_px = params.r_y.to_number("mm")
    limb_px = params.limb_length.to_number("mm")

    shoulder_x = zero_x + sign * (r_x_px * cos(params.shoulder_offset_theta))
    shoulder_y = zero_y + r_y_px * sin(params.shoulder_offset_theta)

    reach = limb_px * cos(params.adduction_theta) * cos(params.retraction_theta)
    elbow_x = shoulder_x + sign * reach
    elbow_y = shoulder_y + limb_px * sin(params.adduction_theta)

    wrist_x = elbow_x
    wrist_y = elbow_y + limb_px

    return LimbChain(
        shoulder=(shoulder_x, shoulder_y),
        elbow=(elbow_x, elbow_y),
        wrist=(wrist_x, wrist_y),
    )


def solve_joints(params: PoseParameters) -> Pose:
    """Combine the live limb with its mirrored ghost."""

    live = solve_limb(params, mirrored=False)
    ghost = solve_limb(params, mirrored=True)

    def joint(live_point: Point, ghost_point: Point) -> JointPoint:
        return JointPoint(x=live_point[0], y=live_point[1], ghost_x=ghost_point[0])

    return Pose(
        shoulder=joint(live.shoulder, ghost.shoulder),
        elbow=joint(live.elbow, ghost.elbow),
        wrist=joint(live.wrist, ghost.wrist),
    )
