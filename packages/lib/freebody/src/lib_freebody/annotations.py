"""Label anchors and guide segments for drawing a solved pose.

A renderer only has to place text and lines at the coordinates below. The
force arrow is scaled so that one newton spans ten pixels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from .data import PoseSolution

__all__ = ["Label", "Segment", "MomentArc", "DiagramAnnotations", "annotate"]


Point = Tuple[float, float]

# force arrow length unit
_ARROW_UNIT = "dN"
_PRECISION = 2
# radius (px) of the moment arrow drawn around the shoulder
_MOMENT_ARC_RADIUS = 20.0


@dataclass(frozen=True)
class Label:
    """Text anchored at (x, y); anchor follows SVG text-anchor names."""

    x: float
    y: float
    text: str
    anchor: str = "start"


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class MomentArc:
    """Three-quarter circle around the shoulder, from theta1 to theta2 degrees.

    Angles are measured in screen coordinates (y down), so increasing angles
    turn clockwise on screen. The arrow head sits at theta2.
    """

    center: Point
    radius: float
    theta1: float = 0.0
    theta2: float = 270.0

    @property
    def end(self) -> Point:
        angle = math.radians(self.theta2)
        return (
            self.center[0] + self.radius * math.cos(angle),
            self.center[1] + self.radius * math.sin(angle),
        )


@dataclass(frozen=True)
class DiagramAnnotations:
    force_arrow: Segment
    moment_arm_guide: Segment
    moment_arc: MomentArc
    labels: Dict[str, Label]


def annotate(solution: PoseSolution) -> DiagramAnnotations:
    params = solution.parameters
    physical = solution.physical
    zero_x, zero_y = solution.zero
    shoulder, elbow, wrist = solution.shoulder, solution.elbow, solution.wrist
    r_x_px = params.r_x.to_number("mm")
    r_y_px = params.r_y.to_number("mm")
    limb_px = params.limb_length.to_number("mm")

    grf = physical.grf
    force_arrow = Segment(
        start=wrist.position,
        end=(
            wrist.x + grf.x.to_number(_ARROW_UNIT),
            wrist.y + grf.y.to_number(_ARROW_UNIT),
        ),
    )
    moment_arm_guide = Segment(start=shoulder.position, end=(elbow.x, shoulder.y))
    moment_arc = MomentArc(center=shoulder.position, radius=_MOMENT_ARC_RADIUS)

    labels = {
        "moment_arm": Label(
            (shoulder.x + wrist.x) / 2,
            shoulder.y * 0.98,
            physical.moment_arm_length.format(_PRECISION),
            "middle",
        ),
        "grf": Label(
            wrist.x * 1.02,
            wrist.y,
            grf.magnitude().format(_PRECISION),
        ),
        "moment": Label(
            shoulder.x - 25,
            shoulder.y + 25,
            physical.moment.format(_PRECISION),
            "end",
        ),
        "mass": Label(
            zero_x,
            zero_y + r_y_px / 2,
            physical.mass.format(_PRECISION),
            "middle",
        ),
        "r_x": Label(
            zero_x + r_x_px / 2,
            zero_y * 0.98,
            f"{params.r_x.value:g} {params.r_x.unit.name}",
            "middle",
        ),
        "r_y": Label(
            zero_x * 1.02,
            zero_y - r_y_px / 2,
            f"{params.r_y.value:g} {params.r_y.unit.name}",
        ),
        "limb_length": Label(
            elbow.x * 1.02,
            elbow.y + limb_px / 2,
            f"{params.limb_length.value:g} {params.limb_length.unit.name}",
        ),
    }
    return DiagramAnnotations(
        force_arrow=force_arrow,
        moment_arm_guide=moment_arm_guide,
        moment_arc=moment_arc,
        labels=labels,
    )
