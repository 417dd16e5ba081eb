"""Solve a shoulder pose and draw its free-body diagram with matplotlib."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lib_freebody.annotations import DiagramAnnotations, annotate
from lib_freebody.config import add_parameter_arguments, parameters_from_args
from lib_freebody.data import PoseSolution
from lib_freebody.solver import solve_pose
from matplotlib import pyplot as plt
from matplotlib.artist import Artist
from matplotlib.patches import Arc, Ellipse, FancyArrowPatch

logger = logging.getLogger(__name__)

_GHOST_COLOR = "#EAEAEA"


@dataclass
class FreeBodyVisuals:
    """Container for the matplotlib artists of one diagram."""

    torso: List[Artist]
    live_limb: List[Artist]
    ghost_limb: List[Artist]
    forces: List[Artist]
    labels: Dict[str, Artist]


def _draw_torso(ax, solution: PoseSolution) -> List[Artist]:
    zero_x, zero_y = solution.zero
    r_x_px = solution.parameters.r_x.to_number("mm")
    r_y_px = solution.parameters.r_y.to_number("mm")
    body = Ellipse((zero_x, zero_y), 2 * r_x_px, 2 * r_y_px, color="pink")
    ax.add_patch(body)
    centre = ax.scatter([zero_x], [zero_y], c="black", s=25, zorder=3)
    x_axis = ax.plot([zero_x, zero_x + r_x_px], [zero_y, zero_y], "k:", linewidth=1)[0]
    y_axis = ax.plot([zero_x, zero_x], [zero_y, zero_y - r_y_px], "k:", linewidth=1)[0]
    return [body, centre, x_axis, y_axis]


def _draw_limbs(ax, solution: PoseSolution) -> tuple[List[Artist], List[Artist]]:
    shoulder, elbow, wrist = solution.shoulder, solution.elbow, solution.wrist
    ghost = ax.plot(
        [shoulder.ghost_x, elbow.ghost_x, wrist.ghost_x],
        [shoulder.y, elbow.y, wrist.y],
        color=_GHOST_COLOR,
        linewidth=6,
        solid_capstyle="round",
        zorder=1,
    )
    live = ax.plot(
        [shoulder.x, elbow.x, wrist.x],
        [shoulder.y, elbow.y, wrist.y],
        color="black",
        linewidth=6,
        zorder=2,
    )
    joints = ax.scatter(
        [shoulder.x, elbow.x],
        [shoulder.y, elbow.y],
        s=80,
        facecolors="white",
        edgecolors="black",
        linewidths=2,
        zorder=3,
    )
    wrist_dot = ax.scatter([wrist.x], [wrist.y], c="black", s=25, zorder=3)
    return list(live) + [joints, wrist_dot], list(ghost)


def _draw_forces(ax, annotations: DiagramAnnotations) -> List[Artist]:
    guide = annotations.moment_arm_guide
    arrow = annotations.force_arrow
    guide_line = ax.plot(
        [guide.start[0], guide.end[0]],
        [guide.start[1], guide.end[1]],
        color="red",
        linestyle="--",
        linewidth=2,
    )[0]
    grf_arrow = FancyArrowPatch(
        arrow.start, arrow.end, arrowstyle="-|>", mutation_scale=15, color="orange", linewidth=3
    )
    ax.add_patch(grf_arrow)

    moment = annotations.moment_arc
    arc = Arc(
        moment.center,
        2 * moment.radius,
        2 * moment.radius,
        theta1=moment.theta1,
        theta2=moment.theta2,
        color="green",
        linewidth=3,
    )
    ax.add_patch(arc)
    # short tangent stub at the arc end carries the arrow head
    end_x, end_y = moment.end
    arc_head = FancyArrowPatch(
        (end_x - 1.0, end_y), (end_x, end_y), arrowstyle="-|>", mutation_scale=15, color="green"
    )
    ax.add_patch(arc_head)
    return [guide_line, grf_arrow, arc, arc_head]


_LABEL_COLORS = {"moment_arm": "red", "grf": "orange", "moment": "green"}
_ANCHOR_TO_HA = {"start": "left", "middle": "center", "end": "right"}


def create_free_body_matplotlib(solution: PoseSolution, *, ax) -> FreeBodyVisuals:
    """Draw ``solution`` onto ``ax`` in pixel coordinates (y grows downward)."""

    annotations = annotate(solution)
    torso = _draw_torso(ax, solution)
    live, ghost = _draw_limbs(ax, solution)
    forces = _draw_forces(ax, annotations)
    labels: Dict[str, Artist] = {}
    for name, label in annotations.labels.items():
        labels[name] = ax.text(
            label.x,
            label.y,
            label.text,
            ha=_ANCHOR_TO_HA.get(label.anchor, "left"),
            color=_LABEL_COLORS.get(name, "black"),
        )

    zoom = solution.parameters.zoom
    ax.set_xlim(0, zoom)
    ax.set_ylim(zoom, 0)
    ax.set_aspect("equal")
    return FreeBodyVisuals(torso=torso, live_limb=live, ghost_limb=ghost, forces=forces, labels=labels)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    add_parameter_arguments(parser)
    parser.add_argument(
        "--save",
        default=None,
        help="Write the figure to this path instead of opening a window.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        params = parameters_from_args(args)
    except ValueError as e:
        logger.error(f"Invalid parameters: {e}")
        return 2

    solution = solve_pose(params)
    fig, ax = plt.subplots(figsize=(8, 8))
    create_free_body_matplotlib(solution, ax=ax)
    if args.save:
        fig.savefig(args.save)
        logger.info(f"Saved diagram to {args.save}")
    else:
        plt.show()
    plt.close(fig)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
