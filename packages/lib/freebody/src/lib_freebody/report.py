"""Plain-text summary of a solved pose."""

from __future__ import annotations

from typing import List

from .data import JointPoint, PoseSolution


def _joint_line(name: str, joint: JointPoint) -> str:
    return f"{name:<9} x={joint.x:8.2f}  y={joint.y:8.2f}  ghost_x={joint.ghost_x:8.2f}"


def format_report(solution: PoseSolution, precision: int = 2) -> str:
    physical = solution.physical
    grf = physical.grf
    lines: List[str] = [
        f"origin    ({solution.zero[0]:.2f}, {solution.zero[1]:.2f})",
        _joint_line("shoulder", solution.shoulder),
        _joint_line("elbow", solution.elbow),
        _joint_line("wrist", solution.wrist),
        f"mass      {physical.mass.format(precision)}",
        f"weight    {physical.weight.format(precision)}",
        f"grf       ({grf.x.format(precision)}, {grf.y.format(precision)})",
        f"moment arm {physical.moment_arm_length.format(precision)}",
        f"moment    {physical.moment.format(precision)}",
    ]
    return "\n".join(lines)
