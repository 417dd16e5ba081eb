from .annotations import DiagramAnnotations, Label, Segment, annotate
from .config import DEFAULT_PARAMETERS, parameters_from_overrides
from .data import JointPoint, PhysicalModel, Pose, PoseParameters, PoseSolution
from .kinematics import solve_limb
from .report import format_report
from .solver import solve_pose
from .units import Quantity, UnitError, UnitMismatchError, Vector2, parse_quantity

__all__ = [
    "PoseParameters",
    "PoseSolution",
    "Pose",
    "JointPoint",
    "PhysicalModel",
    "solve_pose",
    "solve_limb",
    "DEFAULT_PARAMETERS",
    "parameters_from_overrides",
    "annotate",
    "DiagramAnnotations",
    "Label",
    "Segment",
    "format_report",
    "Quantity",
    "Vector2",
    "parse_quantity",
    "UnitError",
    "UnitMismatchError",
]
