"""Data definitions for the shoulder free-body model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

from scipy import constants

from .units import ANGLE, LENGTH, Quantity, UnitMismatchError, Vector2

# Physical constants
GRAVITY = Quantity.of(constants.g, "m/s^2")
TISSUE_DENSITY = Quantity.of(997, "kg/m^3")
# 200 kPa (https://www.ncbi.nlm.nih.gov/pmc/articles/PMC4968477/); not used by the solver
SPECIFIC_TENSION = Quantity.of(200, "kPa")
# limbs sharing the body weight
LIMB_COUNT = 4


@dataclass(frozen=True)
class PoseParameters:
    """Inputs of the solver.

    attributes:
            r_x, r_y: torso radii (length)
            limb_length: length of each of the two limb segments
            shoulder_offset_theta: shoulder attachment angle around the torso
            retraction_theta: limb angle from straight out
            adduction_theta: limb angle from horizontal
            grf_theta: ground-reaction force angle from vertical
            zoom: pixel size of the square viewport
            tissue_density: density used for the torso mass
    """

    r_x: Quantity
    r_y: Quantity
    limb_length: Quantity
    shoulder_offset_theta: Quantity
    retraction_theta: Quantity
    adduction_theta: Quantity
    grf_theta: Quantity
    zoom: float
    tissue_density: Quantity = field(default=TISSUE_DENSITY)

    def __post_init__(self) -> None:
        for name in ("r_x", "r_y", "limb_length"):
            _require_dimension(name, getattr(self, name), LENGTH)
        for name in (
            "shoulder_offset_theta",
            "retraction_theta",
            "adduction_theta",
            "grf_theta",
        ):
            _require_dimension(name, getattr(self, name), ANGLE)
        _require_dimension("tissue_density", self.tissue_density, TISSUE_DENSITY.dimension)
        if isinstance(self.zoom, Quantity):
            raise UnitMismatchError("zoom is a plain pixel count, not a quantity")

    def with_changes(self, **changes) -> "PoseParameters":
        """Return a new parameter set with some fields replaced."""
        return replace(self, **changes)


def _require_dimension(name: str, value: object, dimension) -> None:
    if not isinstance(value, Quantity) or value.dimension != dimension:
        raise UnitMismatchError(f"{name} has the wrong unit: {value!r}")


@dataclass(frozen=True)
class JointPoint:
    """A joint in pixel space; ghost_x mirrors x about the torso axis."""

    x: float
    y: float
    ghost_x: float

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def ghost_position(self) -> Tuple[float, float]:
        return self.ghost_x, self.y


@dataclass(frozen=True)
class Pose:
    shoulder: JointPoint
    elbow: JointPoint
    wrist: JointPoint


@dataclass(frozen=True)
class BodyLoads:
    """Torso-derived quantities, computed in dependency order."""

    aspect_ratio: Quantity
    x_section_area: Quantity
    circle_equivalent_r: Quantity
    volume: Quantity
    mass: Quantity
    weight: Quantity
    grf: Vector2


@dataclass(frozen=True)
class PhysicalModel:
    """Derived constants of one pose.

    moment_arm is the lever component perpendicular to the GRF (mm),
    moment_arm_length its norm and moment the torque about the shoulder.
    """

    aspect_ratio: Quantity
    x_section_area: Quantity
    circle_equivalent_r: Quantity
    volume: Quantity
    mass: Quantity
    weight: Quantity
    grf: Vector2
    moment_arm: Vector2
    moment_arm_length: Quantity
    moment: Quantity


@dataclass(frozen=True)
class PoseSolution:
    """Everything a renderer needs for one diagram."""

    parameters: PoseParameters
    zero: Tuple[float, float]
    pose: Pose
    physical: PhysicalModel

    @property
    def shoulder(self) -> JointPoint:
        return self.pose.shoulder

    @property
    def elbow(self) -> JointPoint:
        return self.pose.elbow

    @property
    def wrist(self) -> JointPoint:
        return self.pose.wrist

    @property
    def grf(self) -> Vector2:
        return self.physical.grf

    @property
    def moment(self) -> Quantity:
        return self.physical.moment

    @property
    def moment_arm(self) -> Quantity:
        return self.physical.moment_arm_length

    @property
    def mass(self) -> Quantity:
        return self.physical.mass
