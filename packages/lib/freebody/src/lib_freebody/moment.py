"""Moment arm and torque of the GRF about the shoulder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .units import Quantity, Vector2, cross

__all__ = ["MomentResult", "compute_moment"]

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MomentResult:
    moment_arm: Vector2
    moment_arm_length: Quantity
    moment: Quantity


def _unit_vector(vector: NDArray[np.float64]) -> Optional[NDArray[np.float64]]:
    """Return ``vector`` scaled to unit length, or None for a zero vector.

    The vector is first divided by its largest component so that the norm
    neither underflows for tiny forces nor overflows for huge ones.
    """

    largest = float(np.max(np.abs(vector)))
    if largest == 0.0 or not np.isfinite(largest):
        return None
    scaled = vector / largest
    return scaled / float(np.linalg.norm(scaled))


def compute_moment(
    pivot: Tuple[float, float],
    application: Tuple[float, float],
    force: Vector2,
) -> MomentResult:
    """Torque of ``force`` applied at ``application`` about ``pivot``.

    Points are pixel coordinates, read as millimetres. The lever is split into
    components parallel and perpendicular to the force; the perpendicular one
    is the moment arm.
    """

    unit_force = _unit_vector(force.to_array("N"))
    if unit_force is None:
        logger.debug("GRF has no direction; moment arm and moment set to zero")
        zero_arm = Vector2(Quantity.of(0.0, "mm"), Quantity.of(0.0, "mm"))
        return MomentResult(
            moment_arm=zero_arm,
            moment_arm_length=Quantity.of(0.0, "mm"),
            moment=Quantity.of(0.0, "N*m"),
        )

    a_minus_p = np.asarray(application, dtype=np.float64) - np.asarray(
        pivot, dtype=np.float64
    )
    parallel = float(np.dot(a_minus_p, unit_force)) * unit_force
    arm = a_minus_p - parallel

    moment_arm = Vector2.from_array(arm, "mm")
    moment = abs(cross(moment_arm, force)).to("N*m")
    return MomentResult(
        moment_arm=moment_arm,
        moment_arm_length=Quantity.of(float(np.linalg.norm(arm)), "mm"),
        moment=moment,
    )
