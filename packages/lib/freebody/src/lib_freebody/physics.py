"""Torso mass and ground-reaction force."""

from __future__ import annotations

import math

from .data import GRAVITY, LIMB_COUNT, BodyLoads, PoseParameters
from .units import Vector2, sqrt, tan

__all__ = ["compute_body_loads"]


def compute_body_loads(params: PoseParameters) -> BodyLoads:
    """Derive mass, weight and the GRF from the torso radii.

    Each step feeds the next. The volume treats the torso as an elliptic
    cross-section extruded by its circle-equivalent radius, which is not the
    volume of an ellipsoid; the mass label depends on this exact formula.
    """

    aspect_ratio = params.r_x / params.r_y
    x_section_area = math.pi * params.r_x * params.r_y
    circle_equivalent_r = sqrt(x_section_area / math.pi)
    volume = x_section_area * circle_equivalent_r
    mass = params.tissue_density * volume
    weight = mass * GRAVITY
    # one limb carries a quarter of the weight; negative y pushes up
    grf_y = weight / -LIMB_COUNT
    grf_x = grf_y * tan(params.grf_theta)

    return BodyLoads(
        aspect_ratio=aspect_ratio,
        x_section_area=x_section_area,
        circle_equivalent_r=circle_equivalent_r,
        volume=volume,
        mass=mass,
        weight=weight,
        grf=Vector2(grf_x, grf_y),
    )
