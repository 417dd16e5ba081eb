"""Default parameters and textual overrides."""

from __future__ import annotations

import argparse
from dataclasses import fields
from typing import Mapping

from .data import TISSUE_DENSITY, PoseParameters
from .units import Quantity, parse_quantity

__all__ = [
    "DEFAULT_PARAMETERS",
    "parameters_from_overrides",
    "add_parameter_arguments",
    "parameters_from_args",
]


DEFAULT_PARAMETERS = PoseParameters(
    r_x=Quantity.of(0.1, "m"),
    r_y=Quantity.of(0.1, "m"),
    limb_length=Quantity.of(0.1, "m"),
    shoulder_offset_theta=Quantity.of(45, "deg"),
    retraction_theta=Quantity.of(0, "deg"),  # from straight out
    adduction_theta=Quantity.of(0, "deg"),  # from horizontal
    grf_theta=Quantity.of(0, "deg"),
    zoom=1000,
    tissue_density=TISSUE_DENSITY,
)

# command-line flag -> PoseParameters field
_FLAGS = {
    "rx": "r_x",
    "ry": "r_y",
    "limb": "limb_length",
    "shoulder_offset": "shoulder_offset_theta",
    "retraction": "retraction_theta",
    "adduction": "adduction_theta",
    "grf_angle": "grf_theta",
    "density": "tissue_density",
}


def parameters_from_overrides(
    overrides: Mapping[str, str], base: PoseParameters = DEFAULT_PARAMETERS
) -> PoseParameters:
    """Apply ``{"r_x": "0.2 m", "zoom": "800"}`` style overrides to ``base``."""

    known = {f.name for f in fields(PoseParameters)}
    changes = {}
    for name, text in overrides.items():
        if name not in known:
            raise KeyError(f"Unknown parameter: {name}")
        if name == "zoom":
            changes[name] = float(text)
        else:
            changes[name] = parse_quantity(text)
    return base.with_changes(**changes)


def add_parameter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rx", help="Torso radius along x (default: 0.1 m).")
    parser.add_argument("--ry", help="Torso radius along y (default: 0.1 m).")
    parser.add_argument("--limb", help="Length of each limb segment (default: 0.1 m).")
    parser.add_argument(
        "--shoulder-offset",
        help="Shoulder attachment angle around the torso (default: 45 deg).",
    )
    parser.add_argument(
        "--retraction", help="Limb angle from straight out (default: 0 deg)."
    )
    parser.add_argument(
        "--adduction", help="Limb angle from horizontal (default: 0 deg)."
    )
    parser.add_argument(
        "--grf-angle", help="GRF angle from vertical (default: 0 deg)."
    )
    parser.add_argument("--zoom", type=float, help="Viewport size in pixels (default: 1000).")
    parser.add_argument(
        "--density", help="Tissue density (default: 997 kg/m^3)."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )


def parameters_from_args(args: argparse.Namespace) -> PoseParameters:
    overrides = {}
    for flag, name in _FLAGS.items():
        value = getattr(args, flag, None)
        if value is not None:
            overrides[name] = value
    if getattr(args, "zoom", None) is not None:
        overrides["zoom"] = str(args.zoom)
    return parameters_from_overrides(overrides)
