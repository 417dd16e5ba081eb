"""
Solve the shoulder free-body diagram and print joint positions, the GRF and
the moment about the shoulder.

Example:
    python packages/app/free_body.py --adduction "30 deg" --grf-angle "10 deg"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from lib_freebody import format_report, solve_pose
from lib_freebody.config import add_parameter_arguments, parameters_from_args


def run(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    add_parameter_arguments(parser)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        params = parameters_from_args(args)
    except ValueError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2

    solution = solve_pose(params)
    print(format_report(solution))
    return 0


if __name__ == "__main__":
    sys.exit(run())
