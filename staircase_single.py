"""Single Flight Stair Builder.
Generates a straight flight of stairs as a flat-shaded triangle mesh from:
- Overall Height (floor to floor)
- Step Height (target rise, redistributed so every riser is equal)
- Step Length (going)
- Stair Width

All inputs are millimeters; the mesh is built in meters.

Usage:
    python staircase_single.py [--overall_height 2000] [--step_height 200] [--output stair.obj]
"""
import math
import argparse
from stair_mesh import Mesh, add_step, to_meters

# Default Configuration (mm)
DEFAULT_CONFIG = {
    "overall_height": 2000.0,
    "step_height": 200.0,
    "step_length": 250.0,
    "stair_width": 900.0,
}


def step_count_for(overall_height: float, step_height: float) -> int:
    """Number of risers needed so none is taller than step_height."""
    return int(math.ceil(overall_height / step_height))


def actual_step_height(overall_height: float, step_height: float) -> float:
    """Rise of each step once the overall height is shared out evenly (mm)."""
    return overall_height / step_count_for(overall_height, step_height)


def generate_single_stair_mesh(overall_height: float, step_height: float,
                               step_length: float, stair_width: float) -> Mesh:
    """Build one forward flight starting at the origin."""
    step_count = step_count_for(overall_height, step_height)
    rise = to_meters(overall_height) / step_count
    going = to_meters(step_length)
    width = to_meters(stair_width)

    mesh = Mesh()
    for step in range(step_count):
        add_step(mesh,
                 current_height=step * rise,
                 next_height=(step + 1) * rise,
                 current_depth=step * going,
                 next_depth=(step + 1) * going,
                 width=width)
    return mesh


def build_single_stair(config):
    """Build the flight from a config dict (see DEFAULT_CONFIG)."""
    return generate_single_stair_mesh(
        config["overall_height"],
        config["step_height"],
        config["step_length"],
        config["stair_width"],
    )


if __name__ == "__main__":
    from obj_export import export_obj

    parser = argparse.ArgumentParser()
    parser.add_argument("--overall_height", type=float, default=DEFAULT_CONFIG["overall_height"])
    parser.add_argument("--step_height", type=float, default=DEFAULT_CONFIG["step_height"])
    parser.add_argument("--step_length", type=float, default=DEFAULT_CONFIG["step_length"])
    parser.add_argument("--stair_width", type=float, default=DEFAULT_CONFIG["stair_width"])
    parser.add_argument("--output", default="staircase_single.obj")
    args = parser.parse_args()

    config = DEFAULT_CONFIG.copy()
    config.update({
        "overall_height": args.overall_height,
        "step_height": args.step_height,
        "step_length": args.step_length,
        "stair_width": args.stair_width,
    })

    from validators.parameters import validate_single_stair
    config = validate_single_stair(config)

    steps = step_count_for(config["overall_height"], config["step_height"])
    print(f"Building: H={config['overall_height']}, Rise={actual_step_height(config['overall_height'], config['step_height']):.1f}, Steps={steps}")
    stair = build_single_stair(config)

    lo, hi = stair.bounds()
    print(f"BBox (m): X={lo[0]:.3f}..{hi[0]:.3f}, Y={lo[1]:.3f}..{hi[1]:.3f}, Z={lo[2]:.3f}..{hi[2]:.3f}")

    export_obj(stair, args.output)
    print(f"Exported: {args.output}")
