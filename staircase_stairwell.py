"""Linear (Switchback) Stairwell Builder.

Generates a multi-level stairwell as one flat-shaded triangle mesh:
  - Flights alternate direction: even levels climb toward +Z, odd toward -Z
  - Flights alternate lane: forward flights hug x=0, backward flights the far
    side of the landing (x = platform_width - stair_width)
  - A landing box joins every pair of consecutive flights; none after the last

The cursor walk over the levels is kept separate from mesh emission
(stairwell_flights) so each flight and landing placement can be checked on
its own.

Usage:
    python staircase_stairwell.py [--levels 8 8 8] [--platform_depth 1200] [--output well.obj]
"""
import argparse
from dataclasses import dataclass
from typing import List, Optional

from stair_mesh import Mesh, add_platform, add_step, to_meters

DEFAULT_LEVEL_STEPS = 8

# ---------------------------------------------------------------------------
# Configuration (mm)
# ---------------------------------------------------------------------------
DEFAULT_CONFIG = {
    "step_height":    180.0,
    "step_length":    280.0,
    "stair_width":   1000.0,
    "platform_width": 1200.0,
    "platform_depth": 1200.0,
    "levels": [DEFAULT_LEVEL_STEPS, DEFAULT_LEVEL_STEPS],
}


@dataclass
class StairLevel:
    """One flight of the stairwell."""

    step_count: int = DEFAULT_LEVEL_STEPS


class StairwellPlan:
    """Ordered, never-empty list of levels, edited one entry at a time."""

    def __init__(self, step_counts=None):
        if step_counts is None:
            step_counts = DEFAULT_CONFIG["levels"]
        self.levels = [StairLevel(int(n)) for n in step_counts if int(n) > 0]
        if not self.levels:
            self.levels = [StairLevel()]

    def __len__(self):
        return len(self.levels)

    def __iter__(self):
        return iter(self.levels)

    def __getitem__(self, index):
        return self.levels[index]

    def append(self, level: Optional[StairLevel] = None) -> StairLevel:
        level = level if level is not None else StairLevel()
        self.levels.append(level)
        return level

    def remove_last(self) -> bool:
        """Drop the top level. A plan always keeps at least one level."""
        if len(self.levels) <= 1:
            return False
        self.levels.pop()
        return True

    def set_step_count(self, index: int, value) -> bool:
        """Set a level's step count; non-positive or non-integer values are ignored."""
        try:
            steps = int(str(value).strip())
        except ValueError:
            return False
        if steps <= 0:
            return False
        self.levels[index].step_count = steps
        return True

    def step_counts(self) -> List[int]:
        return [level.step_count for level in self.levels]

    def total_steps(self) -> int:
        return sum(self.step_counts())

    def total_height(self, step_height: float) -> float:
        return self.total_steps() * step_height

    def summary(self, step_height: float) -> str:
        return f"Total Height: {self.total_height(step_height):.0f} mm ({self.total_steps()} steps)"


# ===========================================================================
# CURSOR WALK
# ===========================================================================

@dataclass(frozen=True)
class LandingPlacement:
    near_depth: float
    top_elevation: float
    previous_was_forward: bool


@dataclass(frozen=True)
class FlightPlacement:
    index: int
    step_count: int
    is_forward: bool
    lane_offset: float
    start_depth: float
    end_depth: float
    base_elevation: float
    landing: Optional[LandingPlacement] = None


@dataclass(frozen=True)
class Cursor:
    depth: float = 0.0
    elevation: float = 0.0


def place_flight(cursor: Cursor, index: int, step_count: int, is_last: bool,
                 step_height: float, step_length: float, stair_width: float,
                 platform_width: float, platform_depth: float):
    """One fold step: place flight `index` and return (placement, next cursor)."""
    is_forward = index % 2 == 0
    sign = 1.0 if is_forward else -1.0
    lane_offset = 0.0 if is_forward else platform_width - stair_width

    start_depth = cursor.depth
    if index > 0:
        start_depth = cursor.depth + sign * platform_depth
    end_depth = start_depth + sign * step_count * step_length
    elevation = cursor.elevation + step_count * step_height

    landing = None
    next_depth = end_depth
    if not is_last:
        # Landing top sits one rise above the last tread
        landing = LandingPlacement(end_depth, elevation + step_height, is_forward)
        next_depth = end_depth + sign * platform_depth

    placement = FlightPlacement(
        index=index,
        step_count=step_count,
        is_forward=is_forward,
        lane_offset=lane_offset,
        start_depth=start_depth,
        end_depth=end_depth,
        base_elevation=cursor.elevation,
        landing=landing,
    )
    return placement, Cursor(next_depth, elevation)


def stairwell_flights(step_counts, step_height: float, step_length: float, stair_width: float,
                      platform_width: float, platform_depth: float) -> List[FlightPlacement]:
    """Fold the level list left to right into flight placements (units as given)."""
    counts = list(step_counts)
    cursor = Cursor()
    flights = []
    for index, count in enumerate(counts):
        placement, cursor = place_flight(
            cursor, index, count, index == len(counts) - 1,
            step_height, step_length, stair_width, platform_width, platform_depth)
        flights.append(placement)
    return flights


# ===========================================================================
# MESH
# ===========================================================================

def _step_counts(levels) -> List[int]:
    return [lvl if isinstance(lvl, int) else lvl.step_count for lvl in levels]


def emit_flight(mesh: Mesh, flight: FlightPlacement, step_height: float,
                step_length: float, stair_width: float):
    sign = 1.0 if flight.is_forward else -1.0
    for step in range(flight.step_count):
        add_step(mesh,
                 current_height=flight.base_elevation + step * step_height,
                 next_height=flight.base_elevation + (step + 1) * step_height,
                 current_depth=flight.start_depth + sign * step * step_length,
                 next_depth=flight.start_depth + sign * (step + 1) * step_length,
                 width=stair_width,
                 offset=flight.lane_offset,
                 is_forward=flight.is_forward)


def generate_linear_stairwell_mesh(levels, step_height: float, step_length: float,
                                   stair_width: float, platform_width: float,
                                   platform_depth: float) -> Mesh:
    """Build the whole stairwell. `levels` holds StairLevel entries or plain step counts."""
    step_height = to_meters(step_height)
    step_length = to_meters(step_length)
    stair_width = to_meters(stair_width)
    platform_width = to_meters(platform_width)
    platform_depth = to_meters(platform_depth)

    mesh = Mesh()
    flights = stairwell_flights(_step_counts(levels), step_height, step_length, stair_width,
                                platform_width, platform_depth)
    for flight in flights:
        emit_flight(mesh, flight, step_height, step_length, stair_width)
        if flight.landing is not None:
            add_platform(mesh,
                         near_depth=flight.landing.near_depth,
                         top_elevation=flight.landing.top_elevation,
                         platform_width=platform_width,
                         platform_depth=platform_depth,
                         step_height=step_height,
                         previous_was_forward=flight.landing.previous_was_forward)
    return mesh


def build_linear_stairwell(config):
    """Build the stairwell from a config dict (see DEFAULT_CONFIG)."""
    return generate_linear_stairwell_mesh(
        config["levels"],
        config["step_height"],
        config["step_length"],
        config["stair_width"],
        config["platform_width"],
        config["platform_depth"],
    )


if __name__ == "__main__":
    from obj_export import export_obj
    from validators.parameters import validate_stairwell

    parser = argparse.ArgumentParser()
    parser.add_argument("--step_height", type=float, default=DEFAULT_CONFIG["step_height"])
    parser.add_argument("--step_length", type=float, default=DEFAULT_CONFIG["step_length"])
    parser.add_argument("--stair_width", type=float, default=DEFAULT_CONFIG["stair_width"])
    parser.add_argument("--platform_width", type=float, default=DEFAULT_CONFIG["platform_width"])
    parser.add_argument("--platform_depth", type=float, default=DEFAULT_CONFIG["platform_depth"])
    parser.add_argument("--levels", type=int, nargs="+", default=DEFAULT_CONFIG["levels"],
                        help="Step count of each flight, bottom to top")
    parser.add_argument("--output", default="staircase_stairwell.obj")
    args = parser.parse_args()

    config = validate_stairwell({
        "step_height": args.step_height,
        "step_length": args.step_length,
        "stair_width": args.stair_width,
        "platform_width": args.platform_width,
        "platform_depth": args.platform_depth,
        "levels": args.levels,
    })

    plan = StairwellPlan(config["levels"])
    print(f"[Stairwell] {len(plan)} levels, {plan.summary(config['step_height'])}")
    well = build_linear_stairwell(config)

    lo, hi = well.bounds()
    print(f"BBox (m): X={lo[0]:.3f}..{hi[0]:.3f}, Y={lo[1]:.3f}..{hi[1]:.3f}, Z={lo[2]:.3f}..{hi[2]:.3f}")

    export_obj(well, args.output)
    print(f"Exported: {args.output}")
