"""Flat-shaded triangle mesh and the panel emitters the stair builders share.

Frame: Y is up, Z runs along the flight, X is across the flight.
Every panel owns its four vertices so each vertex carries exactly one face
normal. Builders work in meters; see obj_export for the millimeter export.
"""

MM_PER_METER = 1000.0

UP = (0.0, 1.0, 0.0)
DOWN = (0.0, -1.0, 0.0)
TOWARD_NEAR = (0.0, 0.0, -1.0)
TOWARD_FAR = (0.0, 0.0, 1.0)
LEFT = (-1.0, 0.0, 0.0)
RIGHT = (1.0, 0.0, 0.0)


def to_meters(value_mm: float) -> float:
    return value_mm / MM_PER_METER


class Mesh:
    """Append-only vertex arena.

    positions[i] is vertex i; normals (when present) run parallel to
    positions; triangle_indices is a flat list, three zero-based indices per
    triangle.
    """

    def __init__(self, positions=None, normals=None, triangle_indices=None):
        self.positions = list(positions or [])
        self.normals = list(normals or [])
        self.triangle_indices = list(triangle_indices or [])

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.triangle_indices) // 3

    @property
    def has_normals(self) -> bool:
        return bool(self.normals)

    def triangles(self):
        idx = self.triangle_indices
        for i in range(0, len(idx) - 2, 3):
            yield idx[i], idx[i + 1], idx[i + 2]

    def face_normal(self, a: int, b: int, c: int):
        """Unnormalised right-hand-rule normal of triangle (a, b, c)."""
        p0, p1, p2 = self.positions[a], self.positions[b], self.positions[c]
        e1 = (p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2])
        e2 = (p2[0] - p0[0], p2[1] - p0[1], p2[2] - p0[2])
        return (
            e1[1] * e2[2] - e1[2] * e2[1],
            e1[2] * e2[0] - e1[0] * e2[2],
            e1[0] * e2[1] - e1[1] * e2[0],
        )

    def bounds(self):
        """Return (min_xyz, max_xyz), or None for an empty mesh."""
        if not self.positions:
            return None
        xs, ys, zs = zip(*self.positions)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def validate(self):
        """Raise ValueError if the arena invariants do not hold."""
        if self.normals and len(self.normals) != len(self.positions):
            raise ValueError(
                f"{len(self.normals)} normals for {len(self.positions)} positions")
        if len(self.triangle_indices) % 3:
            raise ValueError(f"Index count {len(self.triangle_indices)} is not a multiple of 3")
        n = len(self.positions)
        for i in self.triangle_indices:
            if not 0 <= i < n:
                raise ValueError(f"Triangle index {i} out of range [0, {n})")

    def without_normals(self):
        """Export-only copy: positions and indices, no normals."""
        return Mesh(self.positions, None, self.triangle_indices)


def add_quad(mesh: Mesh, p0, p1, p2, p3, normal):
    """Append one flat panel as triangles (p0, p1, p2) and (p0, p2, p3).

    Corners must be given counter-clockwise as seen from the side `normal`
    points to. Returns the index of the first appended vertex.
    """
    base = len(mesh.positions)
    mesh.positions.extend((p0, p1, p2, p3))
    mesh.normals.extend((normal,) * 4)
    mesh.triangle_indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    return base


def add_step(mesh: Mesh, current_height: float, next_height: float,
             current_depth: float, next_depth: float, width: float,
             offset: float = 0.0, is_forward: bool = True):
    """Tread at next_height over [current_depth, next_depth] plus the riser below it.

    The riser stands at current_depth. A backward flight climbs toward -Z,
    so its riser is wound the other way round and faces +Z.
    Appends 8 vertices and 4 triangles.
    """
    x0, x1 = offset, offset + width
    z0, z1 = min(current_depth, next_depth), max(current_depth, next_depth)

    # Tread
    add_quad(mesh,
             (x0, next_height, z0),
             (x0, next_height, z1),
             (x1, next_height, z1),
             (x1, next_height, z0),
             UP)

    # Riser
    bottom_left = (x0, current_height, current_depth)
    bottom_right = (x1, current_height, current_depth)
    top_right = (x1, next_height, current_depth)
    top_left = (x0, next_height, current_depth)
    if is_forward:
        add_quad(mesh, bottom_left, top_left, top_right, bottom_right, TOWARD_NEAR)
    else:
        add_quad(mesh, top_left, bottom_left, bottom_right, top_right, TOWARD_FAR)


def add_platform(mesh: Mesh, near_depth: float, top_elevation: float,
                 platform_width: float, platform_depth: float, step_height: float,
                 previous_was_forward: bool = True):
    """Closed landing box, one step-height thick, 6 faces / 24 vertices.

    The box starts at near_depth and extends platform_depth in the travel
    direction of the flight that led onto it. Across the flight it always
    spans x in [0, platform_width].
    """
    far_depth = near_depth + platform_depth if previous_was_forward else near_depth - platform_depth
    z0, z1 = min(near_depth, far_depth), max(near_depth, far_depth)
    y0, y1 = top_elevation - step_height, top_elevation
    x0, x1 = 0.0, platform_width

    add_quad(mesh, (x0, y1, z0), (x0, y1, z1), (x1, y1, z1), (x1, y1, z0), UP)
    add_quad(mesh, (x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1), DOWN)
    add_quad(mesh, (x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1), TOWARD_FAR)
    add_quad(mesh, (x0, y0, z0), (x0, y1, z0), (x1, y1, z0), (x1, y0, z0), TOWARD_NEAR)
    add_quad(mesh, (x0, y0, z0), (x0, y0, z1), (x0, y1, z1), (x0, y1, z0), LEFT)
    add_quad(mesh, (x1, y0, z0), (x1, y1, z0), (x1, y1, z1), (x1, y0, z1), RIGHT)
