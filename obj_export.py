"""Wavefront OBJ writer for stair meshes.

Meshes are built in meters; the OBJ file is written in millimeters, the
units the stair was designed in. Only `v` and `f` records are written (no
normals, no .mtl), faces use OBJ's 1-based vertex numbering.
"""
import io

from stair_mesh import MM_PER_METER

OBJ_HEADER = "# Stair Generator OBJ Export (units: mm)"


class ExportIOError(IOError):
    """The OBJ destination could not be written."""

    def __init__(self, destination, reason):
        super().__init__(f"Could not write {destination}: {reason}")
        self.destination = destination


def mesh_to_obj(mesh, scale=MM_PER_METER):
    """Serialize a mesh to OBJ text.

    Args:
        mesh: stair_mesh.Mesh (normals are ignored and may be absent).
        scale: factor applied to every coordinate; the default turns meters
            back into millimeters.

    Returns:
        str: the OBJ document.
    """
    output = io.StringIO()
    output.write(OBJ_HEADER + "\n")
    output.write("\n")

    # Vertex order is the face numbering, never reorder or merge
    for x, y, z in mesh.positions:
        output.write(f"v {x * scale:.6f} {y * scale:.6f} {z * scale:.6f}\n")

    output.write("\n")

    for a, b, c in mesh.triangles():
        output.write(f"f {a + 1} {b + 1} {c + 1}\n")

    return output.getvalue()


def export_obj(mesh, destination, scale=MM_PER_METER):
    """Write the mesh to `destination` as UTF-8 OBJ text.

    Raises ExportIOError (chained to the OSError) if the file cannot be
    written. A partially written file is left in place.
    """
    text = mesh_to_obj(mesh, scale=scale)
    try:
        with open(destination, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        print(f"[Export] Failed to write {destination}: {e}")
        raise ExportIOError(destination, e) from e
    return destination
