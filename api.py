"""FastAPI backend for the Stair Mesh Studio.
Builds stair meshes server-side and returns them as flat vertex/index arrays
for the viewer, or as Wavefront OBJ files for download.
Supports single straight flights and linear (switchback) stairwells.
"""
import enum
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from obj_export import mesh_to_obj
from stair_mesh import MM_PER_METER
from staircase_single import (
    build_single_stair,
    step_count_for,
    DEFAULT_CONFIG as SINGLE_DEFAULTS,
)
from staircase_stairwell import (
    build_linear_stairwell,
    StairwellPlan,
    DEFAULT_CONFIG as STAIRWELL_DEFAULTS,
)
from validators.building_regs import PartKValidator
from validators.parameters import (
    ParameterValidationError,
    validate_single_stair,
    validate_stairwell,
)

app = FastAPI()

Number = Optional[Union[float, str]]


class StairType(str, enum.Enum):
    SINGLE = "single"
    LINEAR_STAIRWELL = "linear_stairwell"


class StairRequest(BaseModel):
    """Raw form values; numbers may arrive as text and are checked field by field."""
    model_type: StairType = StairType.SINGLE
    overall_height: Number = None
    step_height: Number = None
    step_length: Number = None
    stair_width: Number = None
    platform_width: Number = None
    platform_depth: Number = None
    levels: Optional[list] = None


def build_stair(request: StairRequest):
    """Validate the request and build its mesh.

    Returns (mesh, info) where info carries the counts, status line and
    advisory notes. Raises ParameterValidationError before any geometry is
    built if a field is bad.
    """
    raw = request.dict()
    model_type = raw.pop("model_type")

    if model_type == StairType.LINEAR_STAIRWELL:
        config = validate_stairwell(raw)
        plan = StairwellPlan(config["levels"])
        print(f"[API] Building linear stairwell, {len(plan)} levels...")
        mesh = build_linear_stairwell(config)
        total_steps = plan.total_steps()
        info = {
            "step_count": total_steps,
            "platform_count": len(plan) - 1,
            "level_count": len(plan),
            "total_height_mm": plan.total_height(config["step_height"]),
            "status": f"Generated linear stairwell with {len(plan)} levels, {total_steps} steps",
            "notes": PartKValidator.check_stairwell(config),
        }
    else:
        config = validate_single_stair(raw)
        print(f"[API] Building single stair...")
        mesh = build_single_stair(config)
        steps = step_count_for(config["overall_height"], config["step_height"])
        info = {
            "step_count": steps,
            "platform_count": 0,
            "level_count": 1,
            "total_height_mm": config["overall_height"],
            "status": f"Generated single stair with {steps} steps",
            "notes": PartKValidator.check_single_stair(config),
        }
    return mesh, info


def _bbox_mm(mesh):
    bounds = mesh.bounds()
    if bounds is None:
        return None
    lo, hi = bounds
    return {
        "min": [round(v * MM_PER_METER, 1) for v in lo],
        "max": [round(v * MM_PER_METER, 1) for v in hi],
        "size": [round((b - a) * MM_PER_METER, 1) for a, b in zip(lo, hi)],
    }


@app.get("/defaults")
async def get_defaults():
    return {
        StairType.SINGLE.value: SINGLE_DEFAULTS,
        StairType.LINEAR_STAIRWELL.value: STAIRWELL_DEFAULTS,
    }


@app.post("/generate")
async def generate_stair(request: StairRequest):
    try:
        mesh, info = build_stair(request)
        mesh.validate()

        return JSONResponse({
            "model_type": request.model_type.value,
            **info,
            "manifest": {
                "units": "mm",
                "vertex_count": mesh.vertex_count,
                "triangle_count": mesh.triangle_count,
                "bbox": _bbox_mm(mesh),
            },
            # Viewer geometry stays in meters
            "mesh": {
                "positions": [c for p in mesh.positions for c in p],
                "normals": [c for n in mesh.normals for c in n],
                "indices": mesh.triangle_indices,
            },
        })

    except ParameterValidationError as e:
        print(f"[API] Rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/export/obj")
async def export_obj_file(request: StairRequest):
    """Builds the stair and returns it as an OBJ attachment (millimeters)."""
    try:
        mesh, info = build_stair(request)
        obj_text = mesh_to_obj(mesh.without_normals())
        filename = f"stair_{request.model_type.value}.obj"
        print(f"[API] Exported {filename}: {mesh.vertex_count} vertices, {mesh.triangle_count} faces")
        return Response(
            content=obj_text,
            media_type="text/plain",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    except ParameterValidationError as e:
        print(f"[API] Rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"[API] Export Error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
