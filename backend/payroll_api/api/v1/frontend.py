"""
Fallback for the single-page frontend: serves files from STATIC_DIR and
index.html for every other GET that no API route claimed.
"""
from fastapi import APIRouter
from fastapi.responses import FileResponse

from payroll_api.core.config import settings
from payroll_api.core.exceptions import NotFoundError

router = APIRouter(include_in_schema=False)


@router.get("/{full_path:path}")
async def serve_frontend(full_path: str):
    if full_path == "api" or full_path.startswith("api/"):
        raise NotFoundError("Not found")

    static_dir = settings.STATIC_DIR.resolve()
    candidate = (static_dir / full_path).resolve()
    if full_path and candidate.is_file() and candidate.is_relative_to(static_dir):
        return FileResponse(candidate)

    index = static_dir / "index.html"
    if not index.is_file():
        raise NotFoundError("Not found")
    return FileResponse(index)
