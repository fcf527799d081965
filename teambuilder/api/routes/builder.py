"""
Builder page routes.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from ...data.loaders import UnitsLoader, UnitsLoadError
from ...data.models import BoardView
from ..assets import AssetPaths
from ..config import settings
from ..dependencies import build_canonical_url, get_asset_paths, get_templates, get_units_loader

logger = logging.getLogger(__name__)

router = APIRouter()

BOARD_ROWS = 4
BOARD_COLS = 7


@router.get("/", response_class=HTMLResponse)
def builder_page(
    request: Request,
    loader: UnitsLoader = Depends(get_units_loader),
    templates: Jinja2Templates = Depends(get_templates),
    assets: AssetPaths = Depends(get_asset_paths),
):
    """Render the team builder."""
    try:
        units = loader.load_units().units
    except UnitsLoadError as e:
        logger.error(f"Error loading units: {e}")
        units = []

    context = {
        "board": BoardView.create(BOARD_ROWS, BOARD_COLS),
        "units": units,
        "static_base": settings.STATIC_BASE_URL,
        "canonical": build_canonical_url(settings.SITE_URL),
        "assets": assets,
    }

    try:
        return templates.TemplateResponse(request, "builder.html", context)
    except TemplateError as e:
        logger.error(f"Template error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/robots.txt", include_in_schema=False)
def robots_txt():
    """Serve robots.txt from the static directory."""
    path = Path(settings.STATIC_DIR) / "robots.txt"
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path, media_type="text/plain; charset=utf-8")
