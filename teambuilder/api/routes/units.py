"""
Unit data API routes.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ...core.ability_formatter import format_ability_description
from ...data.loaders import UnitsLoader, UnitsLoadError
from ...data.models import Unit
from ...data.slugs import unit_slug
from ..dependencies import get_units_loader

router = APIRouter()


def _load(loader: UnitsLoader) -> list[Unit]:
    try:
        return loader.load_units().units
    except UnitsLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))


def _serialize(unit: Unit) -> Dict[str, Any]:
    data = unit.model_dump()
    data["ability"]["html"] = str(format_ability_description(unit.ability))
    return data


@router.get("")
def get_all_units(
    cost: Optional[int] = None,
    loader: UnitsLoader = Depends(get_units_loader),
) -> List[Dict[str, Any]]:
    """Get all units, optionally filtered by cost."""
    units = _load(loader)
    if cost is not None:
        units = [u for u in units if u.cost == cost]
    return [_serialize(u) for u in units]


@router.get("/{name}")
def get_unit(name: str, loader: UnitsLoader = Depends(get_units_loader)) -> Dict[str, Any]:
    """Get a unit by name (case and punctuation insensitive)."""
    key = unit_slug(name)
    for unit in _load(loader):
        if unit_slug(unit.name) == key:
            return _serialize(unit)
    raise HTTPException(status_code=404, detail="Unit not found")
