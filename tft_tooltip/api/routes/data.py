"""
Static data API routes.
"""

from fastapi import APIRouter, HTTPException
from pathlib import Path
from typing import Optional, List, Dict, Any

from tft_tooltip.data.loaders import load_champions, load_items, available_locales
from ..config import settings

router = APIRouter()


def _data_dir() -> Optional[Path]:
    return Path(settings.DATA_DIR) if settings.DATA_DIR else None


# === Champions ===


@router.get("/champions")
async def get_all_champions(cost: Optional[int] = None) -> List[Dict[str, Any]]:
    """Get all champions, optionally filtered by cost."""
    champions = load_champions(_data_dir())
    if cost is not None:
        champions = [c for c in champions if c.cost == cost]
    return [c.model_dump() for c in champions]


@router.get("/champions/{champion_id}")
async def get_champion(champion_id: str) -> Dict[str, Any]:
    """Get specific champion by ID."""
    for champ in load_champions(_data_dir()):
        if champ.id == champion_id:
            return champ.model_dump()
    raise HTTPException(status_code=404, detail="Champion not found")


# === Items ===


@router.get("/items")
async def get_all_items(type: Optional[str] = None) -> List[Dict[str, Any]]:
    """Get all items, optionally filtered by type."""
    items = load_items(_data_dir())
    if type is not None:
        items = [i for i in items if i.type == type]
    return [i.model_dump() for i in items]


@router.get("/items/{item_id}")
async def get_item(item_id: str) -> Dict[str, Any]:
    """Get specific item by ID."""
    for item in load_items(_data_dir()):
        if item.id == item_id:
            return item.model_dump()
    raise HTTPException(status_code=404, detail="Item not found")


# === Locales ===


@router.get("/locales")
async def get_locales() -> List[str]:
    """Get available locale codes."""
    return available_locales(_data_dir())
