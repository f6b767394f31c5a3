"""
Tooltip API routes.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Dict, List, Optional

from tft_tooltip.core.description_renderer import RenderStyle
from ..schemas.tooltip import ResolveTooltipRequest, TooltipResponse
from ..services.tooltip_service import TooltipService
from ..dependencies import get_tooltip_service

router = APIRouter()


@router.post("/resolve", response_model=TooltipResponse)
async def resolve_tooltip(
    request: ResolveTooltipRequest,
    service: TooltipService = Depends(get_tooltip_service),
):
    """
    Resolve an inline ability.

    Stats and items come with the request; nothing is cached.
    """
    try:
        return service.resolve(request)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/cache")
async def get_cache_info(
    service: TooltipService = Depends(get_tooltip_service),
) -> Dict[str, int]:
    """Get tooltip cache statistics."""
    return service.cache_info()


@router.get("/{champion_id}", response_model=TooltipResponse)
async def get_tooltip(
    champion_id: str,
    star_level: Optional[str] = None,
    items: Optional[str] = Query(default=None, description="Comma-separated item IDs"),
    style: Optional[RenderStyle] = None,
    locale: Optional[str] = None,
    conditions: List[str] = Query(default=[]),
    service: TooltipService = Depends(get_tooltip_service),
):
    """
    Get the resolved tooltip of a champion.

    Star level is clamped into 1..3; item order does not matter.
    """
    item_ids = [i.strip() for i in items.split(",") if i.strip()] if items else []
    try:
        return service.get_tooltip(
            champion_id=champion_id,
            star_level=star_level,
            item_ids=item_ids,
            style=style,
            locale=locale,
            active_conditions=conditions,
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
