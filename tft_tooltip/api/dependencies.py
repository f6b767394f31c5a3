"""
Dependency injection for API services.
"""

from functools import lru_cache

from .config import settings
from .services.tooltip_service import TooltipService


@lru_cache()
def get_tooltip_service() -> TooltipService:
    """Get TooltipService singleton."""
    return TooltipService(
        data_dir=settings.DATA_DIR,
        scaling_table_file=settings.SCALING_TABLE_FILE,
        default_locale=settings.DEFAULT_LOCALE,
        default_star_level=settings.DEFAULT_STAR_LEVEL,
        default_style=settings.DEFAULT_RENDER_STYLE,
        cache_size=settings.TOOLTIP_CACHE_SIZE,
    )
