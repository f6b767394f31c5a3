# Data Loaders
from .champion_loader import (
    load_champions,
    get_champion_by_id,
    get_champions_by_cost,
)
from .item_loader import (
    load_items,
    get_item_by_id,
    get_items_by_ids,
    get_items_by_type,
)
from .locale_loader import (
    load_locale,
    available_locales,
    resolve_locale,
    UNKNOWN_LOCALE,
)
from .scaling_loader import load_scaling_overrides

__all__ = [
    # Champion loaders
    "load_champions",
    "get_champion_by_id",
    "get_champions_by_cost",
    # Item loaders
    "load_items",
    "get_item_by_id",
    "get_items_by_ids",
    "get_items_by_type",
    # Locale and scaling loaders
    "load_locale",
    "available_locales",
    "resolve_locale",
    "UNKNOWN_LOCALE",
    "load_scaling_overrides",
]
