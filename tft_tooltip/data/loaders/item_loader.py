"""Item data loader."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from ..models.item import Item, ItemType


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
ITEMS_FILE = "items/items.json"


def _parse_item(item_data: dict) -> Item:
    """Parse an item from JSON data."""
    item_data = dict(item_data)
    # Parse components tuple if present
    if item_data.get("components"):
        item_data["components"] = tuple(item_data["components"])
    else:
        item_data["components"] = None
    return Item.model_validate(item_data)


@lru_cache(maxsize=4)
def load_items(data_dir: Optional[Path] = None) -> list[Item]:
    """Load all items (components and combined).

    Returns:
        List of all Item objects.
    """
    path = Path(data_dir or DATA_DIR) / ITEMS_FILE
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [_parse_item(item) for item in data["items"]]


def get_item_by_id(item_id: str, data_dir: Optional[Path] = None) -> Optional[Item]:
    """Get an item by its ID.

    Args:
        item_id: The unique item identifier.

    Returns:
        Item object if found, None otherwise.
    """
    for item in load_items(data_dir):
        if item.id == item_id:
            return item
    return None


def get_items_by_ids(item_ids: Iterable[str], data_dir: Optional[Path] = None) -> list[Item]:
    """Resolve item IDs in order.

    Raises:
        ValueError: If any ID is unknown.
    """
    items = []
    for item_id in item_ids:
        item = get_item_by_id(item_id, data_dir)
        if item is None:
            raise ValueError(f"Item {item_id} not found")
        items.append(item)
    return items


def get_items_by_type(item_type: ItemType, data_dir: Optional[Path] = None) -> list[Item]:
    """Get all items of a specific type."""
    return [item for item in load_items(data_dir) if item.type == item_type]


def clear_cache() -> None:
    """Clear the item cache."""
    load_items.cache_clear()
