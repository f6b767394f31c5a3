"""Scaling table loader."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
SCALING_FILE = "scaling/scaling_table.json"


@lru_cache(maxsize=4)
def load_scaling_overrides(path: Optional[Path] = None) -> dict[str, Any]:
    """Load scaling table overrides as a plain dict.

    Args:
        path: JSON file, defaults to data/scaling/scaling_table.json.

    Returns:
        Dict with any of ``keywords``, ``category_defaults``,
        ``coefficient_overrides`` and ``category_overrides``; empty if the
        file does not exist.
    """
    path = Path(path or DATA_DIR / SCALING_FILE)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def clear_cache() -> None:
    """Clear the scaling table cache."""
    load_scaling_overrides.cache_clear()
