"""Champion data loader."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.champion import Champion


logger = logging.getLogger(__name__)

# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
CHAMPIONS_FILE = "champions/champions.json"


def _parse_champion(champ_data: dict) -> Champion:
    """Parse a champion from JSON data.

    Abilities without their own mana fields borrow the champion's
    ``initialMana`` / ``mana`` stats, the way Community Dragon splits them.
    """
    champ_data = dict(champ_data)
    ability = champ_data.get("ability")
    stats = champ_data.get("stats") or {}

    if isinstance(ability, dict):
        ability = dict(ability)
        if "manaStart" not in ability and "mana_start" not in ability:
            start = stats.get("initialMana", stats.get("initial_mana"))
            if start is not None:
                ability["manaStart"] = start
        if "manaCost" not in ability and "mana_cost" not in ability:
            cost = stats.get("mana")
            if cost is not None:
                ability["manaCost"] = cost
        champ_data["ability"] = ability

    return Champion.model_validate(champ_data)


@lru_cache(maxsize=4)
def load_champions(data_dir: Optional[Path] = None) -> list[Champion]:
    """Load all champions from JSON.

    Args:
        data_dir: Data root, defaults to the repository's data/ directory.

    Returns:
        List of all Champion objects.
    """
    path = Path(data_dir or DATA_DIR) / CHAMPIONS_FILE
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    champions = [_parse_champion(c) for c in data["champions"]]
    logger.debug("Loaded %d champions from %s", len(champions), path)
    return champions


def get_champion_by_id(champion_id: str, data_dir: Optional[Path] = None) -> Optional[Champion]:
    """Get a champion by ID.

    Args:
        champion_id: The unique champion identifier.

    Returns:
        Champion object if found, None otherwise.
    """
    for champion in load_champions(data_dir):
        if champion.id == champion_id:
            return champion
    return None


def get_champions_by_cost(cost: int, data_dir: Optional[Path] = None) -> list[Champion]:
    """Get all champions of a specific cost."""
    return [c for c in load_champions(data_dir) if c.cost == cost]


def clear_cache() -> None:
    """Clear the champion cache. Useful for testing or hot-reloading data."""
    load_champions.cache_clear()
