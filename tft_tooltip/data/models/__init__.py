# Data Models
from .ability import AbilityDefinition, AbilityVariable
from .champion import Champion, ChampionCost, UnitStats
from .item import Item, ItemStats, ItemType
from .locale import LocaleBundle

__all__ = [
    "AbilityDefinition",
    "AbilityVariable",
    "Champion",
    "ChampionCost",
    "UnitStats",
    "Item",
    "ItemStats",
    "ItemType",
    "LocaleBundle",
]
