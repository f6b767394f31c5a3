"""Champion data model for the tooltip engine."""

from enum import IntEnum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .ability import AbilityDefinition
from .numeric import to_number


class ChampionCost(IntEnum):
    """Champion cost tiers."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5


class UnitStats(BaseModel):
    """Champion base statistics at 1 star.

    Health and attack damage are scaled by star level later; everything else
    is flat. Missing or non-numeric fields are read as 0.
    """
    health: float = Field(default=0.0, ge=0)
    mana: float = Field(default=0.0, ge=0, description="Max mana")
    initial_mana: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("initial_mana", "initialMana", "mana_start", "manaStart"),
    )
    armor: float = Field(default=0.0, ge=0)
    magic_resist: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("magic_resist", "magicResist", "mr"),
    )
    attack_damage: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("attack_damage", "attackDamage", "damage", "ad"),
    )
    attack_speed: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("attack_speed", "attackSpeed", "as"),
    )
    ability_power: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("ability_power", "abilityPower", "ap"),
    )
    crit_chance: float = Field(
        default=0.25, ge=0,
        validation_alias=AliasChoices("crit_chance", "critChance"),
        description="Base crit chance",
    )
    crit_damage: float = Field(
        default=1.4, ge=0,
        validation_alias=AliasChoices("crit_damage", "critDamage"),
        description="Base crit damage multiplier",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> float:
        # Negative stats make no sense in the exports; read them as 0
        return max(to_number(value), 0.0)


class Champion(BaseModel):
    """TFT Champion with the data the tooltip engine needs."""
    id: str = Field(..., description="Unique identifier (lowercase, no spaces)")
    name: str = Field(..., description="Display name")
    cost: ChampionCost
    traits: list[str] = Field(default_factory=list, description="List of trait IDs")
    stats: UnitStats = Field(default_factory=UnitStats)
    ability: Optional[AbilityDefinition] = None

    model_config = {"use_enum_values": True}
