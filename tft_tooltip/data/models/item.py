"""Item data model for the tooltip engine."""

from enum import StrEnum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .numeric import to_number


class ItemType(StrEnum):
    """Item classification."""
    COMPONENT = "component"
    COMBINED = "combined"
    RADIANT = "radiant"
    ARTIFACT = "artifact"
    EMBLEM = "emblem"
    SUPPORT = "support"


class ItemStats(BaseModel):
    """Item stat bonuses.

    Accepts the field spellings seen across the different data exports
    (``ad``/``AD``/``damage``, ``mr``/``MR``/``magicResist`` and so on).
    """
    ad: float = Field(default=0.0, description="Attack Damage",
                      validation_alias=AliasChoices("ad", "AD", "damage", "attack_damage"))
    ap: float = Field(default=0.0, description="Ability Power",
                      validation_alias=AliasChoices("ap", "AP", "abilityPower", "ability_power"))
    armor: float = Field(default=0.0, description="Armor",
                         validation_alias=AliasChoices("armor", "Armor"))
    mr: float = Field(default=0.0, description="Magic Resist",
                      validation_alias=AliasChoices("mr", "MR", "magicResist", "magic_resist"))
    health: float = Field(default=0.0, description="Health",
                          validation_alias=AliasChoices("health", "HP", "hp"))
    mana: float = Field(default=0.0, description="Mana",
                        validation_alias=AliasChoices("mana", "MP", "mp"))
    attack_speed: float = Field(default=0.0, description="Attack Speed %",
                                validation_alias=AliasChoices("attack_speed", "AS", "attackSpeed"))
    crit_chance: float = Field(default=0.0, description="Crit Chance %",
                               validation_alias=AliasChoices("crit_chance", "critChance", "crit"))
    crit_damage: float = Field(default=0.0, description="Crit Damage %",
                               validation_alias=AliasChoices("crit_damage", "critDamage"))

    @field_validator("*", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> float:
        return to_number(value)


class Item(BaseModel):
    """TFT Item model."""
    id: str = Field(..., description="Unique identifier (lowercase, underscores)")
    name: str = Field(..., description="Display name")
    type: ItemType = ItemType.COMBINED
    stats: ItemStats = Field(default_factory=ItemStats)
    effect: Optional[str] = Field(default=None, description="Special effect description")
    components: Optional[tuple[str, str]] = Field(default=None, description="Component IDs for combined items")

    model_config = {"use_enum_values": True}

    @field_validator("stats", mode="before")
    @classmethod
    def _missing_stats(cls, value: Any) -> Any:
        return {} if value is None else value

