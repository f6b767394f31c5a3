"""Ability data model as exported by Community Dragon."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .numeric import to_number, to_optional_number


# Index 0 is unused, indices 1-3 are the star levels
STAR_VALUE_SLOTS = 4


class AbilityVariable(BaseModel):
    """A named per-star numeric array referenced from the description.

    ``per_star_values`` always has four slots; index 0 is unused and indices
    1-3 hold the 1-star, 2-star and 3-star values.
    """
    key: str = Field(..., validation_alias=AliasChoices("key", "name"))
    per_star_values: list[float] = Field(
        default_factory=lambda: [0.0] * STAR_VALUE_SLOTS,
        validation_alias=AliasChoices("per_star_values", "perStarValues", "value", "values"),
        description="[unused, 1-star, 2-star, 3-star]",
    )

    model_config = {"frozen": True}

    @field_validator("key", mode="before")
    @classmethod
    def _strip_at_signs(cls, value: Any) -> str:
        return str(value or "").strip().strip("@")

    @field_validator("per_star_values", mode="before")
    @classmethod
    def _normalize_values(cls, value: Any) -> list[float]:
        if isinstance(value, (list, tuple)):
            values = [to_number(v) for v in value]
            # Three-element arrays already start at 1-star
            if len(values) == STAR_VALUE_SLOTS - 1:
                values = [0.0] + values
        else:
            # A single scalar applies to every star level
            scalar = to_number(value)
            values = [0.0] + [scalar] * (STAR_VALUE_SLOTS - 1)

        values = values[:STAR_VALUE_SLOTS]
        values += [0.0] * (STAR_VALUE_SLOTS - len(values))
        return values

    @property
    def star_values(self) -> list[float]:
        """Values at [1-star, 2-star, 3-star]."""
        return list(self.per_star_values[1:])


class AbilityDefinition(BaseModel):
    """Raw ability definition fed to the tooltip engine."""
    name: str = Field(default="", description="Ability display name")
    description: str = Field(
        default="",
        validation_alias=AliasChoices("description", "desc"),
        description="Templated description with @Variable@ placeholders and markup",
    )
    mana_start: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("mana_start", "manaStart"),
    )
    mana_cost: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("mana_cost", "manaCost"),
    )
    variables: list[AbilityVariable] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("name", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("mana_start", "mana_cost", mode="before")
    @classmethod
    def _lenient_mana(cls, value: Any) -> Optional[float]:
        return to_optional_number(value)

    @field_validator("variables", mode="before")
    @classmethod
    def _variables_from_mapping(cls, value: Any) -> Any:
        # Older exports ship variables as {name: [values]}
        if isinstance(value, dict):
            return [{"name": name, "value": values} for name, values in value.items()]
        if value is None:
            return []
        return value

    def get_variable(self, key: str) -> Optional[AbilityVariable]:
        """Find a variable by key, falling back to a case-insensitive match."""
        for variable in self.variables:
            if variable.key == key:
                return variable
        lowered = key.lower()
        for variable in self.variables:
            if variable.key.lower() == lowered:
                return variable
        return None
