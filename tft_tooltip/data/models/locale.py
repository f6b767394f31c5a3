"""Locale string tables consumed by the label resolver and renderer."""

from pydantic import BaseModel, Field


DEFAULT_MESSAGES: dict[str, str] = {
    "no_ability": "No ability data available.",
    "unknown_ability": "Unknown Ability",
    "active": "Active",
    "passive": "Passive",
    "mana": "Mana",
}


class LocaleBundle(BaseModel):
    """Opaque key -> string dictionaries for one locale.

    Every lookup degrades to a fallback instead of failing, since the tables
    are maintained by hand and are never complete.
    """
    locale: str = Field(default="en", description="Locale code, e.g. 'ko'")
    labels: dict[str, str] = Field(default_factory=dict, description="Variable key -> display label")
    keywords: dict[str, str] = Field(default_factory=dict, description="English term -> localized term")
    ability_names: dict[str, str] = Field(default_factory=dict, description="English ability name -> localized name")
    messages: dict[str, str] = Field(default_factory=dict, description="Fixed UI messages")

    model_config = {"frozen": True}

    def message(self, key: str) -> str:
        """Get a fixed message, falling back to English, then to the key."""
        return self.messages.get(key) or DEFAULT_MESSAGES.get(key, key)

    def ability_name(self, name: str) -> str:
        """Localized ability name; exact match, then case-insensitive, then as-is."""
        if name in self.ability_names:
            return self.ability_names[name]
        lowered = name.lower()
        for english, localized in self.ability_names.items():
            if english.lower() == lowered:
                return localized
        return name
