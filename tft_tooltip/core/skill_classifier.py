"""Active/passive classification of abilities."""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Optional

from tft_tooltip.data.models.ability import AbilityDefinition
from tft_tooltip.data.models.numeric import format_number
from .constants import ACTIVE_KEYWORDS, PASSIVE_KEYWORDS


class SkillType(StrEnum):
    ACTIVE = "active"
    PASSIVE = "passive"


class Confidence(StrEnum):
    """How much the classification can be trusted. For data-quality triage only."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ManaInfo:
    start: float
    cost: float

    @property
    def display(self) -> str:
        return f"{format_number(self.start)}/{format_number(self.cost)}"

    def to_dict(self) -> dict:
        return {"start": self.start, "cost": self.cost, "display": self.display}


@dataclass(frozen=True)
class SkillClassification:
    type: SkillType
    confidence: Confidence
    mana_info: Optional[ManaInfo] = None
    reason: str = ""


def _keyword_pattern(keywords: Iterable[str]) -> re.Pattern:
    # ASCII keywords match on word boundaries; Hangul ones match anywhere
    parts = []
    for keyword in keywords:
        escaped = re.escape(keyword)
        parts.append(rf"\b{escaped}\b" if keyword.isascii() else escaped)
    return re.compile("|".join(parts) or r"(?!)", re.IGNORECASE)


class SkillTypeClassifier:
    """
    Classify an ability as active or passive.

    Rules, first match wins:
    1. Valid mana fields (start >= 0, cost > 0) -> active, high confidence
    2. Passive keyword in the name, then the description -> passive, medium
    3. Active keyword in the description -> active, medium
    4. Otherwise passive, low
    """

    def __init__(
        self,
        passive_keywords: Iterable[str] = PASSIVE_KEYWORDS,
        active_keywords: Iterable[str] = ACTIVE_KEYWORDS,
    ):
        self._passive_re = _keyword_pattern(passive_keywords)
        self._active_re = _keyword_pattern(active_keywords)

    def classify(self, ability: Optional[AbilityDefinition]) -> SkillClassification:
        if ability is None:
            return SkillClassification(SkillType.PASSIVE, Confidence.LOW, reason="no ability")

        mana_info = self.mana_info(ability)
        if mana_info is not None:
            return SkillClassification(SkillType.ACTIVE, Confidence.HIGH, mana_info, "mana fields")

        if self._passive_re.search(ability.name):
            return SkillClassification(SkillType.PASSIVE, Confidence.MEDIUM, reason="passive keyword in name")
        if self._passive_re.search(ability.description):
            return SkillClassification(
                SkillType.PASSIVE, Confidence.MEDIUM, reason="passive keyword in description"
            )

        if self._active_re.search(ability.description):
            return SkillClassification(
                SkillType.ACTIVE, Confidence.MEDIUM, reason="active keyword in description"
            )

        return SkillClassification(SkillType.PASSIVE, Confidence.LOW, reason="default")

    @staticmethod
    def mana_info(ability: AbilityDefinition) -> Optional[ManaInfo]:
        """Mana info when both fields are present and valid, else None."""
        start, cost = ability.mana_start, ability.mana_cost
        if start is None or cost is None:
            return None
        if start < 0 or cost <= 0:
            return None
        return ManaInfo(start=start, cost=cost)
