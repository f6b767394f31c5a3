"""Variable label resolution and keyword translation."""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from tft_tooltip.data.models.locale import LocaleBundle

logger = logging.getLogger(__name__)


class EffectCategory(StrEnum):
    """What a variable does, independent of how it scales."""
    DAMAGE = "damage"
    HEAL = "heal"
    SHIELD = "shield"
    DURATION = "duration"
    CROWD_CONTROL = "crowd_control"
    STAT = "stat"
    UTILITY = "utility"
    NONE = "none"


# Category -> (display color, sort priority); lower priority sorts first
CATEGORY_STYLES: dict[EffectCategory, tuple[str, int]] = {
    EffectCategory.DAMAGE: ("red", 1),
    EffectCategory.HEAL: ("green", 2),
    EffectCategory.SHIELD: ("blue", 3),
    EffectCategory.CROWD_CONTROL: ("purple", 4),
    EffectCategory.DURATION: ("yellow", 5),
    EffectCategory.STAT: ("orange", 6),
    EffectCategory.UTILITY: ("cyan", 7),
    EffectCategory.NONE: ("gray", 9),
}

# Ordered; "health" is a stat and has to win over "heal", and
# "StunDuration" is a duration rather than crowd control
EFFECT_KEYWORDS: tuple[tuple[str, EffectCategory], ...] = (
    ("health", EffectCategory.STAT),
    ("duration", EffectCategory.DURATION),
    ("seconds", EffectCategory.DURATION),
    ("heal", EffectCategory.HEAL),
    ("shield", EffectCategory.SHIELD),
    ("damage", EffectCategory.DAMAGE),
    ("stun", EffectCategory.CROWD_CONTROL),
    ("slow", EffectCategory.CROWD_CONTROL),
    ("knockup", EffectCategory.CROWD_CONTROL),
    ("root", EffectCategory.CROWD_CONTROL),
    ("silence", EffectCategory.CROWD_CONTROL),
    ("taunt", EffectCategory.CROWD_CONTROL),
    ("chill", EffectCategory.CROWD_CONTROL),
    ("armor", EffectCategory.STAT),
    ("resist", EffectCategory.STAT),
    ("attackspeed", EffectCategory.STAT),
    ("abilitypower", EffectCategory.STAT),
    ("mana", EffectCategory.STAT),
    ("crit", EffectCategory.STAT),
    ("durability", EffectCategory.STAT),
    ("omnivamp", EffectCategory.STAT),
    ("range", EffectCategory.UTILITY),
    ("radius", EffectCategory.UTILITY),
    ("hex", EffectCategory.UTILITY),
    ("count", EffectCategory.UTILITY),
    ("number", EffectCategory.UTILITY),
    ("threshold", EffectCategory.UTILITY),
)

_TRAILING_DIGITS_RE = re.compile(r"\d+$")


def infer_effect_category(key: str) -> EffectCategory:
    """Effect category from the first keyword contained in the key."""
    lowered = key.lower()
    for keyword, category in EFFECT_KEYWORDS:
        if keyword in lowered:
            return category
    return EffectCategory.NONE


@dataclass(frozen=True)
class VariableLabel:
    """Display metadata for one variable key."""
    key: str
    label: str
    category: EffectCategory = EffectCategory.NONE
    color: str = "gray"
    priority: int = 9
    matched_by: str = "raw"  # exact, stripped, substring or raw


class LabelResolver:
    """
    Map variable keys to localized labels and translate free-form text.

    Lookup order for a key:
    1. Exact match in the locale's label table
    2. Trailing digits stripped (Damage2 -> Damage)
    3. Longest known key contained in the key (case-insensitive)
    4. The raw key itself (category still inferred from the key)

    Usage:
        resolver = LabelResolver(locale_bundle)
        label = resolver.resolve("ModifiedDamage")
    """

    def __init__(self, locale: Optional[LocaleBundle] = None):
        self.locale = locale or LocaleBundle()
        self._labels = dict(self.locale.labels)
        self._lowered = {k.lower(): k for k in self._labels}
        # Substring candidates, longest first
        self._by_length = sorted(self._lowered, key=len, reverse=True)
        self._keyword_re = self._compile_keywords(self.locale.keywords)
        self._keyword_map = {k.lower(): v for k, v in self.locale.keywords.items()}

    @staticmethod
    def _compile_keywords(keywords: dict[str, str]) -> Optional[re.Pattern]:
        if not keywords:
            return None
        phrases = sorted(keywords, key=len, reverse=True)
        alternation = "|".join(re.escape(p) for p in phrases)
        return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)

    def resolve(self, key: str) -> VariableLabel:
        """Resolve a variable key; never fails."""
        if key in self._labels:
            return self._build(key, self._labels[key], key, "exact")

        lowered = key.lower()
        if lowered in self._lowered:
            known = self._lowered[lowered]
            return self._build(key, self._labels[known], known, "exact")

        stripped = _TRAILING_DIGITS_RE.sub("", key)
        if stripped and stripped != key:
            known = self._lowered.get(stripped.lower())
            if known is not None:
                return self._build(key, self._labels[known], known, "stripped")

        for candidate in self._by_length:
            if candidate and candidate in lowered:
                known = self._lowered[candidate]
                return self._build(key, self._labels[known], known, "substring")

        logger.debug("No label for variable %r in locale %s", key, self.locale.locale)
        # Metrics must not depend on how complete the locale is
        return self._build(key, key, key, "raw")

    def _build(self, key: str, label: str, known: str, matched_by: str) -> VariableLabel:
        category = infer_effect_category(key)
        if category == EffectCategory.NONE:
            category = infer_effect_category(known)
        color, priority = CATEGORY_STYLES[category]
        return VariableLabel(
            key=key,
            label=label,
            category=category,
            color=color,
            priority=priority,
            matched_by=matched_by,
        )

    def translate(self, text: str) -> str:
        """Replace known keywords in free-form text, longest phrase first."""
        if self._keyword_re is None or not text:
            return text
        return self._keyword_re.sub(lambda m: self._keyword_map.get(m.group(0).lower(), m.group(0)), text)
