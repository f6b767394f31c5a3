"""TFT Tooltip Engine Constants."""

from typing import Final

# =============================================================================
# STAR LEVELS
# =============================================================================
MIN_STAR_LEVEL: Final[int] = 1
MAX_STAR_LEVEL: Final[int] = 3
DEFAULT_STAR_LEVEL: Final[int] = 2

# Base stat multiplier per star level (health and attack damage only).
# Observed values from the Community Dragon exports; overridable per resolver.
STAR_MULTIPLIER: Final[dict[int, float]] = {
    1: 1.0,
    2: 1.8,
    3: 3.24,
}

# =============================================================================
# ITEMS
# =============================================================================
MAX_ITEMS: Final[int] = 3

# =============================================================================
# UNIT DEFAULTS
# =============================================================================
BASE_CRIT_CHANCE: Final[float] = 0.25  # 25% base crit chance
BASE_CRIT_DAMAGE: Final[float] = 1.40  # 140% crit damage (40% bonus)
BASE_ABILITY_POWER: Final[float] = 0.0

# =============================================================================
# MANA / CAST TIMING
# =============================================================================
# Mana gained per auto attack, used only to approximate time between casts
MANA_PER_ATTACK: Final[int] = 10

# =============================================================================
# SCALING HEURISTICS
# =============================================================================
# Ordered (keyword, category) pairs matched against the lowercased variable key.
# "health" must come before "heal" since it contains it.
SCALING_KEYWORDS: Final[tuple[tuple[str, str], ...]] = (
    ("health", "HP"),
    ("magic", "AP"),
    ("spell", "AP"),
    ("heal", "AP"),
    ("shield", "AP"),
    ("physical", "AD"),
    ("attack", "AD"),
    ("crit", "AD"),
    ("hybrid", "HYBRID"),
    ("damage", "AP"),
)

# Fraction of the relevant stat added per point of stat
DEFAULT_SCALING_COEFFICIENTS: Final[dict[str, float]] = {
    "AP": 0.01,
    "AD": 0.01,
    "HP": 0.0001,
    "HYBRID": 0.01,
    "NONE": 0.0,
}

# Known variable keys with a coefficient that differs from the category default
COEFFICIENT_OVERRIDES: Final[dict[str, float]] = {
    "ModifiedDamage": 0.015,
    "ModifiedHeal": 0.015,
    "Damage": 0.01,
    "Heal": 0.015,
    "Shield": 0.012,
}

# =============================================================================
# TEMPLATE PARSING
# =============================================================================
# Tags whose content is shown only when a runtime condition holds
CONDITIONAL_TAGS: Final[frozenset[str]] = frozenset({"showif", "showifnot"})
NEGATED_CONDITIONAL_TAGS: Final[frozenset[str]] = frozenset({"showifnot"})

# Tags that end a paragraph
LINE_BREAK_TAGS: Final[frozenset[str]] = frozenset({"br"})

# Connective keywords that open a new paragraph when they begin a clause
PARAGRAPH_KEYWORDS: Final[tuple[str, ...]] = (
    "afterward",
    "afterwards",
    "additionally",
    "instead",
    "이후",
    "추가로",
    "대신",
)

# =============================================================================
# SKILL CLASSIFICATION
# =============================================================================
PASSIVE_KEYWORDS: Final[tuple[str, ...]] = (
    "passive",
    "innate",
    "constantly",
    "always",
    "패시브",
)

ACTIVE_KEYWORDS: Final[tuple[str, ...]] = (
    "cast",
    "channel",
    "activate",
    "시전",
)
