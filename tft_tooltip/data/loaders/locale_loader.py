"""Locale string table loader."""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.locale import LocaleBundle


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
LOCALES_DIR = "locales"

# "en", "ko", "pt_BR"; anything else never reaches the filesystem
LOCALE_PATTERN = re.compile(r"^[a-z]{2}(_[A-Z]{2})?$")
# BCP 47 "undetermined", used for codes with no string tables
UNKNOWN_LOCALE = "und"


def is_valid_locale(locale: Optional[str]) -> bool:
    """Whether a locale code is well formed."""
    return bool(locale) and LOCALE_PATTERN.match(locale) is not None


@lru_cache(maxsize=8)
def load_locale(locale: str = "en", data_dir: Optional[Path] = None) -> LocaleBundle:
    """Load the string tables for a locale.

    A malformed code or a locale without a file yields an empty bundle, so
    every label falls back to the raw variable key.
    """
    if not is_valid_locale(locale):
        logger.debug("Rejected malformed locale %r", locale)
        return LocaleBundle(locale=UNKNOWN_LOCALE)

    path = Path(data_dir or DATA_DIR) / LOCALES_DIR / f"{locale}.json"
    if not path.exists():
        logger.debug("No locale file %s, using empty tables", path)
        return LocaleBundle(locale=locale)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    data.setdefault("locale", locale)
    return LocaleBundle.model_validate(data)


def available_locales(data_dir: Optional[Path] = None) -> list[str]:
    """Locale codes with a file under data/locales."""
    directory = Path(data_dir or DATA_DIR) / LOCALES_DIR
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.json") if is_valid_locale(p.stem))


def resolve_locale(locale: Optional[str], data_dir: Optional[Path] = None) -> str:
    """Map a requested code onto an available locale, else ``UNKNOWN_LOCALE``."""
    if locale in available_locales(data_dir):
        return locale
    return UNKNOWN_LOCALE


def clear_cache() -> None:
    """Clear the locale cache."""
    load_locale.cache_clear()
