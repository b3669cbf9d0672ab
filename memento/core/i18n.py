"""
Internationalization (i18n) for memento.

Provides YAML-based translation loading, dot-notation key lookup with
fallback chain (requested locale → en → raw key), and plural selection.

Usage:
    from memento.core.i18n import t

    title = t("notification.title", Language.SPANISH.locale_identifier)
    days = t("countdown.days", "ja", count=12000)
"""

import glob
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Set

import yaml

logger = logging.getLogger(__name__)

# Module-level state
_translations: Dict[str, Dict[str, Any]] = {}  # locale -> nested dict
SUPPORTED_LOCALES: Set[str] = set()
DEFAULT_LOCALE = "en"

# Locales without a singular/plural distinction
_NO_PLURAL_LOCALES = {"zh", "ja"}


def _get_locales_dir() -> Path:
    """Locales shipped inside the package."""
    return Path(__file__).resolve().parent.parent / "locales"


def load_translations(locales_dir: Optional[Path] = None) -> None:
    """Load all locale YAML files from the locales directory.

    Args:
        locales_dir: Override path for testing. Defaults to memento/locales/.
    """
    if locales_dir is None:
        locales_dir = _get_locales_dir()

    _translations.clear()
    SUPPORTED_LOCALES.clear()

    yaml_files = sorted(glob.glob(str(locales_dir / "*.yaml")))
    for filepath in yaml_files:
        locale = Path(filepath).stem  # e.g. "en" from "en.yaml"
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load locale file {filepath}: {e}")
            continue
        if data and isinstance(data, dict):
            _translations[locale] = data
            SUPPORTED_LOCALES.add(locale)
            logger.debug(f"Loaded locale: {locale} ({len(data)} top-level keys)")

    if DEFAULT_LOCALE not in SUPPORTED_LOCALES:
        logger.warning(f"Default locale '{DEFAULT_LOCALE}' not found in {locales_dir}")


def _resolve_key(data: Dict[str, Any], key: str) -> Optional[str]:
    """Resolve a dot-notation key in a nested dict.

    Returns:
        The string value, or None if not found or not a leaf.
    """
    current: Any = data
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    if current is None or isinstance(current, (dict, list)):
        return None
    return str(current)


def _plural_form(n: int, locale: str) -> str:
    """Return CLDR plural category for count n in the given locale.

    Chinese and Japanese only use "other"; everything else follows the
    English one / other rule.
    """
    if locale in _NO_PLURAL_LOCALES:
        return "other"
    return "one" if n == 1 else "other"


def _candidate_keys(key: str, locale: str, count: Optional[int]) -> list:
    if count is None:
        return [key]
    return [f"{key}.{_plural_form(count, locale)}", f"{key}.other", key]


def t(
    key: str, locale: Optional[str] = None, count: Optional[int] = None, **kwargs: Any
) -> str:
    """Translate a key with fallback chain, pluralization, and interpolation.

    Fallback order: requested locale → DEFAULT_LOCALE ("en") → raw key.

    Args:
        key: Dot-notation translation key (e.g. "notification.title").
        locale: Target locale code (e.g. "zh-Hans"). Falls back to DEFAULT_LOCALE.
        count: If given, selects the plural sub-key automatically.
        **kwargs: Interpolation variables for str.format_map().
    """
    if not _translations:
        load_translations()

    locale = normalize_locale(locale)

    if count is not None:
        kwargs = {**kwargs, "count": count, "n": count}

    search = [locale]
    if locale != DEFAULT_LOCALE:
        search.append(DEFAULT_LOCALE)

    for candidate_locale in search:
        data = _translations.get(candidate_locale)
        if data is None:
            continue
        for k in _candidate_keys(key, candidate_locale, count):
            value = _resolve_key(data, k)
            if value is not None:
                return _interpolate(value, kwargs)

    logger.debug(f"Missing translation: key={key}, locale={locale}")
    return key


def _interpolate(template: str, variables: Dict[str, Any]) -> str:
    """Interpolate variables; on a bad template return it unchanged."""
    if not variables:
        return template
    try:
        return template.format_map(variables)
    except (KeyError, ValueError, IndexError):
        logger.debug(f"Interpolation failed for template: {template[:80]}")
        return template


def normalize_locale(raw: Optional[str]) -> str:
    """Normalize a locale string to a supported locale code.

    Examples:
        "en-US"   → "en"
        "zh-Hans" → "zh"
        None      → "en"
        "xx"      → "en" (unsupported)
    """
    if not raw:
        return DEFAULT_LOCALE

    base = raw.lower().split("-")[0].split("_")[0].strip()
    if not base:
        return DEFAULT_LOCALE

    if not SUPPORTED_LOCALES:
        load_translations()

    if base in SUPPORTED_LOCALES:
        return base

    return DEFAULT_LOCALE
