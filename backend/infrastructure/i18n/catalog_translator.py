"""JSON catalog translator.

Message catalogs live next to this module in ``locales/<code>.json`` as
flat ``{"dotted.key": "text"}`` objects.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from domain.shared.ports.translator import ITranslator
from infrastructure.config import DEFAULT_LOCALE, get_default_locale

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


class CatalogTranslator(ITranslator):
    """Translator over one message catalog with an optional fallback.

    Lookup order: own catalog, fallback catalog, then the key itself.

    Examples:
        >>> en = CatalogTranslator("en", {"common.error": "Oops"})
        >>> en.t("common.error")
        'Oops'
        >>> en.t("missing.key")
        'missing.key'
    """

    def __init__(
        self,
        locale: str,
        messages: Dict[str, str],
        fallback: Optional["CatalogTranslator"] = None,
    ) -> None:
        self._locale = locale
        self._messages = dict(messages)
        self._fallback = fallback

    @property
    def locale(self) -> str:
        return self._locale

    def t(self, key: str) -> str:
        value = self._messages.get(key)
        if value is not None:
            return value
        if self._fallback is not None:
            return self._fallback.t(key)
        logger.debug("i18n.missing_key", extra={"locale": self._locale, "key": key})
        return key


def load_catalog(locale: str, locales_dir: Path = LOCALES_DIR) -> Dict[str, str]:
    """Read ``<locales_dir>/<locale>.json``.

    Raises:
        FileNotFoundError: If the catalog does not exist
        ValueError: If the file is not a flat string mapping
    """
    path = locales_dir / f"{locale}.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"Catalog {path} must map string keys to string values")
    return data


@lru_cache(maxsize=1)
def available_locales() -> FrozenSet[str]:
    """Locales with a catalog file."""
    return frozenset(p.stem for p in LOCALES_DIR.glob("*.json"))


def negotiate_locale(accept_language: Optional[str], default: Optional[str] = None) -> str:
    """Pick a supported locale from an ``Accept-Language`` header.

    Quality values are honoured; region subtags fall back to the primary
    language (``zh-CN`` -> ``zh``).

    Examples:
        >>> negotiate_locale("zh-CN,zh;q=0.9,en;q=0.8")
        'zh'
        >>> negotiate_locale("fr-FR")
        'en'
    """
    fallback = default or get_default_locale()
    if not accept_language:
        return fallback

    supported = available_locales()
    candidates = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality > 0:
            candidates.append((-quality, position, tag))

    for _, _, tag in sorted(candidates):
        if tag in supported:
            return tag
        primary = tag.split("-", 1)[0]
        if primary in supported:
            return primary
    return fallback


_translators: Dict[str, CatalogTranslator] = {}


def get_translator(locale: Optional[str] = None) -> CatalogTranslator:
    """Get cached translator for ``locale`` (default locale when None/unknown).

    Non-default locales fall back to the default catalog for missing keys.
    """
    default = get_default_locale()
    if default not in available_locales():
        default = DEFAULT_LOCALE
    code = (locale or default).lower()
    if code not in available_locales():
        code = default

    if code not in _translators:
        fallback = None if code == default else get_translator(default)
        _translators[code] = CatalogTranslator(code, load_catalog(code), fallback=fallback)
    return _translators[code]


def reset_translators() -> None:
    """Clear the translator cache (for testing purposes)."""
    _translators.clear()
