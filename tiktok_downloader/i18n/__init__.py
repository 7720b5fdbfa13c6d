import json
import logging
import os
from typing import Any, Dict, Iterable, Optional
from tiktok_downloader.config.settings import config

logger = logging.getLogger(__name__)

LOCALES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "locales")


def _lookup(messages: Dict[str, Any], key: str) -> Optional[str]:
    """Walk a dotted key ("error.invalid_tiktok_url") through nested messages"""
    value: Any = messages
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value if isinstance(value, str) else None


class I18n:
    """User-facing messages for the configured locales"""

    def __init__(self, locales: Iterable[str], default_locale: str, locales_dir: str = LOCALES_DIR):
        self.default_locale = default_locale
        self.messages: Dict[str, Dict[str, Any]] = {}
        for locale in dict.fromkeys([default_locale, *locales]):
            self.messages[locale] = self._load(locales_dir, locale)

    @staticmethod
    def _load(locales_dir: str, locale: str) -> Dict[str, Any]:
        path = os.path.join(locales_dir, f"{locale}.json")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Locale {locale} unavailable at {path}: {e}")
            return {}

    def get(self, key: str, locale: Optional[str] = None, **kwargs) -> str:
        """Message for `key` in `locale`, else the default locale, else the key itself"""
        text = _lookup(self.messages.get(locale or self.default_locale, {}), key)
        if text is None:
            text = _lookup(self.messages[self.default_locale], key) or key

        try:
            return text.format(**kwargs)
        except KeyError:
            return text


i18n = I18n(config.i18n.supported_locales, config.i18n.default_locale)
