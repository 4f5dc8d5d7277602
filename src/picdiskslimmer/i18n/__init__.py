"""Internationalization (i18n) module for PicDiskSlimmer."""

import json
import locale
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# Codes with a <code>.json file beside this module
LANGUAGES = ("en", "sv")


class Translator:
    """Dialog strings loaded from a JSON file per language."""

    _translations: dict = {}
    _language: str = ""
    _initialized: bool = False

    @classmethod
    def initialize(cls, language: str) -> None:
        """Load the strings for a language, falling back to English.

        Args:
            language: Language code ("en" or "sv")
        """
        if cls._language == language and cls._initialized:
            return

        cls._translations = {}
        cls._initialized = False

        candidates = [language] if language == DEFAULT_LANGUAGE else [language, DEFAULT_LANGUAGE]
        for code in candidates:
            lang_file = Path(__file__).parent / f"{code}.json"
            try:
                with open(lang_file, "r", encoding="utf-8") as f:
                    cls._translations = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Could not load translations for '{code}': {e}")
                continue

            cls._language = code
            cls._initialized = True
            logger.info(f"Loaded translations for '{code}'")
            return

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string, or the key itself if there is none."""
        if not cls._initialized:
            return key

        text = cls._translations.get(key, key)
        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return text


def _(key: str, **kwargs) -> str:
    """Shortcut for Translator.get."""
    return Translator.get(key, **kwargs)


def init_translator(language: Optional[str] = None) -> None:
    """Initialize the translator.

    Args:
        language: Language code (detected from the system locale if None)
    """
    Translator.initialize(language or detect_language())


def detect_language() -> str:
    """Pick a supported language from the system locale."""
    try:
        code = locale.getlocale()[0] or ""
    except ValueError:
        code = ""

    for lang in LANGUAGES:
        if code.lower().startswith(lang):
            return lang
    return DEFAULT_LANGUAGE
