import json
import locale
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_translator():
    from picdiskslimmer.i18n import Translator

    Translator._translations = {}
    Translator._language = ""
    Translator._initialized = False
    yield
    Translator._translations = {}
    Translator._language = ""
    Translator._initialized = False


def test_uninitialized_translator_returns_key():
    from picdiskslimmer.i18n import _

    assert _("save") == "save"


def test_translations_load_and_format():
    from picdiskslimmer.i18n import Translator, _, init_translator

    init_translator("sv")
    assert Translator._language == "sv"
    assert _("save") == "Spara"
    assert _("quality_value", value=70) == "70%"
    assert _("missing_key") == "missing_key"


def test_unknown_language_falls_back_to_english():
    from picdiskslimmer.i18n import Translator, _, init_translator

    init_translator("xx")
    assert Translator._language == "en"
    assert _("save") == "Save"


@pytest.mark.parametrize("code, expected", [("sv_SE", "sv"), ("en_US", "en"), ("de_DE", "en"), (None, "en")])
def test_detect_language_from_locale(monkeypatch, code, expected):
    from picdiskslimmer.i18n import detect_language

    monkeypatch.setattr(locale, "getlocale", lambda *args: (code, "UTF-8"))
    assert detect_language() == expected


def test_translation_files_share_keys():
    import picdiskslimmer.i18n as i18n

    i18n_dir = Path(i18n.__file__).parent
    keys = {}
    for code in i18n.LANGUAGES:
        with open(i18n_dir / f"{code}.json", "r", encoding="utf-8") as f:
            keys[code] = set(json.load(f))

    assert keys["en"] == keys["sv"]
