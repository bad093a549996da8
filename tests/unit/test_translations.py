# tests/unit/test_translations.py

from utils.translations import TRANSLATIONS, normalize_lang, t


def test_unknown_language_falls_back_to_english():
    assert normalize_lang("ro") == "en"
    assert t("submit.failed", "xx") == "Submission failed"


def test_unknown_key_returns_key():
    assert t("nope.missing") == "nope.missing"


def test_bundles_have_the_same_keys():
    assert set(TRANSLATIONS["es"]) == set(TRANSLATIONS["en"])
