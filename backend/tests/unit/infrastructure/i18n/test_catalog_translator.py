"""Tests for the JSON catalog translator."""

import json

import pytest

from infrastructure.i18n.catalog_translator import (
    LOCALES_DIR,
    CatalogTranslator,
    available_locales,
    get_translator,
    load_catalog,
    negotiate_locale,
)


def test_shipped_catalogs_share_keys():
    """Test every locale defines the same keys."""
    en = load_catalog("en")
    zh = load_catalog("zh")

    assert set(en) == set(zh)
    assert {"common.error", "profile.emailSaved", "profile.emailInvalid"} <= set(en)


def test_available_locales():
    assert {"en", "zh"} <= available_locales()


def test_lookup_order():
    base = CatalogTranslator("en", {"a": "A", "b": "B"})
    zh = CatalogTranslator("zh", {"a": "甲"}, fallback=base)

    assert zh.t("a") == "甲"
    assert zh.t("b") == "B"
    assert zh.t("c") == "c"
    assert zh.locale == "zh"


def test_load_catalog_rejects_nested(tmp_path):
    (tmp_path / "xx.json").write_text(json.dumps({"a": {"b": "c"}}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_catalog("xx", tmp_path)


def test_load_catalog_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog("xx", tmp_path)


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, "en"),
        ("", "en"),
        ("zh", "zh"),
        ("zh-CN,zh;q=0.9,en;q=0.8", "zh"),
        ("fr-FR,en;q=0.5", "en"),
        ("fr-FR,zh;q=0.7,en;q=0.5", "zh"),
        ("en;q=0.2,zh;q=0.8", "zh"),
        ("zh;q=0,en", "en"),
        ("*", "en"),
        ("de", "en"),
    ],
)
def test_negotiate_locale(monkeypatch, header, expected):
    monkeypatch.delenv("DEFAULT_LOCALE", raising=False)
    assert negotiate_locale(header) == expected


def test_get_translator_caches_and_falls_back(monkeypatch):
    monkeypatch.delenv("DEFAULT_LOCALE", raising=False)

    en = get_translator("en")
    assert get_translator("EN") is en
    assert get_translator(None) is en
    assert get_translator("fr") is en

    zh = get_translator("zh")
    assert zh.locale == "zh"
    assert zh.t("common.error") != "common.error"


def test_unknown_default_locale_uses_english(monkeypatch):
    monkeypatch.setenv("DEFAULT_LOCALE", "tlh")

    assert get_translator().locale == "en"


def test_locales_dir_exists():
    assert (LOCALES_DIR / "en.json").is_file()
