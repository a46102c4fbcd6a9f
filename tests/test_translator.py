import logging

import pytest

from app.translator import KeyResolver, interpolate


@pytest.fixture
def lang():
    return {"value": "it"}


@pytest.fixture
def resolver(catalog, lang):
    return KeyResolver(catalog, lambda: lang["value"], debug=True)


def test_active_language_wins(resolver, lang):
    assert resolver.translate("nav.home") == "Home"
    lang["value"] = "ar"
    assert resolver.translate("nav.home") == "الرئيسية"


def test_falls_back_to_italian_when_arabic_missing(resolver, lang):
    lang["value"] = "ar"
    assert resolver.translate("only_it") == "Solo italiano"


def test_falls_back_to_arabic_when_italian_missing(resolver):
    assert resolver.translate("only_ar") == "عربي فقط"


def test_non_string_leaf_uses_other_tree(resolver, lang):
    assert resolver.translate("mixed.leaf") == "ورقة"
    lang["value"] = "ar"
    assert resolver.translate("mixed") == "not a tree here"


@pytest.mark.parametrize("key", ["nope", "nav.nope", "nav", "a.b.c.d", "", "nav..home"])
@pytest.mark.parametrize("active", ["ar", "it"])
def test_missing_everywhere_is_empty_never_the_key(catalog, key, active):
    resolver = KeyResolver(catalog, lambda: active)
    assert resolver.translate(key) == ""


def test_missing_key_logged_once_in_debug(resolver, caplog):
    with caplog.at_level(logging.WARNING, logger="app.translator"):
        resolver.translate("ghost.key")
        resolver.translate("ghost.key")
    assert caplog.text.count('Missing key: "ghost.key"') == 1


def test_missing_key_silent_outside_debug(catalog, caplog):
    resolver = KeyResolver(catalog, lambda: "it", debug=False)
    with caplog.at_level(logging.DEBUG, logger="app.translator"):
        assert resolver("ghost.key") == ""
    assert caplog.records == []


def test_interpolation_keeps_unknown_tokens(resolver):
    assert resolver.translate("pair", {"a": 1}) == "1 and {{b}}"


def test_interpolation_fills_numbers(resolver, lang):
    lang["value"] = "ar"
    assert resolver.translate("quiz.question_count", {"current": 3, "total": 10}) == "سؤال 3 من 10"


def test_interpolate_without_vars_is_identity():
    assert interpolate("{{a}}") == "{{a}}"
    assert interpolate("", {"a": 1}) == ""
    assert interpolate("{{ a }} {{a}}", {"a": "x"}) == "{{ a }} x"
