"""Tests for the static theme catalog."""

import pytest
from pydantic import ValidationError

from theme_catalog import DEFAULT_THEME, THEMES, get_theme, list_themes

EXPECTED_ORDER = [
    "zen_modern",
    "carbon",
    "serika_dark",
    "miami",
    "dracula",
    "nord",
    "gruvbox_dark",
    "one_dark",
    "tokyo_night",
    "botanical",
    "retro",
    "matrix",
]


def test_names_are_unique():
    names = [theme.name for theme in THEMES]
    assert len(names) == len(set(names))


def test_enumeration_follows_declaration_order():
    assert [theme.name for theme in list_themes()] == EXPECTED_ORDER
    assert [theme.name for theme in list_themes()] == [theme.name for theme in list_themes()]


def test_default_is_first_entry():
    assert DEFAULT_THEME is THEMES[0]
    assert DEFAULT_THEME.name == "zen_modern"


@pytest.mark.parametrize("name", EXPECTED_ORDER)
def test_lookup_returns_matching_entry(name):
    theme = get_theme(name)
    assert theme is not None
    assert theme.name == name


def test_lookup_unknown_name_returns_none():
    assert get_theme("solarized") is None
    assert get_theme("") is None


def test_colors_applied_verbatim():
    carbon = get_theme("carbon")
    assert carbon.label == "Carbon"
    assert carbon.colors.model_dump() == {
        "bg": "49 49 49",
        "main": "246 109 0",
        "sub": "97 97 97",
        "text": "245 229 200",
        "error": "235 69 95",
    }


def test_every_color_is_a_triple():
    for theme in THEMES:
        for value in theme.colors.model_dump().values():
            assert len(value.split(" ")) == 3


def test_catalog_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_THEME.name = "changed"
    mutable_copy = list_themes()
    mutable_copy.clear()
    assert len(THEMES) == len(EXPECTED_ORDER)
