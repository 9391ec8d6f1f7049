"""Tests for showdeck.core.theme — themes and environment-driven settings."""

import os

import pytest
from pydantic import ValidationError
from unittest.mock import patch

from showdeck.core.theme import BUILTIN_THEMES, DEFAULT_THEME, ShowSettings, Theme, get_theme


class TestTheme:
    def test_builtins(self):
        assert set(BUILTIN_THEMES) == {"dark", "light"}
        assert get_theme(DEFAULT_THEME).name == "dark"
        assert get_theme("nope") is None

    def test_colors_normalized(self):
        theme = Theme(name="t", primary="#abcdef")
        assert theme.primary == "#ABCDEF"

    def test_invalid_color(self):
        with pytest.raises(ValidationError):
            Theme(name="t", surface="blue")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BUILTIN_THEMES["dark"].primary = "#000000"

    def test_unknown_code_style(self):
        with pytest.raises(ValidationError):
            Theme(name="t", code_style="no-such-style")


class TestShowSettings:
    def test_defaults(self):
        s = ShowSettings()
        assert s.theme == "dark"
        assert (s.width, s.height) == (100, 30)

    def test_unknown_theme(self):
        with pytest.raises(ValidationError):
            ShowSettings(theme="neon")

    def test_viewport_minimums(self):
        with pytest.raises(ValidationError):
            ShowSettings(width=2)

    @patch.dict(os.environ, {
        "SHOWDECK_THEME": "light",
        "SHOWDECK_WIDTH": "120",
        "SHOWDECK_HEIGHT": "40",
    })
    def test_from_env(self):
        s = ShowSettings.from_env()
        assert s.theme == "light"
        assert (s.width, s.height) == (120, 40)

    @patch.dict(os.environ, {"SHOWDECK_THEME": "light"})
    def test_overrides_win_and_none_is_ignored(self):
        assert ShowSettings.from_env(theme="dark").theme == "dark"
        assert ShowSettings.from_env(theme=None, width=None).theme == "light"

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_without_variables(self):
        assert ShowSettings.from_env() == ShowSettings()

    def test_resolve_theme(self):
        assert ShowSettings(theme="light").resolve_theme() is BUILTIN_THEMES["light"]

    def test_unknown_code_style(self):
        with pytest.raises(ValidationError):
            ShowSettings(code_style="no-such-style")

    @patch.dict(os.environ, {"SHOWDECK_CODE_STYLE": "no-such-style"})
    def test_unknown_code_style_from_env(self):
        with pytest.raises(ValidationError):
            ShowSettings.from_env()

    def test_code_style_override(self):
        theme = ShowSettings(code_style="default").resolve_theme()
        assert theme.code_style == "default"
        assert theme.primary == BUILTIN_THEMES["dark"].primary
