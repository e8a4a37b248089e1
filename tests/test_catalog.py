"""Tests for the static tone, theme and layout catalogs."""

from __future__ import annotations

import pytest

from launchpilot.catalog import (
    DEFAULT_HERO_LAYOUT,
    DEFAULT_THEME,
    DEFAULT_TONE,
    HERO_LAYOUTS,
    THEMES,
    TONES,
    get_hero_layout,
    get_theme,
    get_tone,
)
from launchpilot.models.catalog import HeroLayout


class TestCatalogDefinitions:
    def test_tone_ids_unique(self):
        ids = [tone.id for tone in TONES]
        assert len(ids) == len(set(ids))

    def test_theme_ids_unique(self):
        ids = [theme.id for theme in THEMES]
        assert len(ids) == len(set(ids))

    def test_default_tone_is_first(self):
        assert DEFAULT_TONE is TONES[0]

    def test_default_theme_is_second(self):
        assert DEFAULT_THEME is THEMES[1]

    def test_palettes_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_THEME.palette["text"] = "#ffffff"
        assert get_theme("nope").palette["text"] == "#111827"

    def test_palette_dumps_as_plain_dict(self):
        assert DEFAULT_THEME.model_dump()["palette"] == {
            "primary": "#0f172a",
            "accent": "#1e3a8a",
            "highlight": "#6d28d9",
            "surface": "#e2e8f0",
            "text": "#111827",
        }

    def test_every_palette_has_required_roles(self):
        for theme in THEMES:
            assert "text" in theme.palette
            assert "surface" in theme.palette

    def test_every_tone_has_modifier(self):
        for tone in TONES:
            assert tone.headline_modifier.strip()

    def test_layouts_cover_every_variant(self):
        assert [option.id for option in HERO_LAYOUTS] == list(HeroLayout)
        assert DEFAULT_HERO_LAYOUT == HeroLayout.SPLIT

    def test_tone_is_frozen(self):
        with pytest.raises(Exception):  # noqa: B017
            DEFAULT_TONE.name = "Modified"  # type: ignore[misc]


class TestResolution:
    def test_known_tone(self):
        assert get_tone("technical").name == "Technical"

    def test_unknown_tone_falls_back_to_first(self):
        assert get_tone("sarcastic") is TONES[0]

    def test_missing_tone_falls_back_to_first(self):
        assert get_tone(None) is TONES[0]
        assert get_tone("") is TONES[0]

    def test_known_theme(self):
        assert get_theme("sunrise").palette["text"] == "#1c1917"

    def test_unknown_theme_falls_back_to_second(self):
        assert get_theme("neon") is THEMES[1]

    def test_layout_resolution(self):
        assert get_hero_layout("center") is HeroLayout.CENTER
        assert get_hero_layout("diagonal") is HeroLayout.SPLIT
        assert get_hero_layout(None) is HeroLayout.SPLIT
