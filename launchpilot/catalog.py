"""Static tone, theme and hero layout catalogs.

Each catalog is an ordered tuple of frozen models built once at import time.
Lookups by id never fail: unknown ids resolve to the catalog's default entry
(first tone, second theme, first layout).
"""

from __future__ import annotations

import structlog

from launchpilot.metrics import catalog_fallbacks_total
from launchpilot.models.catalog import (
    HeroLayout,
    HeroLayoutOption,
    ModifierPlacement,
    ThemeOption,
    ToneOption,
)

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Tones
# ---------------------------------------------------------------------------

CONFIDENT_TONE = ToneOption(
    id="confident",
    name="Confident",
    headline_modifier="Finally,",
    placement=ModifierPlacement.PREFIX,
)

PLAYFUL_TONE = ToneOption(
    id="playful",
    name="Playful",
    headline_modifier="(and yes, it's fun)",
    placement=ModifierPlacement.SUFFIX,
)

TECHNICAL_TONE = ToneOption(
    id="technical",
    name="Technical",
    headline_modifier="Engineered for precision:",
    placement=ModifierPlacement.PREFIX,
)

URGENT_TONE = ToneOption(
    id="urgent",
    name="Urgent",
    headline_modifier="Start today.",
    placement=ModifierPlacement.SUFFIX,
)

TONES: tuple[ToneOption, ...] = (CONFIDENT_TONE, PLAYFUL_TONE, TECHNICAL_TONE, URGENT_TONE)

DEFAULT_TONE = TONES[0]


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

AURORA_THEME = ThemeOption(
    id="aurora",
    name="Aurora",
    palette={
        "primary": "#6366f1",
        "accent": "#22d3ee",
        "highlight": "#a855f7",
        "surface": "#f8fafc",
        "text": "#0f172a",
    },
)

MIDNIGHT_THEME = ThemeOption(
    id="midnight",
    name="Midnight",
    palette={
        "primary": "#0f172a",
        "accent": "#1e3a8a",
        "highlight": "#6d28d9",
        "surface": "#e2e8f0",
        "text": "#111827",
    },
)

SUNRISE_THEME = ThemeOption(
    id="sunrise",
    name="Sunrise",
    palette={
        "primary": "#fde68a",
        "accent": "#fb923c",
        "highlight": "#f472b6",
        "surface": "#fff7ed",
        "text": "#1c1917",
    },
)

MEADOW_THEME = ThemeOption(
    id="meadow",
    name="Meadow",
    palette={
        "primary": "#a7f3d0",
        "accent": "#6ee7b7",
        "highlight": "#fef9c3",
        "surface": "#ecfdf5",
        "text": "#064e3b",
    },
)

THEMES: tuple[ThemeOption, ...] = (AURORA_THEME, MIDNIGHT_THEME, SUNRISE_THEME, MEADOW_THEME)

DEFAULT_THEME = THEMES[1]


# ---------------------------------------------------------------------------
# Hero layouts
# ---------------------------------------------------------------------------

HERO_LAYOUTS: tuple[HeroLayoutOption, ...] = (
    HeroLayoutOption(
        id=HeroLayout.SPLIT,
        label="Split",
        description="Visual stats on the right, story on the left",
    ),
    HeroLayoutOption(
        id=HeroLayout.CENTER,
        label="Centered",
        description="Big headline centered, stacked call-to-actions",
    ),
    HeroLayoutOption(
        id=HeroLayout.LEFT,
        label="Left",
        description="All content aligned left for productivity brands",
    ),
)

DEFAULT_HERO_LAYOUT = HERO_LAYOUTS[0].id


def _fallback(catalog: str, requested: str | None, default_id: str) -> None:
    if requested:
        logger.warning(
            "Unknown catalog id, using default",
            catalog=catalog,
            requested=requested,
            default=default_id,
        )
    catalog_fallbacks_total.labels(catalog=catalog).inc()


def get_tone(tone_id: str | None) -> ToneOption:
    """Resolve a tone by id, falling back to the first tone."""
    for tone in TONES:
        if tone.id == tone_id:
            return tone
    _fallback("tone", tone_id, DEFAULT_TONE.id)
    return DEFAULT_TONE


def get_theme(theme_id: str | None) -> ThemeOption:
    """Resolve a theme by id, falling back to the second theme."""
    for theme in THEMES:
        if theme.id == theme_id:
            return theme
    _fallback("theme", theme_id, DEFAULT_THEME.id)
    return DEFAULT_THEME


def get_hero_layout(layout_id: str | None) -> HeroLayout:
    """Resolve a hero layout by id, falling back to ``split``."""
    for option in HERO_LAYOUTS:
        if option.id == layout_id:
            return option.id
    _fallback("hero_layout", layout_id, DEFAULT_HERO_LAYOUT)
    return DEFAULT_HERO_LAYOUT
