"""Id-based composition used by the CLI and the HTTP API.

Resolves tone, theme and layout ids against the catalogs (request value, then
the configured default, then the catalog default) and hands the resolved
options to the composer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchpilot.catalog import get_hero_layout, get_theme, get_tone
from launchpilot.composer import compose, utcnow

if TYPE_CHECKING:
    from launchpilot.config import Settings
    from launchpilot.models.blueprint import LandingBlueprint
    from launchpilot.models.brief import Brief
    from launchpilot.protocols import ClockPort


def build_blueprint(
    brief: Brief,
    settings: Settings,
    *,
    tone_id: str | None = None,
    theme_id: str | None = None,
    hero_layout: str | None = None,
    clock: ClockPort = utcnow,
) -> LandingBlueprint:
    tone = get_tone(tone_id or settings.default_tone_id)
    theme = get_theme(theme_id or settings.default_theme_id)
    layout = get_hero_layout(hero_layout or settings.default_hero_layout)
    return compose(brief, tone, theme, layout, clock=clock)
