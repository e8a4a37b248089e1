"""Re-exports all Pydantic models."""

from launchpilot.models.blueprint import (
    SECTION_ORDER,
    Hero,
    LandingBlueprint,
    Section,
    SectionId,
    SectionItem,
    Stat,
)
from launchpilot.models.brief import Brief, parse_features
from launchpilot.models.catalog import (
    HeroLayout,
    HeroLayoutOption,
    ModifierPlacement,
    ThemeOption,
    ToneOption,
)

__all__ = [
    "SECTION_ORDER",
    "Brief",
    "Hero",
    "HeroLayout",
    "HeroLayoutOption",
    "LandingBlueprint",
    "ModifierPlacement",
    "Section",
    "SectionId",
    "SectionItem",
    "Stat",
    "ThemeOption",
    "ToneOption",
    "parse_features",
]
