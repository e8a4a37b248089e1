"""The composed landing page description consumed by renderers and the exporter."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from launchpilot.models.catalog import HeroLayout, check_palette


class SectionId(StrEnum):
    PROBLEM = "problem"
    SOLUTION = "solution"
    FEATURES = "features"
    PROOF = "proof"
    CTA = "cta"


SECTION_ORDER: tuple[SectionId, ...] = tuple(SectionId)


class Stat(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class SectionItem(BaseModel):
    """A card inside a section grid."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class Section(BaseModel):
    """One content block below the hero.

    Sections with ``items`` render as a card grid; sections without items
    render the primary call-to-action button instead.
    """

    model_config = ConfigDict(frozen=True)

    id: SectionId
    label: str
    headline: str
    body: str
    items: list[SectionItem] | None = None


class Hero(BaseModel):
    model_config = ConfigDict(frozen=True)

    eyebrow: str
    title: str
    subtitle: str
    primary_cta: str
    secondary_cta: str
    stats: list[Stat] = Field(default_factory=list)


class LandingBlueprint(BaseModel):
    """Fully composed page: hero, ordered sections and resolved styling."""

    model_config = ConfigDict(frozen=True)

    product_name: str
    hero: Hero
    sections: list[Section]
    palette: dict[str, str]
    gradient: str
    hero_layout: HeroLayout
    generated_at: datetime

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: dict[str, str]) -> dict[str, str]:
        return check_palette(v)

    def section(self, section_id: SectionId | str) -> Section:
        """Return the section with the given id."""
        for section in self.sections:
            if section.id == section_id:
                return section
        raise KeyError(section_id)
