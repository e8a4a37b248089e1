"""API request/response schemas (separate from domain models)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from launchpilot.models.brief import Brief, parse_features
from launchpilot.models.catalog import HeroLayout, HeroLayoutOption, ThemeOption, ToneOption

# --- Responses ---


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    version: str


class ToneListResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    tones: list[ToneOption]
    default_id: str


class ThemeListResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    themes: list[ThemeOption]
    default_id: str


class LayoutListResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    layouts: list[HeroLayoutOption]
    default_id: HeroLayout


# --- Requests ---


class ComposeRequest(BaseModel):
    """Brief fields plus preset selections.

    Features may arrive as a list or as raw ``features_text`` (newline or
    comma separated); the list wins when both are given.
    """

    model_config = ConfigDict(frozen=True)

    product_name: str = ""
    one_liner: str = ""
    audience: str = ""
    problem: str = ""
    solution: str = ""
    differentiator: str = ""
    cta: str = ""
    features: list[str] | None = None
    features_text: str = ""

    tone_id: str = ""
    theme_id: str = ""
    hero_layout: HeroLayout | None = Field(
        default=None, description="split, center or left; omitted -> configured default"
    )

    def to_brief(self) -> Brief:
        features = self.features if self.features is not None else parse_features(self.features_text)
        return Brief(
            product_name=self.product_name,
            one_liner=self.one_liner,
            audience=self.audience,
            problem=self.problem,
            solution=self.solution,
            differentiator=self.differentiator,
            cta=self.cta,
            features=features,
        )
