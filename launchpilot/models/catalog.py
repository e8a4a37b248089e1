"""Catalog entry models: tones, themes and hero layouts."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

REQUIRED_PALETTE_ROLES = ("text", "surface")

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def check_palette(palette: Mapping[str, str]) -> Mapping[str, str]:
    """Validate a role -> color mapping; shared by themes and blueprints."""
    missing = [role for role in REQUIRED_PALETTE_ROLES if role not in palette]
    if missing:
        raise ValueError(f"Palette is missing required roles: {', '.join(missing)}")
    for role, color in palette.items():
        if not _HEX_COLOR.match(color):
            raise ValueError(f"Palette role {role!r} has invalid color {color!r}")
    return palette


class HeroLayout(StrEnum):
    SPLIT = "split"
    CENTER = "center"
    LEFT = "left"


class ModifierPlacement(StrEnum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


class ToneOption(BaseModel):
    """A named phrasing preset applied to the hero headline."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    headline_modifier: str = Field(description="Short phrase woven into the hero title")
    placement: ModifierPlacement = ModifierPlacement.PREFIX


class ThemeOption(BaseModel):
    """A named color preset; the palette feeds the blueprint and its gradient.

    Themes are shared catalog constants, so the palette is stored as a
    read-only mapping. Compositions take their own ``dict`` copy.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    palette: Mapping[str, str] = Field(description="Color role -> hex color")

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(check_palette(v)))

    @field_serializer("palette")
    def serialize_palette(self, palette: Mapping[str, str]) -> dict[str, str]:
        return dict(palette)


class HeroLayoutOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: HeroLayout
    label: str
    description: str
