"""Read-only tone, theme and hero layout catalogs."""

from __future__ import annotations

from fastapi import APIRouter

from launchpilot.api.schemas import LayoutListResponse, ThemeListResponse, ToneListResponse
from launchpilot.catalog import (
    DEFAULT_HERO_LAYOUT,
    DEFAULT_THEME,
    DEFAULT_TONE,
    HERO_LAYOUTS,
    THEMES,
    TONES,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/tones", response_model=ToneListResponse)
def list_tones() -> ToneListResponse:
    return ToneListResponse(tones=list(TONES), default_id=DEFAULT_TONE.id)


@router.get("/themes", response_model=ThemeListResponse)
def list_themes() -> ThemeListResponse:
    return ThemeListResponse(themes=list(THEMES), default_id=DEFAULT_THEME.id)


@router.get("/layouts", response_model=LayoutListResponse)
def list_layouts() -> LayoutListResponse:
    return LayoutListResponse(layouts=list(HERO_LAYOUTS), default_id=DEFAULT_HERO_LAYOUT)
