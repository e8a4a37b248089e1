"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from launchpilot.config import Settings
from launchpilot.protocols import ClockPort


def _get_settings(request: Request) -> Settings:
    """Get the settings instance from app state."""
    return request.app.state.settings  # type: ignore[no-any-return]


def _get_clock(request: Request) -> ClockPort:
    """Get the composition clock from app state (overridable in tests)."""
    return request.app.state.clock  # type: ignore[no-any-return]


SettingsDep = Annotated[Settings, Depends(_get_settings)]
ClockDep = Annotated[ClockPort, Depends(_get_clock)]
