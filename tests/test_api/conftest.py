"""FastAPI test client fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from launchpilot.api.app import create_app

if TYPE_CHECKING:
    from launchpilot.config import Settings


@pytest.fixture()
def client(settings: Settings, clock) -> TestClient:
    """Client without lifespan so tests keep their own logging setup."""
    return TestClient(create_app(settings, clock=clock))


@pytest.fixture()
def compose_payload() -> dict:
    return {
        "product_name": "Acme",
        "one_liner": "Dashboards your ops team will actually open.",
        "audience": "ops leads",
        "problem": "Metrics live in ten tabs.",
        "solution": "Acme pulls them into one view.",
        "differentiator": "Zero setup.",
        "cta": "Try Acme",
        "features_text": "Fast sync, Offline mode\nRealtime alerts",
        "tone_id": "technical",
        "theme_id": "aurora",
        "hero_layout": "left",
    }
