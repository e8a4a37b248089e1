"""Tests for catalog API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchpilot.catalog import THEMES, TONES

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class TestCatalogEndpoints:
    def test_tones(self, client: TestClient):
        data = client.get("/api/v1/catalog/tones").json()
        assert [tone["id"] for tone in data["tones"]] == [tone.id for tone in TONES]
        assert data["default_id"] == TONES[0].id
        assert data["tones"][0]["headline_modifier"] == TONES[0].headline_modifier

    def test_themes(self, client: TestClient):
        data = client.get("/api/v1/catalog/themes").json()
        assert [theme["id"] for theme in data["themes"]] == [theme.id for theme in THEMES]
        assert data["default_id"] == THEMES[1].id
        assert data["themes"][0]["palette"] == THEMES[0].palette

    def test_layouts(self, client: TestClient):
        data = client.get("/api/v1/catalog/layouts").json()
        assert [layout["id"] for layout in data["layouts"]] == ["split", "center", "left"]
        assert data["default_id"] == "split"
        assert data["layouts"][1]["label"] == "Centered"
