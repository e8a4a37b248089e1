"""Tests for Prometheus metrics definitions and instrumentation."""

from __future__ import annotations

from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from launchpilot.catalog import DEFAULT_THEME, DEFAULT_TONE, get_theme, get_tone
from launchpilot.composer import compose
from launchpilot.exporter import export_html
from launchpilot.metrics import (
    catalog_fallbacks_total,
    compositions_total,
    export_bytes,
    exports_total,
    placeholder_features_total,
)
from launchpilot.models.brief import Brief
from launchpilot.models.catalog import HeroLayout


class TestMetricDefinitions:
    """Counter._name strips '_total'; exported samples re-add it."""

    def test_compositions_counter(self):
        assert compositions_total._name == "launchpilot_compositions"
        assert compositions_total._labelnames == ("tone_id", "theme_id", "hero_layout")

    def test_placeholder_features_counter(self):
        assert placeholder_features_total._name == "launchpilot_placeholder_features"

    def test_catalog_fallbacks_counter(self):
        assert catalog_fallbacks_total._name == "launchpilot_catalog_fallbacks"
        assert "catalog" in catalog_fallbacks_total._labelnames

    def test_exports_counter(self):
        assert exports_total._name == "launchpilot_exports"
        assert "hero_layout" in exports_total._labelnames

    def test_export_bytes_histogram(self):
        assert export_bytes._name == "launchpilot_export_bytes"


class TestMetricsEndpoint:
    def test_metrics_endpoint(self, settings):
        from launchpilot.api.app import create_app

        client = TestClient(create_app(settings))
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers.get("content-type", "")
        assert "launchpilot_compositions_total" in response.text
        assert "launchpilot_export_bytes" in response.text


class TestInstrumentation:
    def test_compose_increments_counter(self, clock):
        labels = {"tone_id": DEFAULT_TONE.id, "theme_id": DEFAULT_THEME.id, "hero_layout": "left"}
        before = _get_counter_value("launchpilot_compositions", labels)
        compose(Brief(), DEFAULT_TONE, DEFAULT_THEME, HeroLayout.LEFT, clock=clock)
        assert _get_counter_value("launchpilot_compositions", labels) - before == 1

    def test_placeholder_features_counted(self, clock):
        before = _get_counter_value("launchpilot_placeholder_features", {})
        compose(Brief(features=["Real"]), DEFAULT_TONE, DEFAULT_THEME, "split", clock=clock)
        compose(Brief(), DEFAULT_TONE, DEFAULT_THEME, "split", clock=clock)
        assert _get_counter_value("launchpilot_placeholder_features", {}) - before == 1

    def test_catalog_fallback_counted(self):
        before_tone = _get_counter_value("launchpilot_catalog_fallbacks", {"catalog": "tone"})
        before_theme = _get_counter_value("launchpilot_catalog_fallbacks", {"catalog": "theme"})
        get_tone("nope")
        get_tone(DEFAULT_TONE.id)
        get_theme("nope")
        assert _get_counter_value("launchpilot_catalog_fallbacks", {"catalog": "tone"}) - before_tone == 1
        assert (
            _get_counter_value("launchpilot_catalog_fallbacks", {"catalog": "theme"}) - before_theme
            == 1
        )

    def test_export_increments_counter(self, blueprint):
        labels = {"hero_layout": blueprint.hero_layout.value}
        before = _get_counter_value("launchpilot_exports", labels)
        export_html(blueprint)
        assert _get_counter_value("launchpilot_exports", labels) - before == 1


# --- Helpers ---


def _get_counter_value(metric_name: str, labels: dict[str, str]) -> float:
    """Read the current value of a Prometheus counter from the default registry.

    For counters, metric.name == base name (without _total),
    but sample.name == base_name + "_total".
    """
    for metric in REGISTRY.collect():
        if metric.name == metric_name:
            for sample in metric.samples:
                if sample.name == f"{metric_name}_total" and sample.labels == labels:
                    return sample.value
    return 0.0
