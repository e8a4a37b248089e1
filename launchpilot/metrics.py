"""Prometheus metric definitions for LaunchPilot."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# --- Composition ---

compositions_total = Counter(
    "launchpilot_compositions_total",
    "Total blueprints composed",
    labelnames=["tone_id", "theme_id", "hero_layout"],
)

placeholder_features_total = Counter(
    "launchpilot_placeholder_features_total",
    "Compositions that substituted placeholder features for an empty list",
)

# --- Catalog ---

catalog_fallbacks_total = Counter(
    "launchpilot_catalog_fallbacks_total",
    "Catalog lookups that resolved to the default entry",
    labelnames=["catalog"],
)

# --- Export ---

exports_total = Counter(
    "launchpilot_exports_total",
    "Total HTML documents exported",
    labelnames=["hero_layout"],
)

export_bytes = Histogram(
    "launchpilot_export_bytes",
    "Size of exported HTML documents in bytes (UTF-8)",
    buckets=(2_000, 5_000, 10_000, 20_000, 50_000, 100_000),
)
