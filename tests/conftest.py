"""Shared test fixtures."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest
import structlog

from launchpilot.catalog import DEFAULT_THEME, DEFAULT_TONE
from launchpilot.composer import compose
from launchpilot.config import Settings
from launchpilot.models.blueprint import LandingBlueprint
from launchpilot.models.brief import Brief
from launchpilot.models.catalog import HeroLayout

FIXED_TIME = datetime(2025, 3, 14, 9, 26, 53, tzinfo=UTC)


def _fixed_clock() -> datetime:
    return FIXED_TIME


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        default_tone_id="",
        default_theme_id="",
        default_hero_layout=HeroLayout.SPLIT,
        output_dir=tmp_path / "exports",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def brief() -> Brief:
    return Brief(
        product_name="LaunchPilot",
        one_liner="An AI teammate that drafts high-impact landing pages in under 60 seconds.",
        audience="growth teams and indie founders",
        problem="Your launches stall while you wrangle copywriters, designers, and approvals.",
        solution=(
            "LaunchPilot assembles narrative, layout, and copy automatically "
            "based on a single product brief."
        ),
        differentiator=(
            "It reasons about your audience and positioning, producing on-brand pages "
            "that convert like your best marketer wrote them."
        ),
        cta="Generate my launch page",
        features=[
            "Audience-tuned hero copy that sounds like your brand",
            "Feature blocks that explain the value, not just the features",
            "Proof sections with metrics, quotes, and visuals",
            "Exportable HTML, React, and Notion-friendly versions",
        ],
    )


@pytest.fixture()
def blueprint(brief: Brief) -> LandingBlueprint:
    return compose(brief, DEFAULT_TONE, DEFAULT_THEME, HeroLayout.SPLIT, clock=_fixed_clock)


@pytest.fixture()
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture()
def clock():
    return _fixed_clock


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop logging config bound to streams that a test (e.g. CliRunner) has closed."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
