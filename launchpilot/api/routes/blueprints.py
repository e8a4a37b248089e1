"""Compose and export endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response

from launchpilot.api.deps import ClockDep, SettingsDep
from launchpilot.api.schemas import ComposeRequest
from launchpilot.builder import build_blueprint
from launchpilot.exporter import export_filename, export_html
from launchpilot.models.blueprint import LandingBlueprint

router = APIRouter(tags=["blueprints"])

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def _compose(request: ComposeRequest, settings: SettingsDep, clock: ClockDep) -> LandingBlueprint:
    return build_blueprint(
        request.to_brief(),
        settings,
        tone_id=request.tone_id,
        theme_id=request.theme_id,
        hero_layout=request.hero_layout,
        clock=clock,
    )


def _html_attachment(blueprint: LandingBlueprint) -> Response:
    filename = export_filename(blueprint.product_name)
    return Response(
        content=export_html(blueprint),
        media_type=HTML_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/blueprints", response_model=LandingBlueprint)
def create_blueprint(
    request: ComposeRequest,
    settings: SettingsDep,
    clock: ClockDep,
) -> LandingBlueprint:
    return _compose(request, settings, clock)


@router.post("/exports", response_class=Response)
def export_brief(
    request: ComposeRequest,
    settings: SettingsDep,
    clock: ClockDep,
) -> Response:
    """Compose a brief and return the page as a downloadable HTML file."""
    return _html_attachment(_compose(request, settings, clock))


@router.post("/exports/render", response_class=Response)
def render_blueprint(blueprint: LandingBlueprint) -> Response:
    """Export an already composed blueprint."""
    return _html_attachment(blueprint)
