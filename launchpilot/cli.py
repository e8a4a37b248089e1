"""Click CLI entry point for LaunchPilot."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError

from launchpilot.builder import build_blueprint
from launchpilot.catalog import (
    DEFAULT_HERO_LAYOUT,
    DEFAULT_THEME,
    DEFAULT_TONE,
    HERO_LAYOUTS,
    THEMES,
    TONES,
)
from launchpilot.config import Settings
from launchpilot.exporter import export_filename, export_html
from launchpilot.logging import configure_logging
from launchpilot.models.brief import Brief, parse_features
from launchpilot.models.catalog import HeroLayout

_BRIEF_FIELDS = (
    "product_name",
    "one_liner",
    "audience",
    "problem",
    "solution",
    "differentiator",
    "cta",
)


def _load_brief_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise click.BadParameter(f"cannot read brief: {exc}", param_hint="--brief-file") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("brief must be a JSON object", param_hint="--brief-file")
    return data


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """LaunchPilot: landing pages from a single product brief."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


@cli.command()
def catalog() -> None:
    """List available tones, themes and hero layouts."""
    click.echo("Tones:")
    for tone in TONES:
        marker = " (default)" if tone.id == DEFAULT_TONE.id else ""
        click.echo(f"  {tone.id:<10} {tone.name}: headline accent {tone.headline_modifier!r}{marker}")

    click.echo("\nThemes:")
    for theme in THEMES:
        marker = " (default)" if theme.id == DEFAULT_THEME.id else ""
        colors = " ".join(theme.palette.values())
        click.echo(f"  {theme.id:<10} {theme.name}: {colors}{marker}")

    click.echo("\nHero layouts:")
    for layout in HERO_LAYOUTS:
        marker = " (default)" if layout.id == DEFAULT_HERO_LAYOUT else ""
        click.echo(f"  {layout.id.value:<10} {layout.label}: {layout.description}{marker}")


@cli.command()
@click.option(
    "--brief-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with brief fields; command-line options override it",
)
@click.option("--product-name", default=None, help="Product name")
@click.option("--one-liner", default=None, help="One-line pitch")
@click.option("--audience", default=None, help="Target audience")
@click.option("--problem", default=None, help="Problem statement")
@click.option("--solution", default=None, help="Solution statement")
@click.option("--differentiator", default=None, help="What makes it different")
@click.option("--cta", default=None, help="Call-to-action label")
@click.option("--features", default=None, help="Features, separated by newlines or commas")
@click.option("--tone", "tone_id", default=None, help="Tone id (unknown ids use the default)")
@click.option("--theme", "theme_id", default=None, help="Theme id (unknown ids use the default)")
@click.option(
    "--layout",
    "hero_layout",
    type=click.Choice([layout.value for layout in HeroLayout], case_sensitive=False),
    default=None,
    help="Hero layout",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the exported .html file (default: settings output_dir)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the HTML instead of writing a file")
@click.option("--json", "as_json", is_flag=True, help="Print the blueprint as JSON instead of HTML")
@click.pass_context
def compose(
    ctx: click.Context,
    brief_file: Path | None,
    features: str | None,
    tone_id: str | None,
    theme_id: str | None,
    hero_layout: str | None,
    output_dir: Path | None,
    to_stdout: bool,
    as_json: bool,
    **fields: str | None,
) -> None:
    """Compose a landing page from a brief and export it."""
    settings: Settings = ctx.obj["settings"]

    data = _load_brief_file(brief_file) if brief_file else {}
    data.update({name: value for name, value in fields.items() if value is not None})
    if features is not None:
        data["features"] = parse_features(features)
    allowed = {*_BRIEF_FIELDS, "features"}

    try:
        brief = Brief.model_validate({k: v for k, v in data.items() if k in allowed})
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="--brief-file") from exc

    blueprint = build_blueprint(
        brief,
        settings,
        tone_id=tone_id,
        theme_id=theme_id,
        hero_layout=hero_layout,
    )

    if as_json:
        click.echo(json.dumps(blueprint.model_dump(mode="json"), indent=2))
        return

    document = export_html(blueprint)
    if to_stdout:
        click.echo(document, nl=False)
        return

    target_dir = output_dir or settings.output_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / export_filename(blueprint.product_name)
    target.write_text(document, encoding="utf-8")
    click.echo(f"Wrote {target}")


@cli.command()
@click.option("--host", default=None, help="Bind host (default: settings api_host)")
@click.option("--port", default=None, type=int, help="Bind port (default: settings api_port)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the FastAPI API server."""
    import uvicorn

    settings = ctx.obj["settings"]
    uvicorn.run(
        "launchpilot.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )
