"""Static HTML export: LandingBlueprint -> self-contained HTML5 document.

The document has a single embedded ``<style>`` block with static rules; every
palette-dependent value is written into inline ``style`` attributes. No
scripts and no external resources are referenced. All blueprint text passes
through ``html.escape`` before it reaches markup.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING

import structlog

from launchpilot.metrics import export_bytes, exports_total
from launchpilot.models.catalog import HeroLayout

if TYPE_CHECKING:
    from launchpilot.models.blueprint import Hero, LandingBlueprint, Section, Stat

logger = structlog.get_logger()

HELPER_TEXT = "Need a custom export? Ask the agent in chat."

# Themes whose body text is one of these are light; their hero needs dark text.
_LIGHT_THEME_TEXT_COLORS = frozenset({"#1c1917", "#064e3b"})
DARK_HERO_TEXT = "#0f172a"
LIGHT_HERO_TEXT = "#f8fafc"

_STYLE = """
*{box-sizing:border-box}
body{margin:0;font-family:Inter,system-ui,-apple-system,"Segoe UI",Roboto,sans-serif;line-height:1.5}
a{text-decoration:none}
.hero{padding:80px 48px}
.hero-inner{max-width:1040px;margin:0 auto;display:flex;flex-direction:column;gap:48px}
.hero--split .hero-inner{flex-direction:row;align-items:center;justify-content:space-between}
.hero--center{text-align:center}
.hero--center .hero-inner{align-items:center}
.hero--left .hero-inner{align-items:flex-start;text-align:left}
.hero-copy{max-width:576px}
.hero--center .hero-copy{margin:0 auto}
.eyebrow{margin:0;font-size:12px;font-weight:600;letter-spacing:.3em;text-transform:uppercase;opacity:.8}
.hero h1{margin:24px 0 0;font-size:46px;font-weight:600;line-height:1.15}
.hero--center h1{font-size:48px}
.subtitle{margin:16px 0 0;font-size:18px;opacity:.92}
.ctas{display:flex;flex-wrap:wrap;align-items:center;gap:16px;margin-top:32px}
.hero--center .ctas{justify-content:center}
.btn{display:inline-block;border-radius:999px;padding:12px 24px;font-size:14px;font-weight:600}
.btn-primary{background:#ffffff;color:#0f172a;box-shadow:0 10px 25px rgba(0,0,0,.2)}
.btn-secondary{border:1px solid rgba(255,255,255,.6);background:transparent}
.btn-dark{background:#0f172a;color:#ffffff;padding:8px 20px}
.stats{display:grid;gap:16px;padding:24px;border-radius:24px;border:1px solid rgba(255,255,255,.4);background:rgba(255,255,255,.15);text-align:left;box-shadow:0 20px 60px rgba(15,23,42,.22)}
.hero--split .stats{max-width:320px}
.hero--left .stats{max-width:320px;margin-top:40px}
.hero--center .stats{grid-template-columns:repeat(3,minmax(0,1fr));text-align:center}
.stat-value{margin:0;font-size:30px;font-weight:600}
.stat-label{margin:0;font-size:14px;opacity:.85}
.sections{padding:64px 48px;display:flex;flex-direction:column;gap:64px}
.section{width:100%;max-width:1040px;margin:0 auto;padding:32px;border-radius:24px;border:1px solid rgba(0,0,0,.05);box-shadow:0 20px 60px rgba(15,23,42,.12)}
.section-label{margin:0;font-size:12px;font-weight:600;letter-spacing:.3em;text-transform:uppercase;color:#94a3b8}
.section h2{margin:8px 0 0;font-size:24px;font-weight:600;color:#0f172a}
.section-body{margin:8px 0 0;font-size:14px;color:#475569}
.grid{display:grid;gap:16px;margin-top:32px;grid-template-columns:repeat(auto-fit,minmax(240px,1fr))}
.card{border-radius:16px;border:1px solid #f1f5f9;background:#ffffff;padding:16px 20px}
.card h3{margin:0;font-size:16px;font-weight:600;color:#0f172a}
.card p{margin:4px 0 0;font-size:14px;color:#475569}
.section-cta{display:flex;flex-wrap:wrap;align-items:center;gap:12px;margin-top:32px}
.helper{font-size:14px;font-weight:500;color:#64748b}
.footer{padding:24px 48px;font-size:12px;text-align:center;opacity:.7}
@media (max-width:800px){.hero--split .hero-inner{flex-direction:column;align-items:flex-start}.hero--center .stats{grid-template-columns:1fr}}
"""


def _e(value: object) -> str:
    return html.escape(str(value), quote=True)


def hero_text_color(palette: dict[str, str]) -> str:
    """Pick the hero foreground so it contrasts with the theme gradient."""
    if palette.get("text", "").lower() in _LIGHT_THEME_TEXT_COLORS:
        return DARK_HERO_TEXT
    return LIGHT_HERO_TEXT


def export_filename(product_name: str) -> str:
    """Download filename for a product, e.g. ``"Launch Pilot"`` -> ``launch-pilot-landing.html``."""
    slug = re.sub(r"\s+", "-", product_name.strip()).lower()
    slug = re.sub(r"[^a-z0-9._-]", "", slug).strip(".-")
    return f"{slug}-landing.html" if slug else "landing.html"


# ---------------------------------------------------------------------------
# Hero
# ---------------------------------------------------------------------------


def _stats_html(stats: list[Stat], tag: str) -> str:
    rows = "".join(
        f'<div class="stat"><p class="stat-value">{_e(stat.value)}</p>'
        f'<p class="stat-label">{_e(stat.label)}</p></div>'
        for stat in stats
    )
    return f'<{tag} class="stats">{rows}</{tag}>'


def _hero_copy_html(hero: Hero, hero_text: str, trailing: str = "") -> str:
    return (
        '<div class="hero-copy">'
        f'<p class="eyebrow">{_e(hero.eyebrow)}</p>'
        f"<h1>{_e(hero.title)}</h1>"
        f'<p class="subtitle">{_e(hero.subtitle)}</p>'
        '<div class="ctas">'
        f'<a class="btn btn-primary" href="#cta">{_e(hero.primary_cta)}</a>'
        f'<a class="btn btn-secondary" href="#solution" style="color:{_e(hero_text)}">'
        f"{_e(hero.secondary_cta)} &rarr;</a>"
        "</div>"
        f"{trailing}"
        "</div>"
    )


def _hero_html(blueprint: LandingBlueprint) -> str:
    hero = blueprint.hero
    hero_text = hero_text_color(blueprint.palette)

    if blueprint.hero_layout is HeroLayout.SPLIT:
        # Story column beside the stat card.
        inner = _hero_copy_html(hero, hero_text) + _stats_html(hero.stats, "aside")
    elif blueprint.hero_layout is HeroLayout.CENTER:
        # Centered copy, stats as a row underneath.
        inner = _hero_copy_html(hero, hero_text) + _stats_html(hero.stats, "div")
    else:
        # Single left-aligned column with the stat card under the buttons.
        inner = _hero_copy_html(hero, hero_text, trailing=_stats_html(hero.stats, "div"))

    return (
        f'<header class="hero hero--{_e(blueprint.hero_layout.value)}" '
        f'style="background:{_e(blueprint.gradient)};color:{_e(hero_text)}">'
        f'<div class="hero-inner">{inner}</div>'
        "</header>"
    )


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _section_html(section: Section, primary_cta: str, card_background: str) -> str:
    if section.items:
        cards = "".join(
            f'<div class="card"><h3>{_e(item.title)}</h3><p>{_e(item.description)}</p></div>'
            for item in section.items
        )
        extra = f'<div class="grid">{cards}</div>'
    else:
        extra = (
            '<div class="section-cta">'
            f'<a class="btn btn-dark" href="#cta">{_e(primary_cta)}</a>'
            f'<span class="helper">{_e(HELPER_TEXT)}</span>'
            "</div>"
        )
    return (
        f'<section class="section" id="{_e(section.id.value)}" '
        f'style="background-color:{card_background}">'
        f'<p class="section-label">{_e(section.label)}</p>'
        f"<h2>{_e(section.headline)}</h2>"
        f'<p class="section-body">{_e(section.body)}</p>'
        f"{extra}"
        "</section>"
    )


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


def export_html(blueprint: LandingBlueprint) -> str:
    """Render *blueprint* as a complete, standalone HTML5 document."""
    palette = blueprint.palette
    card_background = (
        "rgba(255,255,255,0.85)"
        if blueprint.hero_layout is HeroLayout.CENTER
        else "rgba(255,255,255,0.8)"
    )
    sections_html = "".join(
        _section_html(section, blueprint.hero.primary_cta, card_background)
        for section in blueprint.sections
    )

    document = (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f'<meta name="description" content="{_e(blueprint.hero.subtitle)}">\n'
        '<meta name="generator" content="LaunchPilot">\n'
        f"<title>{_e(blueprint.product_name)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f'<body style="background-color:{_e(palette["surface"])};color:{_e(palette["text"])}">\n'
        f"{_hero_html(blueprint)}\n"
        f'<main class="sections">{sections_html}</main>\n'
        f'<footer class="footer">Generated {_e(blueprint.generated_at.isoformat())}</footer>\n'
        "</body>\n"
        "</html>\n"
    )

    size = len(document.encode("utf-8"))
    exports_total.labels(hero_layout=blueprint.hero_layout.value).inc()
    export_bytes.observe(size)
    logger.debug(
        "Blueprint exported",
        product_name=blueprint.product_name,
        hero_layout=blueprint.hero_layout.value,
        size_bytes=size,
    )
    return document
