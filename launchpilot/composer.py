"""Blueprint composition: brief + tone + theme + layout -> LandingBlueprint.

Composition is deterministic apart from the ``generated_at`` timestamp, which
is read from an injectable clock. Blank brief fields never raise; they degrade
into generic placeholder copy so every text field of the blueprint is non-empty.

Stat formulas:

* ``Core features``: number of items in the Features section (placeholders included).
* ``Audience segments``: pieces of the audience text split on commas, ``&``,
  ``/``, ``+`` and the words "and"/"or"; at least 1.
* ``Seconds to grasp the pitch``: ``ceil(words(one_liner) / 3)``, reading three
  words per second; at least 1.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from launchpilot.metrics import compositions_total, placeholder_features_total
from launchpilot.models.blueprint import (
    Hero,
    LandingBlueprint,
    Section,
    SectionId,
    SectionItem,
    Stat,
)
from launchpilot.models.catalog import HeroLayout, ModifierPlacement

if TYPE_CHECKING:
    from launchpilot.models.brief import Brief
    from launchpilot.models.catalog import ThemeOption, ToneOption
    from launchpilot.protocols import ClockPort

logger = structlog.get_logger()

SECONDARY_CTA = "See how it works"

PLACEHOLDER_PRODUCT = "Your product"
PLACEHOLDER_AUDIENCE = "modern teams"
PLACEHOLDER_CTA = "Get started"
PLACEHOLDER_PROBLEM = "Launch work is scattered across tools, people and approvals."
PLACEHOLDER_SOLUTION = "One focused workflow replaces the busywork between idea and launch."
PLACEHOLDER_DIFFERENTIATOR = "Built around how your team already works, not the other way around."
PLACEHOLDER_FEATURES = (
    "Guided onboarding",
    "Built-in analytics",
    "Team collaboration",
)

_FEATURE_DESCRIPTIONS = (
    "Ships with {product} out of the box, tuned for {audience}.",
    "Designed so {audience} spend less time on busywork.",
    "Works alongside the tools {audience} already use.",
)

_WHITESPACE = re.compile(r"\s+")
_AUDIENCE_SEPARATOR = re.compile(r",|&|/|\+|\band\b|\bor\b", re.IGNORECASE)
_TERMINAL_PUNCTUATION = ".!?"
_WORDS_PER_SECOND = 3


def utcnow() -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def _clean(text: str | None) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def _sentence(text: str) -> str:
    """Ensure terminal punctuation."""
    if text and text[-1] not in _TERMINAL_PUNCTUATION:
        return f"{text}."
    return text


def _clause(text: str) -> str:
    """Strip terminal punctuation and lowercase the leading letter of a plain word."""
    text = text.rstrip(_TERMINAL_PUNCTUATION).rstrip()
    return _lower_first(text)


def _lower_first(text: str) -> str:
    first_word = text.split(" ", 1)[0]
    # Leave acronyms and mixed-case names ("AI", "iOS", "LaunchPilot") alone.
    if first_word == "I" or first_word.startswith("I'"):
        return text
    if len(first_word) > 1 and not first_word[1:].islower():
        return text
    return text[:1].lower() + text[1:]


def _apply_tone(one_liner: str, tone: ToneOption) -> str:
    modifier = _clean(tone.headline_modifier)
    if not modifier:
        return one_liner
    if tone.placement is ModifierPlacement.SUFFIX:
        # A capitalized modifier is its own sentence; anything else continues the pitch.
        if modifier[0].isupper():
            return f"{one_liner} {modifier}"
        return f"{one_liner.rstrip(_TERMINAL_PUNCTUATION).rstrip()} {modifier}"
    if modifier.endswith(","):
        return f"{modifier} {_lower_first(one_liner)}"
    return f"{modifier} {one_liner}"


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


def _audience_segments(audience: str) -> int:
    parts = [part for part in _AUDIENCE_SEPARATOR.split(audience) if part.strip()]
    return max(1, len(parts))


def _pitch_seconds(one_liner: str) -> int:
    return max(1, math.ceil(len(one_liner.split()) / _WORDS_PER_SECOND))


def _build_stats(feature_count: int, audience: str, one_liner: str) -> list[Stat]:
    return [
        Stat(label="Core features", value=str(feature_count)),
        Stat(label="Audience segments", value=str(_audience_segments(audience))),
        Stat(label="Seconds to grasp the pitch", value=f"{_pitch_seconds(one_liner)}s"),
    ]


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


def build_gradient(palette: dict[str, str]) -> str:
    """Diagonal primary -> accent -> highlight gradient.

    Missing ``primary``/``accent`` fall back to ``text``/``surface``; without a
    ``highlight`` the gradient has two stops.
    """
    start = palette.get("primary", palette["text"])
    middle = palette.get("accent", palette["surface"])
    end = palette.get("highlight")
    if end is None:
        return f"linear-gradient(135deg, {start} 0%, {middle} 100%)"
    return f"linear-gradient(135deg, {start} 0%, {middle} 55%, {end} 100%)"


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def _feature_items(features: list[str], product: str, audience: str) -> list[SectionItem]:
    items = []
    for index, feature in enumerate(features):
        template = _FEATURE_DESCRIPTIONS[index % len(_FEATURE_DESCRIPTIONS)]
        items.append(
            SectionItem(
                title=feature,
                description=template.format(product=product, audience=audience),
            )
        )
    return items


def _subtitle(solution: str, problem: str, product: str, audience: str) -> str:
    if solution:
        return _sentence(solution)
    clause = _clause(problem)
    if clause:
        return f"{product} takes the friction out of this: {clause}."
    return f"{product} gives {audience} a faster path from idea to launch."


def compose(
    brief: Brief,
    tone: ToneOption,
    theme: ThemeOption,
    hero_layout: HeroLayout,
    *,
    clock: ClockPort = utcnow,
) -> LandingBlueprint:
    """Compose a landing page blueprint from a brief and the chosen presets."""
    product = _clean(brief.product_name) or PLACEHOLDER_PRODUCT
    audience = _clean(brief.audience) or PLACEHOLDER_AUDIENCE
    one_liner = _sentence(_clean(brief.one_liner)) or (
        f"{product} helps {audience} launch faster."
    )
    problem = _clean(brief.problem)
    solution = _clean(brief.solution)
    differentiator = _clean(brief.differentiator)
    # CTA and feature titles are copied verbatim apart from trimming.
    cta = (brief.cta or "").strip() or PLACEHOLDER_CTA

    features = [feature.strip() for feature in brief.features if feature.strip()]
    if not features:
        features = list(PLACEHOLDER_FEATURES)
        placeholder_features_total.inc()

    stats = _build_stats(len(features), audience, one_liner)
    hero = Hero(
        eyebrow=f"{product} • Built for {audience}",
        title=_apply_tone(one_liner, tone),
        subtitle=_subtitle(solution, problem, product, audience),
        primary_cta=cta,
        secondary_cta=SECONDARY_CTA,
        stats=stats,
    )

    feature_noun = "capability" if len(features) == 1 else "capabilities"
    sections = [
        Section(
            id=SectionId.PROBLEM,
            label="The problem",
            headline=f"Why {audience} get stuck",
            body=_sentence(problem) or PLACEHOLDER_PROBLEM,
        ),
        Section(
            id=SectionId.SOLUTION,
            label="The solution",
            headline=f"How {product} fixes it",
            body=_sentence(solution) or PLACEHOLDER_SOLUTION,
        ),
        Section(
            id=SectionId.FEATURES,
            label="Features",
            headline=f"What you get with {product}",
            body=f"{len(features)} {feature_noun} built around {audience}.",
            items=_feature_items(features, product, audience),
        ),
        Section(
            id=SectionId.PROOF,
            label="Why it's different",
            headline=f"Why teams choose {product}",
            body=_sentence(differentiator) or PLACEHOLDER_DIFFERENTIATOR,
            items=[SectionItem(title=stat.value, description=stat.label) for stat in stats],
        ),
        Section(
            id=SectionId.CTA,
            label="Get started",
            headline=f"Ready to try {product}?",
            body=f"Start with {product} today and give {audience} a head start.",
        ),
    ]

    palette = dict(theme.palette)
    blueprint = LandingBlueprint(
        product_name=product,
        hero=hero,
        sections=sections,
        palette=palette,
        gradient=build_gradient(palette),
        hero_layout=HeroLayout(hero_layout),
        generated_at=clock(),
    )

    compositions_total.labels(
        tone_id=tone.id, theme_id=theme.id, hero_layout=blueprint.hero_layout.value
    ).inc()
    logger.debug(
        "Blueprint composed",
        product_name=product,
        tone_id=tone.id,
        theme_id=theme.id,
        hero_layout=blueprint.hero_layout.value,
        num_features=len(features),
    )
    return blueprint
