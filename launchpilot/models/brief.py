"""Product brief: the raw user input a blueprint is composed from."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_FEATURE_SEPARATOR = re.compile(r"\n|,")


def parse_features(text: str) -> list[str]:
    """Split raw feature text on newlines or commas into trimmed, non-empty entries."""
    return [entry.strip() for entry in _FEATURE_SEPARATOR.split(text or "") if entry.strip()]


class Brief(BaseModel):
    """User-authored product description. Every field is untrusted free text."""

    model_config = ConfigDict(frozen=True)

    product_name: str = ""
    one_liner: str = ""
    audience: str = ""
    problem: str = ""
    solution: str = ""
    differentiator: str = ""
    cta: str = Field(default="", description="Primary call-to-action label")
    features: list[str] = Field(
        default_factory=list,
        description="Ordered feature strings; blank entries are dropped, duplicates kept",
    )

    @field_validator("features", mode="before")
    @classmethod
    def normalize_features(cls, v: object) -> object:
        if v is None:
            return []
        if isinstance(v, str):
            return parse_features(v)
        if isinstance(v, list | tuple):
            return [entry.strip() for entry in v if isinstance(entry, str) and entry.strip()]
        return v
