"""Domain keyword mapping presets and the JSON file format for custom ones.

File format::

    {
      "domain": "my-corpus",
      "stopwords": ["optional", "override"],
      "rules": [{"triggers": ["river"], "keywords": ["thames", "congo"]}]
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from passage_kb.domain.keywords import DomainKeywordMapping, KeywordMappingRule
from passage_kb.exceptions import ConfigurationError

HEART_OF_DARKNESS_MAPPINGS = DomainKeywordMapping(
    domain="heart-of-darkness",
    rules=(
        KeywordMappingRule(
            triggers=("river",),
            keywords=("thames", "congo", "river", "water"),
        ),
        KeywordMappingRule(
            triggers=("position", "hired"),
            keywords=("captain", "steamboat", "command", "skipper", "appointed"),
        ),
        KeywordMappingRule(
            triggers=("kurtz",),
            keywords=("kurtz", "ivory", "station", "agent"),
        ),
        KeywordMappingRule(
            triggers=("death", "words"),
            keywords=("horror", "died", "death", "last", "whispered"),
        ),
        KeywordMappingRule(
            triggers=("attack",),
            keywords=("arrows", "natives", "spears", "attack", "savages"),
        ),
        KeywordMappingRule(
            triggers=("repair", "steamboat"),
            keywords=("rivets", "repair", "boiler", "steam", "wreck"),
        ),
        KeywordMappingRule(
            triggers=("poles", "station"),
            keywords=("heads", "skulls", "poles", "ornamental"),
        ),
    ),
)

PRESETS: dict[str, DomainKeywordMapping] = {
    HEART_OF_DARKNESS_MAPPINGS.domain: HEART_OF_DARKNESS_MAPPINGS,
}

_NO_DOMAIN = ("", "none", "off")


def get_preset(name: str | None) -> DomainKeywordMapping | None:
    """Look up a built-in mapping; ``None``/"none" means no augmentation."""
    key = (name or "").strip().lower()
    if key in _NO_DOMAIN:
        return None
    try:
        return PRESETS[key]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ConfigurationError(f"Unknown domain preset {name!r} (known: {known})") from None


class MappingRuleModel(BaseModel):
    triggers: list[str] = Field(min_length=1)
    keywords: list[str] = Field(min_length=1)

    @field_validator("triggers", "keywords", mode="before")
    @classmethod
    def _accept_single_string(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            return [v]
        return v


class MappingFileModel(BaseModel):
    domain: str
    rules: list[MappingRuleModel] = Field(default_factory=list)
    stopwords: list[str] | None = None

    def to_mapping(self) -> DomainKeywordMapping:
        return DomainKeywordMapping(
            domain=self.domain,
            rules=tuple(
                KeywordMappingRule(triggers=tuple(r.triggers), keywords=tuple(r.keywords))
                for r in self.rules
            ),
        )


def load_mapping_file(path: str | Path) -> MappingFileModel:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read mapping file {p}: {exc}") from exc
    try:
        return MappingFileModel.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid mapping file {p}: {exc}") from exc
