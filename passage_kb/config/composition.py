"""Composition root: build the extractor and use case from settings.

Keeps environment/settings handling inside the config layer.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from passage_kb.application.use_cases import BuildContextUseCase
from passage_kb.config.mappings import get_preset, load_mapping_file
from passage_kb.config.settings import Settings, get_settings
from passage_kb.domain.extraction import PassageExtractor
from passage_kb.infra.loaders import CachedTextFileLoader

log = logging.getLogger(__name__)


def build_extractor(
    domain: str | None = None, mapping_file: str | Path | None = None
) -> PassageExtractor:
    """Mapping file wins over the preset name; neither means no augmentation."""
    if mapping_file:
        model = load_mapping_file(mapping_file)
        log.info(
            "Using keyword mapping %r from %s (%d rules)",
            model.domain,
            mapping_file,
            len(model.rules),
        )
        return PassageExtractor(model.to_mapping(), stopwords=model.stopwords)
    mapping = get_preset(domain)
    if mapping is not None:
        log.info("Using built-in keyword mapping %r", mapping.domain)
    return PassageExtractor(mapping)


def build_context_use_case(settings: Settings | None = None) -> BuildContextUseCase:
    s = settings or get_settings()
    source = CachedTextFileLoader(s.data_dir, s.document_name)
    extractor = build_extractor(s.domain, s.mapping_file)
    return BuildContextUseCase(source=source, extractor=extractor)


@lru_cache(maxsize=1)
def get_context_use_case() -> BuildContextUseCase:
    # one instance per process so the loader cache survives across questions
    return build_context_use_case()


__all__ = ["build_extractor", "build_context_use_case", "get_context_use_case"]
