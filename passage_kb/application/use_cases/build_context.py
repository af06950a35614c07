from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from passage_kb.application.ports.text_source_port import TextSourcePort
from passage_kb.domain.extraction import PassageExtractor
from passage_kb.exceptions import DocumentLoadError

log = logging.getLogger(__name__)

DEFAULT_INSTRUCTIONS = (
    "Use the provided text passages to answer the question. "
    "These are the most relevant sections based on your question."
)


@dataclass(frozen=True)
class ContextResult:
    question: str
    text_length: int
    context_length: int
    context: str
    instructions: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass
class BuildContextUseCase:
    source: TextSourcePort
    extractor: PassageExtractor
    instructions: str = DEFAULT_INSTRUCTIONS

    def _read_text(self) -> str | None:
        path = self.source.file_path
        if self.source.has_cached(path):
            text = self.source.get_cached(path)
            log.info("Reference text loaded from cache: %s", path)
        else:
            text = self.source.load()
            log.info("Reference text loaded from file: %s", path)
        return text

    def execute(self, question: str) -> ContextResult:
        """Load the reference text (cache first) and extract the question context.

        Any loader failure surfaces as DocumentLoadError with the cause chained.
        """
        try:
            text = self._read_text()
        except DocumentLoadError as exc:
            log.error("Error loading reference text: %s", exc)
            raise
        except Exception as exc:  # noqa: BLE001
            log.error("Error loading reference text: %s", exc)
            raise DocumentLoadError(f"Error loading reference text: {exc}") from exc

        if not text:
            log.error("Error loading reference text: empty or missing content")
            raise DocumentLoadError("Failed to load reference text")

        report = self.extractor.analyze(text, question)
        log.debug(
            "extract: keywords=%s passages=%d selected=%d fallback=%s",
            report.keywords,
            len(report.passages),
            len(report.selected),
            report.used_fallback,
        )
        return ContextResult(
            question=question,
            text_length=len(text),
            context_length=len(report.text),
            context=report.text,
            instructions=self.instructions,
        )
