from __future__ import annotations

# ~4 chars/token keeps the excerpt around 6k tokens
MAX_CONTEXT_LENGTH = 25000
# ~750 chars either side of a hit, one or two paragraphs of context
PASSAGE_WINDOW = 1500
KEYWORD_LENGTH_THRESHOLD = 2
SEPARATOR_OVERHEAD = 10

PASSAGE_SEPARATOR = "\n\n---\n\n"
FALLBACK_SEPARATOR = "\n\n[...]\n\n"
