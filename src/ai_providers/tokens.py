"""Character-based token estimate and context truncation."""
from __future__ import annotations

import logging

from ai_providers.settings import ProviderSettings

logger = logging.getLogger(__name__)

# Deliberately low for English text so estimates run high.
CHARS_PER_TOKEN = 3
BOUNDARY_SEARCH_WINDOW = 1000
PARAGRAPH_BREAK = "\n\n"
TRUNCATION_MARKER = "[Context truncated due to length...]\n\n"


def estimate_tokens(text: str) -> int:
    """Return ``ceil(len(text) / 3)``."""
    return -(-len(text) // CHARS_PER_TOKEN)


def truncate_context(
    text: str,
    max_tokens: int | None = None,
    *,
    settings: ProviderSettings | None = None,
) -> str:
    """Drop the oldest content of *text* so it fits the token budget.

    The budget is *max_tokens*, or the input budget of the selected default
    model when omitted. Text already within budget is returned unchanged.
    Otherwise the last ``budget * 3`` characters are kept; if a blank line
    appears within the first 1000 of those, everything up to and including
    it is dropped so the result starts on a paragraph. The result is prefixed
    with :data:`TRUNCATION_MARKER`.
    """
    if max_tokens is None:
        settings = settings or ProviderSettings()
        max_tokens = settings.max_input_tokens(settings.default_model_id())

    estimated = estimate_tokens(text)
    if estimated <= max_tokens:
        return text

    max_chars = max(max_tokens, 0) * CHARS_PER_TOKEN
    suffix = text[len(text) - max_chars:] if max_chars else ""

    boundary = suffix.find(PARAGRAPH_BREAK, 0, BOUNDARY_SEARCH_WINDOW)
    if boundary != -1:
        suffix = suffix[boundary + len(PARAGRAPH_BREAK):]

    logger.warning(
        "Context truncated: ~%d tokens exceeds limit of %d, kept ~%d",
        estimated,
        max_tokens,
        estimate_tokens(suffix),
    )
    return TRUNCATION_MARKER + suffix
