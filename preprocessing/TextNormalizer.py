# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: TextNormalizer
# -----------------------------------------------------------------------------
import re

import settings

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


class TextTooShort(ValueError):
    """Raised when text is empty or below the minimum length after cleaning."""


class TextNormalizer:
    """
    Deterministic cleaning applied before embedding:
      - drop HTML-like tags
      - collapse whitespace runs to a single space
      - trim
    """

    @staticmethod
    def strip_tags(text: str) -> str:
        return _TAG_RE.sub("", text or "")

    @staticmethod
    def normalize(text: str, *, min_length: int | None = None) -> str:
        min_len = settings.MIN_TEXT_LENGTH if min_length is None else min_length

        clean = _WS_RE.sub(" ", TextNormalizer.strip_tags(text)).strip()
        if not clean or len(clean) < min_len:
            raise TextTooShort(
                f"Text too short after cleaning ({len(clean)} chars, minimum {min_len})"
            )
        return clean
