"""
Result formatting service for domain style classification.

This module turns a `ClassificationResult` into the localized record and
message shown to end users: style label, count and the original input.
"""
from __future__ import annotations

import json

from domainstyle.syllables_data import ERROR_MESSAGES, STYLE_LABELS
from domainstyle.types import ClassificationResult, Style, StyleConfig

_RECORD_KEYS = {
    "zh": ("品相", "字数", "域名"),
    "en": ("style", "count", "domain"),
}

_MESSAGE_PREFIX = {
    "zh": "域名品相分析结果：",
    "en": "Domain style analysis: ",
}


class StyleFormattingService:
    """Service for rendering classification results."""

    def __init__(self, config: StyleConfig):
        self._locale = config.locale

    def style_label(self, style: Style) -> str:
        return STYLE_LABELS[self._locale][style.kind.value]

    def error_text(self, result: ClassificationResult) -> str:
        messages = ERROR_MESSAGES[self._locale]
        return messages.get(result.error_reason, result.error_message or "")

    def to_record(self, result: ClassificationResult) -> dict:
        """Build the response record for a successful result."""
        if not result.success:
            raise ValueError("cannot build a style record for a failed classification")

        style_key, count_key, domain_key = _RECORD_KEYS[self._locale]
        record = {
            style_key: self.style_label(result.style),
            count_key: result.style.count,
            domain_key: result.domain,
            "style_id": result.style.style_id,
        }
        if result.style.syllables:
            record["syllables"] = list(result.style.syllables)
        if result.reading:
            record["reading"] = list(result.reading)
        return record

    def format_message(self, result: ClassificationResult) -> str:
        """
        Render a one-line message.

        Successes are a localized prefix followed by the JSON record, with
        non-ASCII text kept as is. Failures are the localized error text.
        """
        if not result.success:
            return self.error_text(result)
        return _MESSAGE_PREFIX[self._locale] + json.dumps(self.to_record(result), ensure_ascii=False)
