from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel

from article_summarizer.llm_schema import REQUIRED_FIELDS, SUMMARY_FIELDS
from article_summarizer.sanitize import (
    NO_SUMMARY,
    collapse_blank_lines,
    sanitize_summary,
    strip_labels,
)

log = logging.getLogger("article_summarizer.assemble")


def _field_text(result: BaseModel, name: str) -> str:
    value = getattr(result, name, None)
    return value.strip() if isinstance(value, str) else ""


def join_fields(result: BaseModel) -> str:
    """
    Join the user-visible fields in fixed order, one per line.
    Empty or missing fields are skipped; 'thinking' is never part of the output.
    """
    lines = [_field_text(result, name) for name in SUMMARY_FIELDS]
    return "\n".join(line for line in lines if line)


def assemble_summary(result: Optional[BaseModel], *, label: str = "") -> str:
    """
    Turn a structured result into the final multi-line synopsis.

    Order matters: redaction runs before label stripping and blank-line
    collapsing, so cleanup never sees an unredacted address and a
    REDACTED token is never taken for a label.
    """
    if result is None:
        return NO_SUMMARY

    missing = [name for name in REQUIRED_FIELDS if not _field_text(result, name)]
    if missing:
        log.warning("Missing essential fields %s for %r", ", ".join(missing), label)
        return NO_SUMMARY

    combined = join_fields(result)
    if not combined:
        return NO_SUMMARY

    sanitized = sanitize_summary(combined)
    if sanitized == NO_SUMMARY:
        log.debug("Captcha marker in output for %r; treating as no summary", label)
        return NO_SUMMARY

    return collapse_blank_lines(strip_labels(sanitized))
