from __future__ import annotations

import re

NO_SUMMARY = "No summary available"

_HTML_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;"}
_HTML_CHARS_RE = re.compile(r"[<>&]")

_CAPTCHA_RE = re.compile(r"captcha", re.IGNORECASE)
# ASCII word boundaries: 服 or é directly before an address is a boundary
_IPV4_RE = re.compile(r"\b(?:\d{1,3}\.){3}\d{1,3}\b", re.ASCII)

_LABEL_RE = re.compile(r"^\s*[A-Za-z0-9_]+:\s*")
_BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def sanitize_input(text: str) -> str:
    """
    Escape <, > and & before the text is embedded in a prompt.
    """
    return _HTML_CHARS_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def sanitize_summary(text: str) -> str:
    """
    Scrub generated output:
    - any mention of a captcha means the scraped page was a challenge, not an article
    - IPv4-shaped substrings are replaced with REDACTED
    """
    if _CAPTCHA_RE.search(text):
        return NO_SUMMARY
    return _IPV4_RE.sub("REDACTED", text)


def strip_labels(text: str) -> str:
    """Drop a leading 'Label:' prefix (e.g. 'Context: ') from every line."""
    return "\n".join(_LABEL_RE.sub("", line) for line in text.split("\n"))


def collapse_blank_lines(text: str) -> str:
    return _BLANK_LINES_RE.sub("\n", text)
