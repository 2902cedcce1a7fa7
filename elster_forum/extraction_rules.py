from __future__ import annotations

import re
from typing import Optional

# Labels as they appear in the forum's German markup.
TOPICS_LABEL = "Themen:"
LAST_POST_LABEL = "Letzter Beitrag:"
AUTHOR_MARKER = "von "

_WS_RE = re.compile(r"[\s\u00a0]+")
_DIGITS_RE = re.compile(r"[0-9]+")

# " - in Lohnsteuer..." glued onto a thread title by the index layout.
_FORUM_SUFFIX_RE = re.compile(r"\s+-\s+in\s+[A-ZÄÖÜ].*$", re.DOTALL)


def collapse_ws(text: str) -> str:
    """Collapse whitespace runs (including non-breaking spaces) to one space and trim."""
    return _WS_RE.sub(" ", text).strip()


def find_label(text: str, label: str) -> Optional[re.Match[str]]:
    """Case-insensitive search for a literal label."""
    return re.search(re.escape(label), text, re.IGNORECASE)


def cut_before_label(text: str, label: str) -> str:
    """
    Truncate text right before the label.

    Only applies when the label is found past the first character; a label at
    position 0 leaves the text untouched.
    """
    m = find_label(text, label)
    if m and m.start() > 0:
        return text[: m.start()]
    return text


def text_after_label(text: str, label: str) -> Optional[str]:
    """Return the text following the label, or None if the label is absent."""
    m = find_label(text, label)
    if not m:
        return None
    return text[m.end():]


def strip_forum_suffix(title: str) -> str:
    return _FORUM_SUFFIX_RE.sub("", title)


def parse_count(text: str) -> int:
    """
    Parse a count that may use "." as thousands separator ("1.234" -> 1234).

    Anything that is not a plain run of digits afterwards yields 0.
    """
    cleaned = text.strip().replace(".", "")
    if not _DIGITS_RE.fullmatch(cleaned):
        return 0
    return int(cleaned)


def first_token(text: str) -> str:
    stripped = text.strip()
    if not stripped:
        return ""
    return stripped.split(" ", 1)[0]
