from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence, TextIO

from elster_forum.models import ForumSummary

logger = logging.getLogger(__name__)


def format_count(value: int) -> str:
    """German thousands grouping: 1234567 -> "1.234.567"."""
    return f"{value:,}".replace(",", ".")


def format_summary(summary: ForumSummary) -> str:
    lines = [
        f"Forum: {summary.name}",
        f"  Beschreibung: {summary.description}",
        f"  Themen: {format_count(summary.topic_count)}, Beiträge: {format_count(summary.post_count)}",
    ]
    if summary.last_thread_title:
        lines.append(f"  Letzter Thread: '{summary.last_thread_title}' von {summary.last_author or ''}".rstrip())
    return "\n".join(lines)


class ConsoleSink:
    """Human-readable listing, one block per forum separated by a blank line."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def write(self, summaries: Sequence[ForumSummary]) -> int:
        for summary in summaries:
            print(format_summary(summary), file=self._stream)
            print(file=self._stream)
        return len(summaries)


class JsonFileSink:
    """
    Persist summaries as a UTF-8 JSON array.

    Raises:
        OSError: if the file cannot be written
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, summaries: Sequence[ForumSummary]) -> int:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [s.to_dict() for s in summaries]
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Wrote forum summaries: path=%s count=%s", self.path, len(payload))
        return len(payload)
