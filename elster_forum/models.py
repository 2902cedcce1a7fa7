from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ForumSummary:
    """One sub-forum entry parsed from the forum index table."""

    name: str
    description: str
    topic_count: int = 0
    post_count: int = 0
    # None means the row carried no "Letzter Beitrag:" label at all.
    last_thread_title: Optional[str] = None
    last_author: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
