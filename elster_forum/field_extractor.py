from __future__ import annotations

from typing import Optional

from bs4 import Tag

from elster_forum.extraction_rules import (
    AUTHOR_MARKER,
    LAST_POST_LABEL,
    TOPICS_LABEL,
    collapse_ws,
    cut_before_label,
    first_token,
    parse_count,
    strip_forum_suffix,
    text_after_label,
)
from elster_forum.models import ForumSummary
from elster_forum.row_selector import forum_cells


def extract_forum_summary(row: Tag) -> ForumSummary:
    """
    Build a ForumSummary from one qualifying row.

    Cell layout: [name + description + last thread, topics, posts, last author].
    Missing labels, bad numbers and missing anchors fall back to defaults; this
    never raises for a row accepted by the row selector.
    """
    name_cell, topics_cell, posts_cell, last_cell = forum_cells(row)
    cell_text = name_cell.get_text()

    link = name_cell.find("a")
    link_text = link.get_text() if link else ""

    return ForumSummary(
        name=extract_name(name_cell),
        description=extract_description(cell_text, link_text),
        topic_count=parse_count(topics_cell.get_text()),
        post_count=parse_count(posts_cell.get_text()),
        last_thread_title=extract_last_thread_title(cell_text),
        last_author=extract_last_author(last_cell),
    )


def extract_name(cell: Tag) -> str:
    link = cell.find("a")
    name = link.get_text().strip() if link else ""
    return name or cell.get_text().strip()


def extract_description(cell_text: str, link_text: str) -> str:
    text = cell_text.replace(link_text, "", 1) if link_text else cell_text
    text = collapse_ws(text)
    return cut_before_label(text, TOPICS_LABEL).strip()


def extract_last_thread_title(cell_text: str) -> Optional[str]:
    after = text_after_label(cell_text, LAST_POST_LABEL)
    if after is None:
        return None

    title = collapse_ws(after)
    title = cut_before_label(title, AUTHOR_MARKER)
    title = strip_forum_suffix(title)
    return title.strip()


def extract_last_author(cell: Tag) -> str:
    text = collapse_ws(cell.get_text())

    after = text_after_label(text, AUTHOR_MARKER)
    if after is not None:
        text = after

    author = first_token(text)
    if not author:
        link = cell.find("a")
        if link:
            author = link.get_text().strip()
    return author
