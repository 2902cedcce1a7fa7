from __future__ import annotations

import logging
from typing import Iterator

from bs4 import Tag

logger = logging.getLogger(__name__)

FORUM_ROW_CELLS = 4


def forum_cells(row: Tag) -> list[Tag]:
    """Direct <td> children of a row (nested tables are not counted)."""
    return row.find_all("td", recursive=False)


def is_forum_row(row: Tag) -> bool:
    cells = forum_cells(row)
    if len(cells) != FORUM_ROW_CELLS:
        return False
    return cells[0].find("a") is not None


def select_forum_rows(doc: Tag) -> Iterator[Tag]:
    """
    Yield table rows that look like a sub-forum entry, in document order.

    The index table has no stable id or class, so every row under any table
    is a candidate. Header, separator and malformed rows are skipped.
    """
    for row in doc.select("table tr"):
        if not is_forum_row(row):
            logger.debug("Skipping non-forum row: cells=%s", len(forum_cells(row)))
            continue
        yield row
