"""
HTML to entries extractor.

This module parses the pokemondb.net "all Pokémon" listing into a
list of `Entry` records.  The page is a single `<table id="pokedex">`
whose rows carry the National Pokédex number in column 0, the name
(with an optional `<small>` form qualifier) in column 1 and the six
base stats in columns 4 to 9.

The table is machine generated and contains rows that are not data
rows (repeated headers, footnote rows).  Such rows are skipped
silently; only a missing table is treated as an error.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import ParseError
from ..settings import MIN_ROW_CELLS, STAT_COLUMNS, TABLE_ID
from .names import clean_name, clean_text
from .schema import PLACEHOLDER, Entry, StatBlock

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def parse_int(text: str, *, upper: Optional[int] = None) -> Optional[int]:
    """Parse a non-negative decimal integer from cell text.

    Returns ``None`` when the text is not a plain run of ASCII digits
    or when the value exceeds ``upper``.
    """
    text = clean_text(text)
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    if upper is not None and value > upper:
        return None
    return value


def _row_name(cell: Tag) -> str:
    anchor = cell.find("a")
    base = anchor.get_text().strip() if anchor else "Unknown"
    small = cell.find("small")
    form = small.get_text().strip() if small else ""
    return f"{base} {form}" if form else base


def parse_row(row: Tag) -> Optional[Entry]:
    """Convert one table row into an `Entry`, or ``None`` to skip it."""
    cells = row.find_all("td", recursive=False)
    if len(cells) < MIN_ROW_CELLS:
        logger.debug("Skipping row with %d cells", len(cells))
        return None
    dex_id = parse_int(cells[0].get_text())
    if dex_id is None:
        logger.debug("Skipping row with identifier %r", clean_text(cells[0].get_text()))
        return None
    name = _row_name(cells[1])
    stats: List[int] = []
    for column in STAT_COLUMNS:
        value = parse_int(cells[column].get_text(), upper=255)
        if value is None:
            logger.debug("Skipping #%d %s: bad stat in column %d", dex_id, name, column)
            return None
        stats.append(value)
    return Entry(id=dex_id, name=clean_name(name), stats=StatBlock(*stats))


def parse_entries(html: str) -> List[Entry]:
    """Parse the listing markup into entries.

    Args:
        html: Raw HTML of the listing page.

    Returns:
        A list whose first element is the placeholder entry, followed
        by one entry per data row in table order.

    Raises:
        ParseError: If the ``#pokedex`` table or its body is missing.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table", id=TABLE_ID)
    body = table.find("tbody") if table else None
    if body is None:
        raise ParseError("Pokedex table not found.")
    entries: List[Entry] = [PLACEHOLDER]
    skipped = 0
    for row in body.find_all("tr", recursive=False):
        entry = parse_row(row)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)
    logger.debug("Parsed %d rows, skipped %d", len(entries) - 1, skipped)
    return entries
