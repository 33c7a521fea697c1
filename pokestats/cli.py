"""
Command line interface for the base stats exporter.

Running `pokestats` downloads the pokemondb.net listing, parses the
table, sorts the entries into the form catalogue and writes the C++
array document to `PokemonBaseStatsArray.txt` in the working
directory.  The source and destination are fixed; the only options
control log verbosity and the final "press Enter" prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .classify.classifier import base_bucket, classify
from .classify.rules import load_catalogue
from .collect.fetcher import fetch_page
from .emit.write_array import render_document, write_document
from .errors import PokestatsError
from .normalize.html_to_entries import parse_entries
from .settings import OUTPUT_PATH, SOURCE_URL

logger = logging.getLogger("pokestats.cli")


def export(url: str = SOURCE_URL, out: str = OUTPUT_PATH) -> Path:
    """Run the whole pipeline once and return the written file path."""
    logger.info("Downloading Pokemon table from pokemondb.net...")
    html = fetch_page(url)

    logger.info("Parsing table...")
    entries = parse_entries(html)
    logger.info("Successfully parsed %d Pokemon.", len(entries) - 1)

    logger.info("Generating C++ array with names...")
    rules = load_catalogue()
    document = render_document(
        base_bucket(entries, rules),
        classify(entries, rules),
        source_url=url,
    )
    path = write_document(document, out)
    logger.info("Done! File saved to:\n%s", path)
    return path


def _pause() -> None:
    try:
        input("\nPress Enter to exit...")
    except EOFError:
        pass


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pokestats",
        description="Export pokemondb.net base stats as C++ arrays",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        help="Exit without waiting for Enter",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stdout,
    )
    status = 0
    try:
        export()
    except (PokestatsError, OSError) as exc:
        logger.exception("Error: %s", exc)
        status = 1
    if args.pause and sys.stdin.isatty():
        _pause()
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
