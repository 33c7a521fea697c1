"""
C++ array writer.

Renders buckets as `static const BaseStats NAME[] = { ... };` blocks.
Every entry line carries the dex number and six stats right-aligned
in three-character fields followed by a `// id label` comment:

    {  25,  35,  55,  40,  50,  50,  90 },  // 25 Pikachu

Rendering is pure; `write_document` is the only function touching the
file system.  The file is overwritten and encoded as UTF‑8.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..classify.classifier import Bucket, LabeledEntry

logger = logging.getLogger(__name__)

HEADER_LINES = (
    "// Pokemon Base Stats Table (National Dex #1 - #1025)",
    "// Generated from {source_url}",
    "// Format: {{ID, HP, ATK, DEF, SPA, SPD, SPE}}, // ID Name",
)


def format_line(item: LabeledEntry) -> str:
    values = (item.entry.id,) + item.entry.stats.as_tuple()
    cells = ", ".join(f"{v:>3}" for v in values)
    return f"    {{ {cells} }},  // {item.entry.id} {item.label}"


def render_bucket(bucket: Bucket) -> List[str]:
    lines = [f"static const BaseStats {bucket.name}[] = {{"]
    lines.extend(format_line(item) for item in bucket.members)
    lines.append("};")
    return lines


def render_document(base: Bucket, buckets: Iterable[Bucket], *, source_url: str) -> str:
    """Render the complete output document.

    The header and the base table come first; each further bucket is
    separated from the previous one by two empty lines.
    """
    blocks: List[List[str]] = [
        [line.format(source_url=source_url) for line in HEADER_LINES] + [""] + render_bucket(base)
    ]
    for bucket in buckets:
        blocks.append(["", ""] + render_bucket(bucket))
    return "".join(line + "\n" for block in blocks for line in block)


def write_document(text: str, path: Union[str, Path]) -> Path:
    """Write the rendered document and return its absolute path.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), path)
    return path.resolve()
