"""
Display name canonicalisation.

pokemondb.net renders names with typographic characters (Flabébé,
Farfetch’d, Type: Null) that are awkward inside a C++ comment and in
the substring rules used by the classifier.  `clean_name` maps them to
plain ASCII equivalents.
"""

from __future__ import annotations

# Applied in order.
_REPLACEMENTS = (
    ("é", "e"),
    ("’", "'"),
    (":", " -"),
    # One non-overlapping pass: three or more spaces are shortened, not collapsed.
    ("  ", " "),
)


def clean_name(name: str) -> str:
    """Return the canonical form of a display name.

    Examples:
        >>> clean_name("Type: Null")
        'Type - Null'
        >>> clean_name("Farfetch’d")
        "Farfetch'd"
    """
    for old, new in _REPLACEMENTS:
        name = name.replace(old, new)
    return name.strip()


def clean_text(text: str) -> str:
    """Strip surrounding whitespace and embedded line breaks from cell text."""
    return text.strip().replace("\n", "").replace("\r", "")
