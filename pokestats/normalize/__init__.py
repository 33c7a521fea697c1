"""
Normalization subsystem for the exporter.

This package converts the raw listing HTML into `Entry` records and
canonicalises their display names.  The record types live in
`schema.py`; `html_to_entries.py` holds the table parser and
`names.py` the name clean-up rules.
"""

from .schema import PLACEHOLDER, Entry, StatBlock  # noqa: F401
from .names import clean_name  # noqa: F401
from .html_to_entries import parse_entries  # noqa: F401
