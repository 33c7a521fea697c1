"""
Exceptions raised by the exporter.

Only fatal conditions are modelled here.  Malformed table rows are not
errors; the parser skips them.  Failures while writing the output file
surface as the built-in `OSError`.
"""

from __future__ import annotations


class PokestatsError(Exception):
    """Base class for all exporter failures."""


class NetworkError(PokestatsError):
    """The listing page could not be downloaded."""


class ParseError(PokestatsError):
    """The downloaded markup does not contain the expected table."""


class CatalogueError(PokestatsError):
    """The rule catalogue is malformed."""
