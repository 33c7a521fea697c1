"""
Emission subsystem for the exporter.

Renders classified buckets into the C++ array document and writes it
to disk.
"""

from .write_array import render_document, write_document  # noqa: F401
