"""
Collection subsystem for the exporter.

The `collect` package wraps the network layer.  It exposes a single
`fetch_page` function that downloads the listing page; the rest of
the pipeline works on the returned markup and never touches the
network.
"""

from .fetcher import fetch_page  # noqa: F401
