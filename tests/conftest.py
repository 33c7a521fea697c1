"""Shared fixtures for the exporter tests."""

from __future__ import annotations

import pytest  # type: ignore

from listing_html import build_page, build_row


@pytest.fixture
def make_row():
    return build_row


@pytest.fixture
def make_page():
    return build_page
