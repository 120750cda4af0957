"""Shared pytest fixtures."""

import pytest

from timeparser import DurationParser


@pytest.fixture
def seconds_parser() -> DurationParser:
    """Create a parser that reads bare numbers as seconds."""
    return DurationParser(fallback_unit="s")
