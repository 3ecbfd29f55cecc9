"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_text() -> str:
    """Text covering 1-, 2-, 3- and 4-byte UTF-8 sequences."""
    return "Aé€😀"


@pytest.fixture
def sample_utf8(sample_text: str) -> bytes:
    """sample_text encoded as UTF-8."""
    return sample_text.encode("utf-8")
