"""Pytest configuration and fixtures for wetzel tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wetzel.logger import reset_logger
from wetzel.styles import AsciiDoctorStyle, get_style


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Leave the wetzel logger silent between tests."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def style() -> AsciiDoctorStyle:
    """The Asciidoctor style as returned by the registry."""
    result = get_style("asciidoctor")
    assert isinstance(result, AsciiDoctorStyle)
    return result
