"""Tests for logger setup and section warnings."""

import io
import logging
import subprocess
import sys

from wetzel.logger import debug_enabled, get_logger, reset_logger, setup_logger
from wetzel.styles.asciidoctor import section


def test_default_logger_is_silent():
    """Test that a reset logger only lets errors through."""
    reset_logger()
    assert get_logger().level == logging.ERROR
    assert not debug_enabled()


def test_verbosity_levels():
    """Test the verbosity to level mapping."""
    for verbosity, level in [(0, logging.ERROR), (1, logging.WARNING), (3, logging.DEBUG)]:
        setup_logger(verbosity, stream=io.StringIO())
        assert get_logger().level == level
    setup_logger(99, stream=io.StringIO())
    assert get_logger().level == logging.ERROR


def test_setup_replaces_handlers():
    """Test that reconfiguring does not stack handlers."""
    setup_logger(1, stream=io.StringIO())
    setup_logger(2, stream=io.StringIO())
    assert len(get_logger().handlers) == 1


def test_missing_title_is_logged():
    """Test that a missing title is reported on the logger."""
    stream = io.StringIO()
    setup_logger(1, stream=stream)
    section({"typeName": "sampler"}, 2, suppress_warnings=False)
    assert "Schema section has no title (typeName: sampler)" in stream.getvalue()


def test_suppressed_title_is_not_logged():
    """Test that suppressed warnings are not logged either."""
    stream = io.StringIO()
    setup_logger(1, stream=stream)
    section({"typeName": "sampler"}, 2, suppress_warnings=True)
    assert stream.getvalue() == ""


def test_library_is_silent_without_setup():
    """Test that a fresh interpreter prints nothing for a missing title."""
    script = (
        "from wetzel.styles.asciidoctor import section\n"
        "section({}, 2, False)\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        check=True,
        capture_output=True,
        text=True,
    )
    assert result.stderr == ""
