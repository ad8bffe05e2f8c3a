"""Tests for common.decorators module."""

import logging
import time

import pytest

from aelist.common.decorators import timing


class TestTimingDecorator:
    """Test @timing decorator."""

    def test_timing_measures_duration(self, caplog):
        """Test timing decorator measures execution time."""

        @timing
        def timed_function():
            time.sleep(0.05)
            return "done"

        with caplog.at_level(logging.INFO):
            result = timed_function()
            output = caplog.text

        assert result == "done"
        assert "timed_function" in output
        assert "took" in output

    def test_timing_preserves_function_metadata(self):
        """Test decorator preserves function name and docstring."""

        @timing
        def documented_function():
            """This is a timed function."""
            return "result"

        assert documented_function.__name__ == "documented_function"
        assert documented_function.__doc__ == "This is a timed function."

    def test_timing_with_args_kwargs(self, caplog):
        """Test decorator works with function arguments."""

        @timing
        def function_with_args(a, b, c=3):
            return a + b + c

        with caplog.at_level(logging.INFO):
            result = function_with_args(1, 2, c=4)

        assert result == 7
        assert "function_with_args took" in caplog.text

    def test_timing_with_exception(self, caplog):
        """Test timing decorator still logs on exception."""

        @timing
        def failing_function():
            raise ValueError("Test error")

        with caplog.at_level(logging.INFO):
            with pytest.raises(ValueError):
                failing_function()

        assert "failing_function took" in caplog.text
