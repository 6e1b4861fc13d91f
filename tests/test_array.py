"""Tests for ordered sequence checks."""

import pytest

from dataknobs_ensure import EnsureError, ensure


class TestNotEmptySequence:

    @pytest.mark.parametrize("value", [["a"], ("a",), ["a", None]])
    def test_returns_sequence(self, value):
        assert ensure.not_empty_sequence(value) is value

    @pytest.mark.parametrize("value", [[], (), None])
    def test_default_message(self, value):
        with pytest.raises(EnsureError, match="^array must not be empty$"):
            ensure.not_empty_sequence(value)

    def test_custom_message(self):
        with pytest.raises(EnsureError, match="^test$"):
            ensure.not_empty_sequence([], "test")

    def test_custom_factory(self, value_error):
        with pytest.raises(ValueError, match="^test$"):
            ensure.not_empty_sequence(None, value_error)
