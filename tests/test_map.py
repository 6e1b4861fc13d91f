"""Tests for mapping checks."""

from collections import OrderedDict

import pytest

from dataknobs_ensure import EnsureError, ensure


class TestNotEmptyMapping:

    @pytest.mark.parametrize("value", [{"key": "value"}, OrderedDict(a=1), {None: None}])
    def test_returns_mapping(self, value):
        assert ensure.not_empty_mapping(value) is value

    @pytest.mark.parametrize("value", [{}, OrderedDict(), None])
    def test_default_message(self, value):
        with pytest.raises(EnsureError, match="^map must not be empty$"):
            ensure.not_empty_mapping(value)

    def test_custom_message(self):
        with pytest.raises(EnsureError, match="^test$"):
            ensure.not_empty_mapping({}, "test")

    def test_custom_factory(self, value_error):
        with pytest.raises(ValueError, match="^test$"):
            ensure.not_empty_mapping(None, value_error)
