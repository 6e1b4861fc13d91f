"""Tests for numeric bound checks."""

import pytest

from dataknobs_ensure import EnsureError, ensure


class TestMinValue:

    @pytest.mark.parametrize("n", [1, 2, 100])
    def test_at_or_above_minimum_returns_value(self, n):
        assert ensure.min_value(1, n) == n

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_below_minimum_raises(self, n):
        with pytest.raises(EnsureError):
            ensure.min_value(1, n)

    def test_default_message(self):
        with pytest.raises(EnsureError) as exc_info:
            ensure.min_value(1, -10)
        assert str(exc_info.value) == (
            "value must be greater than or equal to 1, but was -10"
        )
        assert exc_info.value.context == {
            "check": "min_value",
            "boundary": 1,
            "value": -10,
        }

    def test_custom_message(self):
        with pytest.raises(EnsureError, match="^age must be at least 0$"):
            ensure.min_value(0, -1, "age must be at least 0")

    def test_custom_factory(self, value_error):
        with pytest.raises(ValueError, match="^test$"):
            ensure.min_value(0, -1, value_error)

    def test_floats(self):
        assert ensure.min_value(0.5, 0.5) == 0.5
        with pytest.raises(EnsureError, match="^value must be greater than or equal to 0.5, but was 0.25$"):
            ensure.min_value(0.5, 0.25)


class TestMaxValue:

    @pytest.mark.parametrize("n", [100, 99, -10])
    def test_at_or_below_maximum_returns_value(self, n):
        assert ensure.max_value(100, n) == n

    @pytest.mark.parametrize("n", [101, 1000])
    def test_above_maximum_raises(self, n):
        with pytest.raises(EnsureError):
            ensure.max_value(100, n)

    def test_default_message(self):
        with pytest.raises(EnsureError) as exc_info:
            ensure.max_value(100, 101)
        assert str(exc_info.value) == (
            "value must be less than or equal to 100, but was 101"
        )
        assert exc_info.value.context["boundary"] == 100
        assert exc_info.value.context["value"] == 101

    def test_custom_message(self):
        with pytest.raises(EnsureError, match="^people must not exceed 10$"):
            ensure.max_value(10, 11, "people must not exceed 10")

    def test_custom_factory(self, value_error):
        with pytest.raises(ValueError, match="^test$"):
            ensure.max_value(10, 11, value_error)


class TestBoundsCombined:

    def test_chained_bounds(self):
        assert ensure.max_value(65535, ensure.min_value(1, 8080)) == 8080

    @pytest.mark.parametrize("boundary", [-5, 0, 7])
    def test_boundary_is_inclusive_on_both_sides(self, boundary):
        assert ensure.min_value(boundary, boundary) == boundary
        assert ensure.max_value(boundary, boundary) == boundary
