"""Shared fixtures for dataknobs_ensure tests."""

import pytest


@pytest.fixture
def value_error():
    """Failure-factory producing a caller-side exception."""
    return lambda: ValueError("test")


@pytest.fixture
def calls():
    """Records each invocation of ``counting_factory``."""
    return []


@pytest.fixture
def counting_factory(calls):
    """Failure-factory that records how often it runs."""

    def factory():
        calls.append(1)
        return ValueError("counted")

    return factory
