"""Failure construction shared by every check.

Each check accepts an optional ``failure`` descriptor as its last argument:

- omitted: the check raises ``EnsureError`` with its default message
- a ``str``: the check raises ``EnsureError`` with that message
- a zero-argument callable: the check raises whatever the callable returns

Messages are turned into trivial factories by :func:`as_factory`, so every
failure, default or custom, is produced through :func:`get_or_raise`. That
helper is also where a broken caller-supplied factory is caught: a missing
factory, or one that yields ``None``, raises a guard ``EnsureError`` rather
than letting the check pass silently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar, Union

from dataknobs_ensure.exceptions import EnsureError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default messages
NOT_NULL_MESSAGE = "object must not be null"
TRUE_MESSAGE = "boolean must be true"
FALSE_MESSAGE = "boolean must be false"
NOT_BLANK_MESSAGE = "string must not be blank"
EMPTY_ARRAY_MESSAGE = "array must not be empty"
EMPTY_COLLECTION_MESSAGE = "collection must not be empty"
EMPTY_MAP_MESSAGE = "map must not be empty"
CONTAINS_NULL_MESSAGE = "collection must not contain null elements"
MIN_MESSAGE = "value must be greater than or equal to {minimum}, but was {value}"
MAX_MESSAGE = "value must be less than or equal to {maximum}, but was {value}"
EQUALS_MESSAGE = "objects must be equal"
NULL_CLASS_MESSAGE = "clazz must not be null"
INSTANCE_OF_MESSAGE = "object must be an instance of {type_name}"

# Guard messages
MISSING_FACTORY_MESSAGE = "factory was not provided"
EMPTY_RESULT_MESSAGE = "factory produced no failure object"
INVALID_RESULT_MESSAGE = "factory must produce an exception, got {type_name}"


class _DefaultMessage:
    """Marker for an omitted failure descriptor."""

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT = _DefaultMessage()
"""Sentinel default for ``failure`` parameters: use the check's own message."""

FailureFactory = Callable[[], Union[BaseException, type[BaseException]]]
"""Zero-argument callable producing the exception (or exception class) to raise."""

FailureDescriptor = Union[str, FailureFactory, _DefaultMessage, None]
"""Anything accepted as the ``failure`` argument of a check."""


def as_factory(
    failure: FailureDescriptor,
    check: str,
    default_message: str = "",
    **context: Any,
) -> FailureFactory | None:
    """Normalize a failure descriptor into a failure-factory.

    Args:
        failure: The descriptor passed to the check
        check: Name of the check, recorded in the error context
        default_message: Message used when ``failure`` is ``DEFAULT``
        **context: Extra context attached to the default-message error

    Returns:
        A factory, or ``None`` if the caller explicitly passed no factory.
        The ``None`` is left for :func:`get_or_raise` to reject, and only
        once the check actually fails.
    """
    if failure is DEFAULT:
        return partial(EnsureError.of, default_message, check=check, **context)
    if isinstance(failure, str):
        return partial(EnsureError.of, failure, check=check)
    return failure  # type: ignore[return-value]


def get_or_raise(factory: Callable[[], T] | None) -> T:
    """Invoke a factory and return its non-``None`` result.

    Args:
        factory: Zero-argument callable to invoke

    Returns:
        Whatever the factory produced

    Raises:
        EnsureError: If the factory is ``None`` or produced ``None``
    """
    if factory is None:
        logger.debug("Guard failure: %s", MISSING_FACTORY_MESSAGE)
        raise EnsureError.of(MISSING_FACTORY_MESSAGE, guard="missing_factory")

    result = factory()
    if result is None:
        logger.debug("Guard failure: %s (factory=%r)", EMPTY_RESULT_MESSAGE, factory)
        raise EnsureError.of(EMPTY_RESULT_MESSAGE, guard="empty_result")
    return result


def build_failure(
    factory: FailureFactory | None,
) -> BaseException | type[BaseException]:
    """Produce the exception a failed check raises.

    Args:
        factory: The normalized failure-factory (see :func:`as_factory`)

    Returns:
        An exception instance or class, ready for ``raise``

    Raises:
        EnsureError: If the factory is missing, produced ``None``, or
            produced something that cannot be raised
    """
    failure = get_or_raise(factory)
    if isinstance(failure, BaseException):
        return failure
    if isinstance(failure, type) and issubclass(failure, BaseException):
        return failure

    type_name = type(failure).__name__
    logger.debug("Guard failure: factory %r produced a %s", factory, type_name)
    raise EnsureError.of(
        INVALID_RESULT_MESSAGE.format(type_name=type_name),
        guard="invalid_result",
    )


def qualified_name(cls: type | tuple[type, ...]) -> str:
    """Return ``module.qualname`` for a type, joined with ``or`` for tuples."""
    if isinstance(cls, tuple):
        return " or ".join(qualified_name(c) for c in cls)
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = [
    "DEFAULT",
    "FailureDescriptor",
    "FailureFactory",
    "as_factory",
    "build_failure",
    "get_or_raise",
    "qualified_name",
    "NOT_NULL_MESSAGE",
    "TRUE_MESSAGE",
    "FALSE_MESSAGE",
    "NOT_BLANK_MESSAGE",
    "EMPTY_ARRAY_MESSAGE",
    "EMPTY_COLLECTION_MESSAGE",
    "EMPTY_MAP_MESSAGE",
    "CONTAINS_NULL_MESSAGE",
    "MIN_MESSAGE",
    "MAX_MESSAGE",
    "EQUALS_MESSAGE",
    "NULL_CLASS_MESSAGE",
    "INSTANCE_OF_MESSAGE",
    "MISSING_FACTORY_MESSAGE",
    "EMPTY_RESULT_MESSAGE",
    "INVALID_RESULT_MESSAGE",
]
