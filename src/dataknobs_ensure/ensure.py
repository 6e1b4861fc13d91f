"""Precondition checks that return the validated value or raise.

Every check follows the same three-tier calling pattern. The last argument,
``failure``, selects how a violation is reported:

    ```python
    from dataknobs_ensure import ensure

    ensure.not_blank(name)                                  # EnsureError, default message
    ensure.not_blank(name, "name must not be blank")        # EnsureError, custom message
    ensure.not_blank(name, lambda: ValueError("bad name"))  # caller's own exception
    ```

Checks that validate a value return it unchanged, so they can be used inline:

    ```python
    self.port = ensure.max_value(65535, ensure.min_value(1, port))
    ```

A failure-factory is only called when the check fails. Passing ``None`` as the
factory is reported as ``EnsureError("factory was not provided")`` at that
point, and a factory that returns ``None`` is reported as
``EnsureError("factory produced no failure object")``.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping, Sequence
from typing import Any, TypeVar

from dataknobs_ensure.failures import (
    CONTAINS_NULL_MESSAGE,
    DEFAULT,
    EMPTY_ARRAY_MESSAGE,
    EMPTY_COLLECTION_MESSAGE,
    EMPTY_MAP_MESSAGE,
    EQUALS_MESSAGE,
    FALSE_MESSAGE,
    INSTANCE_OF_MESSAGE,
    MAX_MESSAGE,
    MIN_MESSAGE,
    NOT_BLANK_MESSAGE,
    NOT_NULL_MESSAGE,
    NULL_CLASS_MESSAGE,
    TRUE_MESSAGE,
    FailureDescriptor,
    as_factory,
    build_failure,
    get_or_raise,
    qualified_name,
)

T = TypeVar("T")
N = TypeVar("N", int, float)
S = TypeVar("S", bound=Sequence[Any])
C = TypeVar("C", bound=Collection[Any])
M = TypeVar("M", bound=Mapping[Any, Any])


# ---------------------------------------------------------------------------
# Null checks
# ---------------------------------------------------------------------------


def not_null(obj: T | None, failure: FailureDescriptor = DEFAULT) -> T:
    """Ensure ``obj`` is not ``None``.

    Args:
        obj: Value to check
        failure: Message or failure-factory used when ``obj`` is ``None``

    Returns:
        ``obj``, unchanged

    Raises:
        EnsureError: With "object must not be null" by default
    """
    if obj is None:
        raise build_failure(as_factory(failure, "not_null", NOT_NULL_MESSAGE))
    return obj


def not_null_or_else(obj: T | None, default: T) -> T:
    """Return ``obj``, or ``default`` when ``obj`` is ``None``. Never raises."""
    if obj is None:
        return default
    return obj


def not_null_or_else_get(obj: T | None, factory: Callable[[], T] | None) -> T:
    """Return ``obj``, or a fallback built by ``factory`` when ``obj`` is ``None``.

    The factory is only called when a fallback is needed.

    Args:
        obj: Value to check
        factory: Zero-argument callable producing the fallback value

    Returns:
        ``obj`` or the fallback value

    Raises:
        EnsureError: If a fallback is needed and ``factory`` is ``None`` or
            returns ``None``
    """
    if obj is None:
        return get_or_raise(factory)
    return obj


def not_null_or_else_throw(obj: T | None, failure: FailureDescriptor = DEFAULT) -> T:
    """Return ``obj``, raising when it is ``None``.

    Raises:
        EnsureError: With "object must not be null" by default
    """
    if obj is None:
        raise build_failure(
            as_factory(failure, "not_null_or_else_throw", NOT_NULL_MESSAGE)
        )
    return obj


# ---------------------------------------------------------------------------
# Boolean checks
# ---------------------------------------------------------------------------


def is_true(expression: Any, failure: FailureDescriptor = DEFAULT) -> None:
    """Ensure ``expression`` is true.

    Raises:
        EnsureError: With "boolean must be true" by default
    """
    if not expression:
        raise build_failure(as_factory(failure, "is_true", TRUE_MESSAGE))


def is_false(expression: Any, failure: FailureDescriptor = DEFAULT) -> None:
    """Ensure ``expression`` is false.

    Raises:
        EnsureError: With "boolean must be false" by default
    """
    if expression:
        raise build_failure(as_factory(failure, "is_false", FALSE_MESSAGE))


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def not_blank(s: str | None, failure: FailureDescriptor = DEFAULT) -> str:
    """Ensure ``s`` is not ``None``, empty, or whitespace only.

    ``None`` is reported with the same message as a blank string.

    Args:
        s: String to check
        failure: Message or failure-factory used when ``s`` is blank

    Returns:
        ``s``, unchanged (surrounding whitespace is kept)

    Raises:
        EnsureError: With "string must not be blank" by default
    """
    factory = as_factory(failure, "not_blank", NOT_BLANK_MESSAGE)
    not_null(s, factory)
    if not s.strip():  # type: ignore[union-attr]
        raise build_failure(factory)
    return s  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Sequences, collections and mappings
# ---------------------------------------------------------------------------


def not_empty_sequence(seq: S | None, failure: FailureDescriptor = DEFAULT) -> S:
    """Ensure an ordered sequence (list, tuple, ...) is not ``None`` or empty.

    Raises:
        EnsureError: With "array must not be empty" by default
    """
    factory = as_factory(failure, "not_empty_sequence", EMPTY_ARRAY_MESSAGE)
    not_null(seq, factory)
    if len(seq) == 0:  # type: ignore[arg-type]
        raise build_failure(factory)
    return seq  # type: ignore[return-value]


def not_empty_collection(coll: C | None, failure: FailureDescriptor = DEFAULT) -> C:
    """Ensure a collection (set, list, ...) is not ``None`` or empty.

    Raises:
        EnsureError: With "collection must not be empty" by default
    """
    factory = as_factory(failure, "not_empty_collection", EMPTY_COLLECTION_MESSAGE)
    not_null(coll, factory)
    if len(coll) == 0:  # type: ignore[arg-type]
        raise build_failure(factory)
    return coll  # type: ignore[return-value]


def not_empty_mapping(mapping: M | None, failure: FailureDescriptor = DEFAULT) -> M:
    """Ensure a mapping is not ``None`` or empty.

    Raises:
        EnsureError: With "map must not be empty" by default
    """
    factory = as_factory(failure, "not_empty_mapping", EMPTY_MAP_MESSAGE)
    not_null(mapping, factory)
    if len(mapping) == 0:  # type: ignore[arg-type]
        raise build_failure(factory)
    return mapping  # type: ignore[return-value]


def not_empty(value: T | None, failure: FailureDescriptor = DEFAULT) -> T:
    """Ensure ``value`` is not ``None`` or empty, dispatching on its type.

    Mappings go to :func:`not_empty_mapping`, other sequences (including
    strings) to :func:`not_empty_sequence`, and everything else, ``None``
    included, to :func:`not_empty_collection`. The dispatched check decides
    the default message.
    """
    if isinstance(value, Mapping):
        return not_empty_mapping(value, failure)  # type: ignore[return-value]
    if isinstance(value, Sequence):
        return not_empty_sequence(value, failure)  # type: ignore[return-value]
    return not_empty_collection(value, failure)  # type: ignore[arg-type]


def not_contains_null(coll: C | None, failure: FailureDescriptor = DEFAULT) -> C:
    """Ensure a collection is not ``None`` and holds no ``None`` elements.

    An empty collection passes; combine with :func:`not_empty_collection`
    when emptiness matters too.

    Raises:
        EnsureError: With "collection must not contain null elements" by default
    """
    factory = as_factory(failure, "not_contains_null", CONTAINS_NULL_MESSAGE)
    not_null(coll, factory)
    if any(item is None for item in coll):  # type: ignore[union-attr]
        raise build_failure(factory)
    return coll  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def min_value(minimum: N, n: N, failure: FailureDescriptor = DEFAULT) -> N:
    """Ensure ``n >= minimum`` (inclusive).

    Args:
        minimum: Lowest allowed value
        n: Value to check
        failure: Message or failure-factory used when ``n < minimum``

    Returns:
        ``n``, unchanged

    Raises:
        EnsureError: With "value must be greater than or equal to <minimum>,
            but was <n>" by default
    """
    if n < minimum:
        raise build_failure(
            as_factory(
                failure,
                "min_value",
                MIN_MESSAGE.format(minimum=minimum, value=n),
                boundary=minimum,
                value=n,
            )
        )
    return n


def max_value(maximum: N, n: N, failure: FailureDescriptor = DEFAULT) -> N:
    """Ensure ``n <= maximum`` (inclusive).

    Args:
        maximum: Highest allowed value
        n: Value to check
        failure: Message or failure-factory used when ``n > maximum``

    Returns:
        ``n``, unchanged

    Raises:
        EnsureError: With "value must be less than or equal to <maximum>,
            but was <n>" by default
    """
    if n > maximum:
        raise build_failure(
            as_factory(
                failure,
                "max_value",
                MAX_MESSAGE.format(maximum=maximum, value=n),
                boundary=maximum,
                value=n,
            )
        )
    return n


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


def equals(obj: Any, other: Any, failure: FailureDescriptor = DEFAULT) -> None:
    """Ensure ``obj`` and ``other`` are the same object or compare equal.

    Identity is checked before anything else, so ``equals(None, None)``
    passes. Otherwise ``obj`` must not be ``None`` and ``obj == other``
    must hold.

    Raises:
        EnsureError: With "objects must be equal" by default
    """
    if obj is other:
        return
    factory = as_factory(failure, "equals", EQUALS_MESSAGE)
    not_null(obj, factory)
    if obj == other:
        return
    raise build_failure(factory)


def is_instance_of(
    cls: type | tuple[type, ...] | None,
    obj: T,
    failure: FailureDescriptor = DEFAULT,
) -> T:
    """Ensure ``obj`` is an instance of ``cls``.

    ``cls`` may be a type or a tuple of types, as with ``isinstance``.

    With the default message a missing ``cls`` fails with "clazz must not be
    null", which is distinct from a mismatch. A custom message or factory is
    used for both failures.

    Args:
        cls: Expected type(s)
        obj: Value to check
        failure: Message or failure-factory used when the check fails

    Returns:
        ``obj``, unchanged

    Raises:
        EnsureError: With "object must be an instance of <module.qualname>"
            by default
    """
    if failure is DEFAULT:
        not_null(cls, as_factory(DEFAULT, "is_instance_of", NULL_CLASS_MESSAGE))
        type_name = qualified_name(cls)  # type: ignore[arg-type]
        factory = as_factory(
            DEFAULT,
            "is_instance_of",
            INSTANCE_OF_MESSAGE.format(type_name=type_name),
            expected_type=type_name,
        )
    else:
        factory = as_factory(failure, "is_instance_of")
        not_null(cls, factory)

    if not isinstance(obj, cls):  # type: ignore[arg-type]
        raise build_failure(factory)
    return obj


__all__ = [
    "not_null",
    "not_null_or_else",
    "not_null_or_else_get",
    "not_null_or_else_throw",
    "is_true",
    "is_false",
    "not_blank",
    "not_empty",
    "not_empty_sequence",
    "not_empty_collection",
    "not_empty_mapping",
    "not_contains_null",
    "min_value",
    "max_value",
    "equals",
    "is_instance_of",
]
