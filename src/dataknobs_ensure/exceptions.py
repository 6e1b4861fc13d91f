"""Failure kind raised by dataknobs_ensure checks.

``EnsureError`` is the only exception type this package raises on its own.
It extends :class:`dataknobs_common.exceptions.ValidationError`, so any
``except DataknobsError`` handler already in place also catches failed
preconditions.

Example:
    ```python
    from dataknobs_ensure import EnsureError, ensure

    try:
        ensure.min_value(1, quantity)
    except EnsureError as e:
        logger.warning(f"Rejected order: {e}")
        logger.debug(f"Context: {e.context}")
    ```

Checks called with a failure-factory raise whatever the factory builds
instead, which lets callers keep their own exception taxonomy:

    ```python
    ensure.not_blank(name, lambda: ValueError("name must not be blank"))
    ```
"""

from __future__ import annotations

from typing import Any

from dataknobs_common.exceptions import ValidationError


class EnsureError(ValidationError):
    """Raised when a precondition check fails.

    Attributes:
        context: Dictionary describing the failed check. Always contains
            ``"check"`` for check failures, or ``"guard"`` when the
            caller-supplied factory itself was broken.
        details: Alias for context.

    Example:
        ```python
        error = EnsureError.of("object must not be null", check="not_null")
        str(error)
        # 'object must not be null'
        error.context
        # {'check': 'not_null'}
        ```
    """

    @classmethod
    def of(cls, message: str, **context: Any) -> EnsureError:
        """Create an ``EnsureError`` with the given message.

        Args:
            message: Human-readable error message
            **context: Optional context entries

        Returns:
            A new, unraised ``EnsureError``
        """
        return cls(message, context=context or None)


__all__ = [
    "EnsureError",
]
