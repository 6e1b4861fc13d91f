"""Precondition checks for dataknobs packages.

This package provides small, stateless checks that validate a value and
either return it or raise:

- **Null checks**: ``not_null``, ``not_null_or_else``, ``not_null_or_else_get``,
  ``not_null_or_else_throw``
- **Booleans**: ``is_true``, ``is_false``
- **Strings**: ``not_blank``
- **Containers**: ``not_empty``, ``not_empty_sequence``, ``not_empty_collection``,
  ``not_empty_mapping``, ``not_contains_null``
- **Numbers**: ``min_value``, ``max_value``
- **Objects**: ``equals``, ``is_instance_of``

Example:
    ```python
    from dataknobs_ensure import ensure

    class Person:
        def __init__(self, name: str, age: int):
            self.name = ensure.not_blank(name, "name must not be blank")
            self.age = ensure.min_value(0, age)

    # Raise your own exception type instead of EnsureError
    ensure.not_blank(key, lambda: ValueError("key must not be blank"))
    ```
"""

from dataknobs_ensure import ensure
from dataknobs_ensure.ensure import (
    equals,
    is_false,
    is_instance_of,
    is_true,
    max_value,
    min_value,
    not_blank,
    not_contains_null,
    not_empty,
    not_empty_collection,
    not_empty_mapping,
    not_empty_sequence,
    not_null,
    not_null_or_else,
    not_null_or_else_get,
    not_null_or_else_throw,
)
from dataknobs_ensure.exceptions import EnsureError
from dataknobs_ensure.failures import DEFAULT, FailureDescriptor, FailureFactory

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Module namespace
    "ensure",
    # Exceptions
    "EnsureError",
    # Failure descriptors
    "DEFAULT",
    "FailureDescriptor",
    "FailureFactory",
    # Null checks
    "not_null",
    "not_null_or_else",
    "not_null_or_else_get",
    "not_null_or_else_throw",
    # Booleans
    "is_true",
    "is_false",
    # Strings
    "not_blank",
    # Containers
    "not_empty",
    "not_empty_sequence",
    "not_empty_collection",
    "not_empty_mapping",
    "not_contains_null",
    # Numbers
    "min_value",
    "max_value",
    # Objects
    "equals",
    "is_instance_of",
]
