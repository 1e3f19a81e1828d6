"""
Utility functions used across the aws_saml_roles codebase.

This module contains general-purpose helpers shared by the configuration
builder and the attribute transformer.
"""

from typing import Any, List


def as_list(value: Any) -> List[Any]:
    """
    Normalize a scalar-or-list value into a list.

    Configuration files and host pipelines both allow a single item where a
    list is expected, so every multi-valued input goes through this helper.

    Args:
        value: A single value, a list/tuple/set of values, or None

    Returns:
        List of values (empty for None, one element for a scalar)
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return [value]
