# topmark:header:start
#
#   project      : fourmolu-config
#   file         : guards.py
#   file_relpath : src/fourmolu_config/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Type guards for values produced by YAML decoding.

These `TypeGuard`-based predicates help type checkers narrow the plain Python
values returned by ``yaml.safe_load`` (dicts, lists, scalars).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import YamlMapping


def is_yaml_mapping(obj: object) -> TypeGuard[YamlMapping]:
    """Type guard for a YAML mapping with string keys.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[YamlMapping]: ``True`` if ``obj`` is a mapping whose keys are all strings.
    """
    return isinstance(obj, Mapping) and all(isinstance(k, str) for k in obj)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[Any]]: True if obj is a list.
    """
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a string list value.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[str]]: True if obj is a list[str].
    """
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)
