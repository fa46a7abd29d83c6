# topmark:header:start
#
#   project      : fourmolu-config
#   file         : __init__.py
#   file_relpath : src/fourmolu_config/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""YAML I/O helpers for the configuration layer.

This package centralizes the helpers for reading, validating, and writing YAML
used by the configuration layer. Keeping these utilities separate helps avoid
import cycles and keeps the model classes small and focused.

Typical flow:
    1. Load a ``fourmolu.yaml`` file into a mapping (``load_yaml_mapping``).
    2. Read values with the checked getters (a bad value raises ``ConfigFileError``).
    3. Serialize a configuration back to YAML when needed (``to_yaml``).

YAML parsing/formatting:
    PyYAML's ``safe_load``/``safe_dump`` are used; no custom tags are accepted.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_enum_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
)
from .guards import is_any_list, is_str_list, is_yaml_mapping
from .loaders import load_yaml_mapping, loads_yaml_mapping
from .render import to_yaml
from .types import YamlDict, YamlMapping

__all__ = [
    "YamlDict",
    "YamlMapping",
    "get_bool_value_or_none_checked",
    "get_enum_value_or_none_checked",
    "get_int_value_or_none_checked",
    "get_string_list_value_checked",
    "is_any_list",
    "is_str_list",
    "is_yaml_mapping",
    "load_yaml_mapping",
    "loads_yaml_mapping",
    "to_yaml",
]
