# topmark:header:start
#
#   project      : fourmolu-config
#   file         : render.py
#   file_relpath : src/fourmolu_config/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""YAML rendering helpers.

These helpers serialize plain Python structures (as produced by the
``to_yaml_dict()`` methods of the config model) into YAML text. They perform
no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from .types import YamlMapping


def _plain(value: Any) -> Any:
    """Convert enums and nested containers into YAML-safe builtins."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items: list[Any] = [_plain(v) for v in value]
        return sorted(items) if isinstance(value, (set, frozenset)) else items
    return value


def to_yaml(data: YamlMapping) -> str:
    """Render a mapping as a YAML document.

    Key order is preserved; enums are rendered through their values.

    Args:
        data (YamlMapping): The mapping to render.

    Returns:
        str: YAML document text.
    """
    return yaml.safe_dump(
        _plain(data),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
