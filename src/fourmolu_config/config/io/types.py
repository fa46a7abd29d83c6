# topmark:header:start
#
#   project      : fourmolu-config
#   file         : types.py
#   file_relpath : src/fourmolu_config/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Shared YAML-related type aliases for the config I/O package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

YamlMapping = Mapping[str, Any]
YamlDict = dict[str, Any]
