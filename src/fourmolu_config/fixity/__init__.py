# topmark:header:start
#
#   project      : fourmolu-config
#   file         : __init__.py
#   file_relpath : src/fourmolu_config/fixity/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Fixity declarations: value types and the declaration parser.

The configuration layer only depends on
[`parse_fixity_declaration`][fourmolu_config.fixity.parser.parse_fixity_declaration]
(text in, ``(operator, fixity)`` pairs or a
[`FixityParseError`][fourmolu_config.fixity.parser.FixityParseError] out).
"""

from __future__ import annotations

from .model import FixityDirection, FixityInfo, FixityMap
from .parser import FixityParseError, parse_fixity_declaration

__all__ = [
    "FixityDirection",
    "FixityInfo",
    "FixityMap",
    "FixityParseError",
    "parse_fixity_declaration",
]
