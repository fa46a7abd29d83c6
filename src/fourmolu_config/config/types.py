# topmark:header:start
#
#   project      : fourmolu-config
#   file         : types.py
#   file_relpath : src/fourmolu_config/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `CommaStyle`, `HaddockPrintStyle`: enumerated printer option values.
    - `SourceType`, `ColorMode`: run-mode choices of the resolved configuration.
    - `DynOption`: opaque option string handed over to the source parser.

Design notes:
    - Enum values of printer options are the tags accepted in ``fourmolu.yaml``.
    - Prefer structural typing (``Mapping[str, Any]``) for CLI/API inputs so the
      config layer remains decoupled from any specific CLI framework.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class CommaStyle(str, Enum):
    """Where to place commas in multi-line lists."""

    LEADING = "leading"
    TRAILING = "trailing"


class HaddockPrintStyle(str, Enum):
    """How to print doc comments."""

    SINGLE_LINE = "single-line"
    MULTI_LINE = "multi-line"


class SourceType(str, Enum):
    """Kind of source the formatter parses."""

    MODULE = "module"
    SIGNATURE = "signature"


class ColorMode(str, Enum):
    """Whether to use colors and other features of ANSI terminals."""

    NEVER = "never"
    ALWAYS = "always"
    AUTO = "auto"

    @classmethod
    def from_name(cls, key_name: str | None) -> ColorMode | None:
        """Find the ColorMode member by its case-insensitive name (e.g., 'auto', 'never').

        Args:
            key_name (str | None): The string name of the member (e.g., "always") or None.

        Returns:
            ColorMode | None: The matching ColorMode member or None
                if the key is None or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper())


@dataclass(frozen=True, slots=True)
class DynOption:
    """A dynamic option passed verbatim to the source parser (e.g. ``-XGADTs``).

    Attributes:
        value (str): The raw option string.
    """

    value: str

    def __str__(self) -> str:
        """Return the raw option string."""
        return self.value
