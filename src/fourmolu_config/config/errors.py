# topmark:header:start
#
#   project      : fourmolu-config
#   file         : errors.py
#   file_relpath : src/fourmolu_config/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Exceptions raised by the configuration layer.

Usage:
    Raise these exceptions while decoding or validating configuration so the
    host tool can decide whether to abort a run or to proceed with defaults.

Notes:
    A missing configuration file is *not* an error: discovery reports it as a
    [`ConfigNotFound`][fourmolu_config.config.discovery.ConfigNotFound] outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Base class for all configuration errors."""


class ConfigFileError(ConfigError):
    """A configuration document could not be decoded or holds an invalid value.

    Attributes:
        message (str): Human-readable, already formatted message. Messages coming
            from the YAML decoder or from the fixity parser are kept verbatim.
        path (Path | None): The offending file, when known.
        line (int | None): 1-based line of the problem, when known.
        column (int | None): 1-based column of the problem, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column

    def __str__(self) -> str:
        """Return the message prefixed with the file location, if any."""
        if self.path is None:
            return self.message
        loc: str = str(self.path)
        if self.line is not None:
            loc = f"{loc}:{self.line}"
            if self.column is not None:
                loc = f"{loc}:{self.column}"
        return f"{loc}: {self.message}"

    def with_path(self, path: Path) -> ConfigFileError:
        """Return a copy of this error bound to ``path``."""
        return ConfigFileError(self.message, path=path, line=self.line, column=self.column)


class InvalidRegionError(ConfigError, ValueError):
    """A region selection does not fit the input it is applied to."""
