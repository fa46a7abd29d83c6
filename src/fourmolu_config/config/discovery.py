# topmark:header:start
#
#   project      : fourmolu-config
#   file         : discovery.py
#   file_relpath : src/fourmolu_config/config/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Locate and load ``fourmolu.yaml``.

Discovery semantics:
    * The start path is made absolute without following symlinks, so a linked
      source file is anchored where the link lives; when it is not a
      directory (a source file, or a path that does not exist yet) its parent
      directory is the anchor.
    * The anchor and each of its ancestors are searched, **nearest first**; the
      first directory holding a ``fourmolu.yaml`` regular file wins. Files are
      *not* merged across directories.
    * The user configuration directory is searched last (see
      [`user_config_dir`][fourmolu_config.config.discovery.user_config_dir]).

Outcomes of [`load_config_file`][fourmolu_config.config.discovery.load_config_file]:
    * `ConfigLoaded`: a file was found and parsed.
    * `ConfigParseError`: a file was found but is invalid; carries the path.
    * `ConfigNotFound`: no candidate existed; carries every searched directory
      in search order, so the host can report them.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fourmolu_config.config.config_file import read_config_file
from fourmolu_config.config.errors import ConfigFileError
from fourmolu_config.config.logging import get_logger
from fourmolu_config.constants import (
    APPDATA_ENV_VAR,
    CONFIG_FILE_NAME,
    XDG_CONFIG_HOME_ENV_VAR,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fourmolu_config.config.config_file import FourmoluConfig
    from fourmolu_config.config.logging import FourmoluLogger

logger: FourmoluLogger = get_logger(__name__)


# ------------------ Outcomes ------------------


@dataclass(frozen=True, slots=True)
class ConfigLoaded:
    """A config file was found and parsed.

    Attributes:
        path (Path): The file that was loaded.
        config (FourmoluConfig): Its contents.
    """

    path: Path
    config: FourmoluConfig


@dataclass(frozen=True, slots=True)
class ConfigParseError:
    """A config file was found but could not be parsed.

    Attributes:
        path (Path): The offending file.
        error (ConfigFileError): The decoding or validation error.
    """

    path: Path
    error: ConfigFileError

    @property
    def message(self) -> str:
        """Human-readable error text, prefixed with the file location."""
        return str(self.error)


@dataclass(frozen=True, slots=True)
class ConfigNotFound:
    """No config file exists in any searched directory.

    Attributes:
        searched (tuple[Path, ...]): Every directory searched, in search order.
    """

    searched: tuple[Path, ...]


ConfigFileLoadResult = ConfigLoaded | ConfigParseError | ConfigNotFound


# ------------------ Search path ------------------


def user_config_dir() -> Path:
    """Return the user configuration directory.

    ``$XDG_CONFIG_HOME`` when it is set to an absolute path, otherwise
    ``~/.config``. On Windows ``%APPDATA%`` is used when set. The environment is
    read on every call.

    Returns:
        Path: The directory searched after all ancestors of the start path.
    """
    if sys.platform == "win32":
        appdata: str | None = os.environ.get(APPDATA_ENV_VAR)
        if appdata:
            return Path(appdata)
    xdg: str | None = os.environ.get(XDG_CONFIG_HOME_ENV_VAR)
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


def config_search_dirs(start: Path) -> list[Path]:
    """Return the directories searched for ``fourmolu.yaml``, in search order.

    Args:
        start (Path): A source file or directory; relative paths are taken from
            the current working directory.

    Returns:
        list[Path]: The anchor directory, each of its ancestors (nearest first),
            then the user configuration directory.
    """
    cur: Path = Path(os.path.abspath(start))
    if not cur.is_dir():
        cur = cur.parent
    dirs: list[Path] = [cur, *cur.parents]
    dirs.append(user_config_dir())
    return dirs


def _iter_candidates(start: Path) -> Iterator[tuple[Path, Path]]:
    """Yield ``(directory, config path)`` pairs in search order."""
    for directory in config_search_dirs(start):
        candidate: Path = directory / CONFIG_FILE_NAME
        logger.trace("Looking for config file: %s", candidate)
        yield directory, candidate


def find_config_file(start: Path) -> Path | None:
    """Return the ``fourmolu.yaml`` that applies to ``start``, if any."""
    for _directory, candidate in _iter_candidates(start):
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
    return None


# ------------------ Loading ------------------


def load_config_file(start: Path) -> ConfigFileLoadResult:
    """Find and parse the ``fourmolu.yaml`` that applies to ``start``.

    Args:
        start (Path): A source file or directory.

    Returns:
        ConfigFileLoadResult: `ConfigLoaded`, `ConfigParseError` (with the path
            of the offending file) or `ConfigNotFound` (with the searched
            directories).
    """
    searched: list[Path] = []
    for directory, candidate in _iter_candidates(start):
        searched.append(directory)
        if not candidate.is_file():
            continue
        logger.debug("Discovered config file: %s", candidate)
        try:
            config: FourmoluConfig = read_config_file(candidate)
        except ConfigFileError as exc:
            return ConfigParseError(path=candidate, error=exc)
        return ConfigLoaded(path=candidate, config=config)

    logger.debug("No %s found; searched %d directories", CONFIG_FILE_NAME, len(searched))
    return ConfigNotFound(searched=tuple(searched))
