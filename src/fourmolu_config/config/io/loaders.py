# topmark:header:start
#
#   project      : fourmolu-config
#   file         : loaders.py
#   file_relpath : src/fourmolu_config/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Load YAML configuration documents.

Parsing is done with PyYAML's ``safe_load`` and returned as plain ``dict``
structures. Decoding problems are raised as
[`ConfigFileError`][fourmolu_config.config.errors.ConfigFileError] carrying the
1-based position reported by the YAML parser, so discovery can surface them
verbatim to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from fourmolu_config.config.errors import ConfigFileError
from fourmolu_config.config.logging import get_logger

from .guards import is_yaml_mapping

if TYPE_CHECKING:
    from pathlib import Path

    from fourmolu_config.config.logging import FourmoluLogger

    from .types import YamlMapping

logger: FourmoluLogger = get_logger(__name__)


def loads_yaml_mapping(text: str) -> YamlMapping:
    """Decode a YAML document whose top level must be a mapping.

    Args:
        text (str): The YAML document text.

    Returns:
        YamlMapping: The decoded top-level mapping.

    Raises:
        ConfigFileError: If the text is not valid YAML or its top level is not a
            mapping with string keys. An empty document is not a mapping.
    """
    try:
        data: Any = yaml.safe_load(text)
    except yaml.MarkedYAMLError as exc:
        mark: yaml.Mark | None = exc.problem_mark or exc.context_mark
        raise ConfigFileError(
            str(exc),
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigFileError(str(exc)) from exc

    if not is_yaml_mapping(data):
        raise ConfigFileError(
            f"Expected a mapping at the top level of the document, got {type(data).__name__}"
        )
    return data


def load_yaml_mapping(path: Path) -> YamlMapping:
    """Load and decode a YAML file from the filesystem.

    Args:
        path (Path): Path to a YAML document (e.g., ``fourmolu.yaml``).

    Returns:
        YamlMapping: The decoded top-level mapping.

    Raises:
        ConfigFileError: If the file cannot be read or decoded; the error is bound
            to ``path``.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        raise ConfigFileError(f"Cannot read file: {exc}", path=path) from exc

    try:
        return loads_yaml_mapping(text)
    except ConfigFileError as exc:
        raise exc.with_path(path) from exc
