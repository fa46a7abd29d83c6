# topmark:header:start
#
#   project      : fourmolu-config
#   file         : config_file.py
#   file_relpath : src/fourmolu_config/config/config_file.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Contents of a ``fourmolu.yaml`` file.

A config file holds a partial set of printer options plus an optional list of
fixity declarations::

    indentation: 2
    comma-style: trailing
    fixities:
      - infixr 5 <+>
      - infixl 1 &, `on`

Parsing is strict about values and lenient about keys: a value of the wrong
type, an unknown enum tag or an invalid fixity declaration makes the whole file
invalid, while keys that are neither printer options nor ``fixities`` are
ignored (and logged at debug level).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from fourmolu_config.config.errors import ConfigFileError
from fourmolu_config.config.io import get_string_list_value_checked, load_yaml_mapping
from fourmolu_config.config.keys import Yaml, config_key
from fourmolu_config.config.logging import get_logger
from fourmolu_config.config.printer_opts import PrinterOptsPartial, iter_printer_opts_fields
from fourmolu_config.fixity import FixityParseError, parse_fixity_declaration

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from fourmolu_config.config.io import YamlDict, YamlMapping
    from fourmolu_config.config.logging import FourmoluLogger
    from fourmolu_config.fixity import FixityInfo, FixityMap

logger: FourmoluLogger = get_logger(__name__)


def _known_keys() -> frozenset[str]:
    return frozenset(config_key(name) for name, _meta in iter_printer_opts_fields()) | {
        Yaml.KEY_FIXITIES
    }


@dataclass(frozen=True, slots=True)
class FourmoluConfig:
    """Options read from one ``fourmolu.yaml``.

    Attributes:
        printer_opts (PrinterOptsPartial): Printer options set by the file.
        fixities (FixityMap): Operator fixities declared by the file (read-only).
    """

    printer_opts: PrinterOptsPartial = field(default_factory=PrinterOptsPartial)
    fixities: FixityMap = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_yaml_mapping(cls, data: YamlMapping) -> FourmoluConfig:
        """Build a config from a decoded ``fourmolu.yaml`` document.

        Args:
            data (YamlMapping): The decoded top-level mapping.

        Returns:
            FourmoluConfig: The parsed file contents.

        Raises:
            ConfigFileError: If a value is invalid or a fixity declaration does not
                parse. The error carries no path; the caller binds it.
        """
        known: frozenset[str] = _known_keys()
        for key in data:
            if key not in known:
                logger.debug("Ignoring unknown key in config file: %r", key)

        printer_opts: PrinterOptsPartial = PrinterOptsPartial.from_yaml_mapping(data)
        declarations: list[str] = get_string_list_value_checked(data, Yaml.KEY_FIXITIES)
        return cls(printer_opts=printer_opts, fixities=parse_fixities(declarations))

    def to_yaml_dict(self) -> YamlDict:
        """Serialize to a YAML-friendly dict, in the layout of ``fourmolu.yaml``."""
        out: YamlDict = self.printer_opts.to_yaml_dict()
        if self.fixities:
            out[Yaml.KEY_FIXITIES] = [
                info.to_declaration(name) for name, info in self.fixities.items()
            ]
        return out


def parse_fixities(declarations: list[str]) -> FixityMap:
    """Parse fixity declarations into one operator map.

    Declarations are applied in order, so when an operator is declared more than
    once the last declaration wins.

    Args:
        declarations (list[str]): Declaration strings, in file order.

    Returns:
        FixityMap: Read-only mapping of operator name to fixity.

    Raises:
        ConfigFileError: If a declaration does not parse; the message is the
            parser's formatted error.
    """
    merged: dict[str, FixityInfo] = {}
    for text in declarations:
        try:
            pairs: list[tuple[str, FixityInfo]] = parse_fixity_declaration(text)
        except FixityParseError as exc:
            logger.debug("Invalid fixity declaration %r", text)
            raise ConfigFileError(exc.pretty()) from exc
        for name, info in pairs:
            if name in merged:
                logger.debug("Fixity of %r redeclared: %s", name, info)
            merged[name] = info
    return MappingProxyType(merged)


def read_config_file(path: Path) -> FourmoluConfig:
    """Read and parse one explicit ``fourmolu.yaml``.

    Args:
        path (Path): The config file.

    Returns:
        FourmoluConfig: The parsed file contents.

    Raises:
        ConfigFileError: If the file cannot be read, decoded or validated; the
            error is bound to ``path``.
    """
    logger.debug("Reading config file: %s", path)
    data: YamlMapping = load_yaml_mapping(path)
    try:
        config: FourmoluConfig = FourmoluConfig.from_yaml_mapping(data)
    except ConfigFileError as exc:
        raise exc.with_path(path) from exc
    logger.trace("Parsed %s: %s", path, config)
    return config


def merge_fixities(high: Mapping[str, FixityInfo], low: Mapping[str, FixityInfo]) -> FixityMap:
    """Return ``low`` overlaid with ``high`` (entries of ``high`` win)."""
    return MappingProxyType({**low, **high})
