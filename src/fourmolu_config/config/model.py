# topmark:header:start
#
#   project      : fourmolu-config
#   file         : model.py
#   file_relpath : src/fourmolu_config/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Resolved configuration and the layering of its sources.

This module defines:
    - `Config`: an immutable, runtime snapshot consumed by the formatter. It is
      generic over the stage of its region: `RegionIndices` as given by the user,
      `RegionDeltas` once the input's line count is known.
    - `resolve_config` / `load_config`: layering of caller overrides, the
      discovered ``fourmolu.yaml`` and the defaults.

Precedence (highest first):
    1) Caller overrides (CLI or API): ``cli_opts`` and the fixities already on
       the base ``Config``.
    2) The nearest ``fourmolu.yaml`` (see `fourmolu_config.config.discovery`).
    3) The printer options of the base ``Config`` (schema defaults unless the
       caller passed its own).

Immutability:
    - `Config` stores tuples, frozensets and read-only mappings and is
      ``frozen=True``. Derive modified copies with ``dataclasses.replace`` or
      `Config.map_region`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from fourmolu_config.config.config_file import merge_fixities
from fourmolu_config.config.discovery import (
    ConfigNotFound,
    ConfigParseError,
    load_config_file,
)
from fourmolu_config.config.io import to_yaml
from fourmolu_config.config.keys import Yaml, config_key
from fourmolu_config.config.logging import get_logger
from fourmolu_config.config.printer_opts import (
    PrinterOptsPartial,
    PrinterOptsTotal,
    default_printer_opts,
    iter_printer_opts_fields,
    resolve_printer_opts,
)
from fourmolu_config.config.region import RegionDeltas, RegionIndices, region_indices_to_deltas
from fourmolu_config.config.types import ColorMode, SourceType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from fourmolu_config.config.config_file import FourmoluConfig
    from fourmolu_config.config.discovery import ConfigFileLoadResult
    from fourmolu_config.config.io import YamlDict
    from fourmolu_config.config.logging import FourmoluLogger
    from fourmolu_config.config.types import DynOption
    from fourmolu_config.fixity import FixityInfo

logger: FourmoluLogger = get_logger(__name__)

R = TypeVar("R", RegionIndices, RegionDeltas)
S = TypeVar("S", RegionIndices, RegionDeltas)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config(Generic[R]):
    """Immutable runtime configuration of one formatting run.

    Attributes:
        dyn_options (tuple[DynOption, ...]): Options passed verbatim to the parser.
        fixity_overrides (Mapping[str, FixityInfo]): Operator fixities overriding
            the built-in ones (read-only).
        dependencies (frozenset[str]): Packages whose operators are in scope.
        unsafe (bool): Skip the check that formatting preserves the syntax tree.
        debug (bool): Emit debugging output.
        check_idempotence (bool): Check that formatting twice gives the same result.
        source_type (SourceType): Whether to parse a module or a signature.
        color_mode (ColorMode): Whether to color terminal output.
        region (R): The lines to format.
        printer_opts (PrinterOptsTotal): The resolved printer options.
    """

    dyn_options: tuple[DynOption, ...]
    fixity_overrides: Mapping[str, FixityInfo]
    dependencies: frozenset[str]
    unsafe: bool
    debug: bool
    check_idempotence: bool
    source_type: SourceType
    color_mode: ColorMode
    region: R
    printer_opts: PrinterOptsTotal

    def map_region(self, fn: Callable[[R], S]) -> Config[S]:
        """Return a copy whose region is ``fn(region)``; every other field is kept."""
        return cast("Config[S]", replace(self, region=fn(self.region)))

    def with_region_deltas(self: Config[RegionIndices], total_lines: int) -> Config[RegionDeltas]:
        """Validate the region against the input and convert it to deltas.

        Args:
            total_lines (int): Number of lines of the input.

        Returns:
            Config[RegionDeltas]: The config the formatter consumes.

        Raises:
            InvalidRegionError: If the region does not fit the input.
        """
        self.region.check(total_lines)
        return self.map_region(lambda indices: region_indices_to_deltas(total_lines, indices))

    def to_yaml_dict(self) -> YamlDict:
        """Convert this Config into a YAML-serializable dict for debug dumps."""
        return {
            "dyn-options": [str(opt) for opt in self.dyn_options],
            Yaml.KEY_FIXITIES: [
                info.to_declaration(name) for name, info in self.fixity_overrides.items()
            ],
            "dependencies": sorted(self.dependencies),
            "unsafe": self.unsafe,
            "debug": self.debug,
            "check-idempotence": self.check_idempotence,
            "source-type": self.source_type.value,
            "color-mode": self.color_mode.value,
            "region": {
                config_key(f.name): getattr(self.region, f.name) for f in fields(self.region)
            },
            "printer-opts": self.printer_opts.to_yaml_dict(),
        }


def default_config() -> Config[RegionIndices]:
    """Return the configuration used when no source sets anything.

    All flags off, module source, automatic colors, no options, fixities or
    dependencies, the whole input as region and the default printer options.
    """
    return Config(
        dyn_options=(),
        fixity_overrides=MappingProxyType({}),
        dependencies=frozenset(),
        unsafe=False,
        debug=False,
        check_idempotence=False,
        source_type=SourceType.MODULE,
        color_mode=ColorMode.AUTO,
        region=RegionIndices(),
        printer_opts=default_printer_opts(),
    )


# ------------------ Layering ------------------


def resolve_config(
    config: Config[R],
    *,
    file_config: FourmoluConfig | None = None,
    cli_opts: PrinterOptsPartial | None = None,
) -> Config[R]:
    """Layer caller overrides and a config file over ``config``.

    Args:
        config (Config[R]): Base configuration; its fixity overrides come from the
            caller and win over the file's, its printer options are the fallback.
        file_config (FourmoluConfig | None): Contents of the discovered config file.
        cli_opts (PrinterOptsPartial | None): Caller printer option overrides.

    Returns:
        Config[R]: The resolved configuration.
    """
    file_opts: PrinterOptsPartial = (
        file_config.printer_opts if file_config is not None else PrinterOptsPartial()
    )
    printer_opts: PrinterOptsTotal = resolve_printer_opts(
        cli_opts or PrinterOptsPartial(), file_opts, base=config.printer_opts
    )
    fixities: Mapping[str, FixityInfo] = config.fixity_overrides
    if file_config is not None:
        fixities = merge_fixities(config.fixity_overrides, file_config.fixities)
    return replace(config, printer_opts=printer_opts, fixity_overrides=fixities)


def load_config(
    start: Path,
    *,
    config: Config[RegionIndices] | None = None,
    cli_opts: PrinterOptsPartial | None = None,
) -> Config[RegionIndices]:
    """Discover the config file for ``start`` and resolve the run configuration.

    Args:
        start (Path): The source file (or directory) being formatted.
        config (Config[RegionIndices] | None): Base configuration; defaults to
            `default_config`.
        cli_opts (PrinterOptsPartial | None): Caller printer option overrides.

    Returns:
        Config[RegionIndices]: The resolved configuration.

    Raises:
        ConfigFileError: If the discovered config file is invalid. The error names
            the file.
    """
    base: Config[RegionIndices] = config if config is not None else default_config()
    result: ConfigFileLoadResult = load_config_file(start)

    if isinstance(result, ConfigParseError):
        logger.warning("Invalid config file: %s", result.message)
        raise result.error
    if isinstance(result, ConfigNotFound):
        logger.debug(
            "No config file found, using defaults. Searched: %s",
            ", ".join(str(p) for p in result.searched),
        )
        return resolve_config(base, cli_opts=cli_opts)

    logger.info("Loaded config from %s", result.path)
    return resolve_config(base, file_config=result.config, cli_opts=cli_opts)


# ------------------ Rendering ------------------


def render_default_config_yaml() -> str:
    """Return a starter ``fourmolu.yaml`` listing every option with its default.

    Each option is preceded by a comment describing it.

    Returns:
        str: YAML document text.
    """
    defaults: YamlDict = default_printer_opts().to_yaml_dict()
    chunks: list[str] = []
    for name, meta in iter_printer_opts_fields():
        key: str = config_key(name)
        entry: dict[str, Any] = {key: defaults[key]}
        chunks.append(f"# {meta.description}\n{to_yaml(entry)}")
    chunks.append(
        "# Fixity declarations of operators, e.g. 'infixr 5 <+>'\n"
        + to_yaml({Yaml.KEY_FIXITIES: []})
    )
    return "\n".join(chunks)
