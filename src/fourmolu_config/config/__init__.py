# topmark:header:start
#
#   project      : fourmolu-config
#   file         : __init__.py
#   file_relpath : src/fourmolu_config/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Configuration handling for the Fourmolu formatter.

This package defines the printer option schema and its partial/total views,
discovery and parsing of ``fourmolu.yaml``, the layering of caller overrides
over file options over defaults, and the resolved `Config` consumed by the
formatter, including conversion of the user's region to line deltas.
"""

from __future__ import annotations

from .config_file import FourmoluConfig, parse_fixities, read_config_file
from .discovery import (
    ConfigFileLoadResult,
    ConfigLoaded,
    ConfigNotFound,
    ConfigParseError,
    config_search_dirs,
    find_config_file,
    load_config_file,
    user_config_dir,
)
from .errors import ConfigError, ConfigFileError, InvalidRegionError
from .model import (
    Config,
    default_config,
    load_config,
    render_default_config_yaml,
    resolve_config,
)
from .printer_opts import (
    PRINTER_OPTS_META,
    FieldMeta,
    PrinterOptsMeta,
    PrinterOptsPartial,
    PrinterOptsTotal,
    default_printer_opts,
    fill_missing,
    iter_printer_opts_fields,
    over_fields,
    printer_opts_field_index,
    resolve_printer_opts,
)
from .region import RegionDeltas, RegionIndices, region_indices_to_deltas
from .types import ColorMode, CommaStyle, DynOption, HaddockPrintStyle, SourceType

__all__ = [
    "PRINTER_OPTS_META",
    "ColorMode",
    "CommaStyle",
    "Config",
    "ConfigError",
    "ConfigFileError",
    "ConfigFileLoadResult",
    "ConfigLoaded",
    "ConfigNotFound",
    "ConfigParseError",
    "DynOption",
    "FieldMeta",
    "FourmoluConfig",
    "HaddockPrintStyle",
    "InvalidRegionError",
    "PrinterOptsMeta",
    "PrinterOptsPartial",
    "PrinterOptsTotal",
    "RegionDeltas",
    "RegionIndices",
    "SourceType",
    "config_search_dirs",
    "default_config",
    "default_printer_opts",
    "fill_missing",
    "find_config_file",
    "iter_printer_opts_fields",
    "load_config",
    "load_config_file",
    "over_fields",
    "parse_fixities",
    "printer_opts_field_index",
    "read_config_file",
    "region_indices_to_deltas",
    "render_default_config_yaml",
    "resolve_config",
    "resolve_printer_opts",
    "user_config_dir",
]
