# topmark:header:start
#
#   project      : fourmolu-config
#   file         : __init__.py
#   file_relpath : src/fourmolu_config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""fourmolu-config package.

Configuration layer of the Fourmolu source formatter: printer options with
partial/total views, layered resolution, ``fourmolu.yaml`` discovery and
region conversion. The formatter proper consumes the resolved
[`Config`][fourmolu_config.config.model.Config] produced here.

Typical use by a host tool::

    cfg = load_config(Path("src/Main.hs"), cli_opts=PrinterOptsPartial.from_args(args))
    run_cfg = cfg.with_region_deltas(total_lines)
"""

from __future__ import annotations

# `config` must initialize before `fixity`: the config file parser imports
# `fixity`, whose parser logs through `fourmolu_config.config.logging`.
from fourmolu_config.config import (
    Config,
    ConfigFileError,
    PrinterOptsPartial,
    PrinterOptsTotal,
    default_config,
    load_config,
    load_config_file,
)
from fourmolu_config.constants import FOURMOLU_CONFIG_VERSION

__all__ = [
    "Config",
    "ConfigFileError",
    "PrinterOptsPartial",
    "PrinterOptsTotal",
    "default_config",
    "get_version",
    "load_config",
    "load_config_file",
]


def get_version() -> str:
    """Return the installed fourmolu-config version string."""
    return FOURMOLU_CONFIG_VERSION
