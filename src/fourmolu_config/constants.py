# topmark:header:start
#
#   project      : fourmolu-config
#   file         : constants.py
#   file_relpath : src/fourmolu_config/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""fourmolu-config Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FOURMOLU_CONFIG_VERSION: str = get_version("fourmolu-config")

# Name of the configuration file looked up during discovery (not configurable).
CONFIG_FILE_NAME: str = "fourmolu.yaml"

# Environment variables consulted by the config layer.
LOG_LEVEL_ENV_VAR: str = "FOURMOLU_LOG_LEVEL"
XDG_CONFIG_HOME_ENV_VAR: str = "XDG_CONFIG_HOME"
APPDATA_ENV_VAR: str = "APPDATA"
