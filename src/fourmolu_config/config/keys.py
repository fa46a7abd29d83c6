# topmark:header:start
#
#   project      : fourmolu-config
#   file         : keys.py
#   file_relpath : src/fourmolu_config/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Canonical YAML key names for ``fourmolu.yaml``.

Printer option keys are *derived* from the option schema with
[`config_key`][fourmolu_config.config.keys.config_key]; they are deliberately
not repeated here so the schema stays the only list of options. This module
only holds the reserved keys that do not belong to the schema.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Yaml:
    """Reserved YAML keys of ``fourmolu.yaml``."""

    # Ordered list of fixity declarations, e.g. ["infixr 5 <+>"]
    KEY_FIXITIES: Final[str] = "fixities"


def config_key(field_name: str) -> str:
    """Return the YAML key of a printer option attribute.

    Attribute names are lowercase words separated by underscores; the YAML key
    uses the same words separated by hyphens (``comma_style`` → ``comma-style``).

    Args:
        field_name (str): Attribute name as declared on the printer option views.

    Returns:
        str: The hyphen-separated key used in ``fourmolu.yaml``.
    """
    return field_name.replace("_", "-")
