# topmark:header:start
#
#   project      : fourmolu-config
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Tests for the resolved `Config` and the layering of its sources.

The goal is to ensure that:

* caller overrides win over the config file, which wins over defaults;
* caller fixities win over file fixities;
* a missing config file is not an error, an invalid one is;
* the region stage changes only through `Config.map_region`.
"""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import pytest
import yaml

from fourmolu_config.config import (
    ColorMode,
    CommaStyle,
    Config,
    ConfigFileError,
    DynOption,
    FourmoluConfig,
    InvalidRegionError,
    PrinterOptsPartial,
    RegionDeltas,
    RegionIndices,
    SourceType,
    default_config,
    default_printer_opts,
    load_config,
    render_default_config_yaml,
    resolve_config,
)
from fourmolu_config.fixity import FixityDirection, FixityInfo
from tests.conftest import parametrize, write_config

if TYPE_CHECKING:
    from pathlib import Path


INFIXL_5 = FixityInfo.declared(FixityDirection.INFIXL, 5)
INFIXR_2 = FixityInfo.declared(FixityDirection.INFIXR, 2)


def test_default_config() -> None:
    """Defaults: flags off, module source, auto color, empty collections."""
    cfg: Config[RegionIndices] = default_config()
    assert cfg.dyn_options == ()
    assert dict(cfg.fixity_overrides) == {}
    assert cfg.dependencies == frozenset()
    assert (cfg.unsafe, cfg.debug, cfg.check_idempotence) == (False, False, False)
    assert cfg.source_type is SourceType.MODULE
    assert cfg.color_mode is ColorMode.AUTO
    assert cfg.region == RegionIndices(None, None)
    assert cfg.printer_opts == default_printer_opts()


def test_config_is_immutable() -> None:
    """Fields of a resolved Config cannot be reassigned."""
    cfg: Config[RegionIndices] = default_config()
    with pytest.raises(AttributeError):
        cfg.debug = True  # type: ignore[misc]


def test_resolve_config_layers_printer_opts() -> None:
    """Caller options beat file options, which beat the base options."""
    file_config = FourmoluConfig(
        printer_opts=PrinterOptsPartial(indentation=8, comma_style=CommaStyle.TRAILING)
    )
    cfg: Config[RegionIndices] = resolve_config(
        default_config(),
        file_config=file_config,
        cli_opts=PrinterOptsPartial(indentation=2),
    )
    assert cfg.printer_opts.indentation == 2
    assert cfg.printer_opts.comma_style is CommaStyle.TRAILING
    assert cfg.printer_opts.respectful is True


def test_resolve_config_caller_fixities_win() -> None:
    """Fixities already on the Config override same-named file fixities."""
    base: Config[RegionIndices] = replace(
        default_config(), fixity_overrides=MappingProxyType({"<+>": INFIXR_2})
    )
    file_config = FourmoluConfig(fixities=MappingProxyType({"<+>": INFIXL_5, "<->": INFIXL_5}))

    cfg: Config[RegionIndices] = resolve_config(base, file_config=file_config)

    assert dict(cfg.fixity_overrides) == {"<+>": INFIXR_2, "<->": INFIXL_5}


def test_resolve_config_keeps_other_fields() -> None:
    """Layering only touches printer options and fixities."""
    base: Config[RegionIndices] = replace(
        default_config(),
        dyn_options=(DynOption("-XGADTs"),),
        dependencies=frozenset({"base"}),
        debug=True,
        region=RegionIndices(2, 4),
    )
    cfg: Config[RegionIndices] = resolve_config(base)
    assert cfg == base


def test_load_config_with_file(tmp_path: Path) -> None:
    """A discovered file is layered under caller options."""
    write_config(
        tmp_path, "indentation: 8\nhaddock-style: single-line\nfixities: [infixr 5 <+>]\n"
    )
    cfg: Config[RegionIndices] = load_config(
        tmp_path / "Mod.hs", cli_opts=PrinterOptsPartial(indentation=2)
    )
    assert cfg.printer_opts.indentation == 2
    assert cfg.printer_opts.haddock_style.value == "single-line"
    assert cfg.fixity_overrides["<+>"] == FixityInfo.declared(FixityDirection.INFIXR, 5)


def test_load_config_not_found_uses_defaults(tmp_path: Path) -> None:
    """Without a config file the defaults are used."""
    cfg: Config[RegionIndices] = load_config(tmp_path)
    assert cfg == default_config()


def test_load_config_raises_on_invalid_file(tmp_path: Path) -> None:
    """An invalid config file is never silently replaced by defaults."""
    bad: Path = write_config(tmp_path, "newlines-between-decls: -2\n")
    with pytest.raises(ConfigFileError) as excinfo:
        load_config(tmp_path)
    assert excinfo.value.path == bad


def test_map_region_keeps_other_fields() -> None:
    """``map_region`` rewrites the region only."""
    base: Config[RegionIndices] = replace(default_config(), unsafe=True)
    mapped: Config[RegionDeltas] = base.map_region(lambda _indices: RegionDeltas(1, 2))
    assert mapped.region == RegionDeltas(1, 2)
    assert mapped.unsafe is True
    assert mapped.printer_opts == base.printer_opts


def test_with_region_deltas() -> None:
    """Regions are checked against the input before conversion."""
    cfg: Config[RegionIndices] = replace(default_config(), region=RegionIndices(3, 7))
    assert cfg.with_region_deltas(10).region == RegionDeltas(2, 3)
    with pytest.raises(InvalidRegionError):
        cfg.with_region_deltas(5)


@parametrize("region", [RegionIndices(200, None), RegionIndices(None, -5)])
def test_with_region_deltas_rejects_open_ended_regions_outside_input(
    region: RegionIndices,
) -> None:
    """A single out-of-range bound is rejected even when the other is open."""
    cfg: Config[RegionIndices] = replace(default_config(), region=region)
    with pytest.raises(InvalidRegionError):
        cfg.with_region_deltas(100)


def test_to_yaml_dict() -> None:
    """The debug dump lists every field with YAML keys."""
    cfg: Config[RegionIndices] = replace(
        default_config(),
        dyn_options=(DynOption("-XGADTs"),),
        fixity_overrides=MappingProxyType({"elem": INFIXL_5}),
        dependencies=frozenset({"lens", "base"}),
    )
    data: dict[str, Any] = cfg.to_yaml_dict()
    assert data["dyn-options"] == ["-XGADTs"]
    assert data["fixities"] == ["infixl 5 `elem`"]
    assert data["dependencies"] == ["base", "lens"]
    assert data["source-type"] == "module"
    assert data["color-mode"] == "auto"
    assert data["region"] == {"start": None, "end": None}
    assert data["printer-opts"] == default_printer_opts().to_yaml_dict()


def test_render_default_config_yaml() -> None:
    """The starter file documents every option and decodes to the defaults."""
    text: str = render_default_config_yaml()
    data: Any = yaml.safe_load(text)
    assert FourmoluConfig.from_yaml_mapping(data) == FourmoluConfig(
        printer_opts=default_printer_opts().thaw()
    )
    assert "# Number of spaces per indentation step\nindentation: 4\n" in text
    assert text.count("\n# ") >= 9
