# topmark:header:start
#
#   project      : fourmolu-config
#   file         : test_printer_opts.py
#   file_relpath : tests/config/test_printer_opts.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Tests for the printer option schema and its partial/total algebra.

These tests exercise the interaction between:

* `PrinterOptsPartial` (every field ``T | None``)
* `PrinterOptsTotal` (fully-resolved runtime view)
* `fill_missing` / `PrinterOptsPartial.combine` (merge semantics)
* `resolve_printer_opts` (caller > file > defaults)
* the metadata table that drives all of the above
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any

import pytest
from hypothesis import given

from fourmolu_config.config import (
    PRINTER_OPTS_META,
    CommaStyle,
    ConfigFileError,
    FieldMeta,
    HaddockPrintStyle,
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
from tests.conftest import parametrize
from tests.strategies import s_printer_opts_partial, s_printer_opts_total

EMPTY = PrinterOptsPartial()


# ------------------ Algebra ------------------


@given(p=s_printer_opts_partial(), q=s_printer_opts_partial(), base=s_printer_opts_total())
def test_fill_missing_is_associative_over_total_base(
    p: PrinterOptsPartial, q: PrinterOptsPartial, base: PrinterOptsTotal
) -> None:
    """Filling twice equals filling once with the combined partial."""
    assert fill_missing(p, fill_missing(q, base)) == fill_missing(p.combine(q), base)


@given(p=s_printer_opts_partial(), q=s_printer_opts_partial(), r=s_printer_opts_partial())
def test_combine_is_associative(
    p: PrinterOptsPartial, q: PrinterOptsPartial, r: PrinterOptsPartial
) -> None:
    """``combine`` is associative, so layers can be grouped freely."""
    assert p.combine(q.combine(r)) == p.combine(q).combine(r)


@given(p=s_printer_opts_partial(), base=s_printer_opts_total())
def test_empty_partial_is_identity(p: PrinterOptsPartial, base: PrinterOptsTotal) -> None:
    """The all-absent partial is a left and right identity."""
    assert fill_missing(EMPTY, base) == base
    assert EMPTY.combine(p) == p
    assert p.combine(EMPTY) == p


@given(p=s_printer_opts_partial(), base=s_printer_opts_total())
def test_fill_missing_over_total_is_total(p: PrinterOptsPartial, base: PrinterOptsTotal) -> None:
    """A total base yields a total view without absent fields."""
    resolved: PrinterOptsTotal = fill_missing(p, base)
    assert isinstance(resolved, PrinterOptsTotal)
    for name, _meta in iter_printer_opts_fields():
        assert getattr(resolved, name) is not None
        expected: Any = getattr(p, name)
        assert getattr(resolved, name) == (getattr(base, name) if expected is None else expected)


@given(p=s_printer_opts_partial(), q=s_printer_opts_partial())
def test_fill_missing_over_partial_is_partial(
    p: PrinterOptsPartial, q: PrinterOptsPartial
) -> None:
    """A partial base yields a partial view (same as ``combine``)."""
    merged: PrinterOptsPartial = fill_missing(p, q)
    assert isinstance(merged, PrinterOptsPartial)
    assert merged == p.combine(q)


@given(total=s_printer_opts_total())
def test_thaw_then_resolve_is_lossless(total: PrinterOptsTotal) -> None:
    """A thawed total view overrides every field of any base."""
    assert total.thaw().resolve(default_printer_opts()) == total
    assert not total.thaw().is_empty()


def test_defaults_round_trip() -> None:
    """Resolving nothing over the defaults gives the defaults."""
    assert fill_missing(EMPTY, default_printer_opts()) == default_printer_opts()
    assert EMPTY.is_empty()


def test_default_values() -> None:
    """Defaults match the documented values of every option."""
    assert default_printer_opts() == PrinterOptsTotal(
        indentation=4,
        comma_style=CommaStyle.LEADING,
        import_export_comma_style=CommaStyle.TRAILING,
        indent_wheres=False,
        record_brace_space=False,
        diff_friendly_import_export=True,
        respectful=True,
        haddock_style=HaddockPrintStyle.MULTI_LINE,
        newlines_between_decls=1,
    )


def test_resolution_order_caller_then_file_then_defaults() -> None:
    """Caller overrides beat file options, which beat defaults."""
    cli = PrinterOptsPartial(indentation=2)
    file_opts = PrinterOptsPartial(indentation=8, comma_style=CommaStyle.TRAILING)

    resolved: PrinterOptsTotal = resolve_printer_opts(cli, file_opts)

    assert resolved.indentation == 2  # caller
    assert resolved.comma_style is CommaStyle.TRAILING  # file
    assert resolved.respectful is True  # default


def test_resolution_with_explicit_base() -> None:
    """A caller-supplied base replaces the defaults as lowest layer."""
    base: PrinterOptsTotal = fill_missing(
        PrinterOptsPartial(respectful=False), default_printer_opts()
    )
    resolved: PrinterOptsTotal = resolve_printer_opts(EMPTY, EMPTY, base)
    assert resolved.respectful is False


# ------------------ Schema & metadata ------------------


def test_views_share_the_metadata_shape() -> None:
    """Both views declare exactly the metadata table's fields, in order."""
    expected: list[str] = [f.name for f in fields(PrinterOptsMeta)]
    assert [f.name for f in fields(PrinterOptsPartial)] == expected
    assert [f.name for f in fields(PrinterOptsTotal)] == expected
    assert [name for name, _meta in iter_printer_opts_fields()] == expected


def test_every_field_has_metadata() -> None:
    """Each metadata entry carries a default and a description."""
    for name, meta in iter_printer_opts_fields():
        assert isinstance(meta, FieldMeta)
        assert meta is getattr(PRINTER_OPTS_META, name)
        assert meta.description


def test_field_index() -> None:
    """Field positions follow declaration order; unknown names raise."""
    assert printer_opts_field_index("indentation") == 0
    assert printer_opts_field_index("newlines_between_decls") == len(fields(PrinterOptsMeta)) - 1
    with pytest.raises(KeyError):
        printer_opts_field_index("line_length")


def test_over_fields_builds_either_view() -> None:
    """``over_fields`` drives construction of both views from the table."""
    names: PrinterOptsPartial = over_fields(PrinterOptsPartial, lambda _name, _meta: None)
    assert names == EMPTY
    total: PrinterOptsTotal = over_fields(PrinterOptsTotal, lambda _name, meta: meta.default)
    assert total == default_printer_opts()


def test_total_view_requires_every_field() -> None:
    """The total view has no defaults, so it cannot be built partially."""
    with pytest.raises(TypeError):
        PrinterOptsTotal(indentation=4)  # type: ignore[call-arg]


# ------------------ Reading ------------------


def test_from_yaml_mapping_reads_hyphenated_keys() -> None:
    """YAML keys are the hyphenated option names; enum values are their tags."""
    opts: PrinterOptsPartial = PrinterOptsPartial.from_yaml_mapping(
        {
            "indentation": 2,
            "comma-style": "trailing",
            "haddock-style": "single-line",
            "newlines-between-decls": 0,
            "respectful": None,
        }
    )
    assert opts == PrinterOptsPartial(
        indentation=2,
        comma_style=CommaStyle.TRAILING,
        haddock_style=HaddockPrintStyle.SINGLE_LINE,
        newlines_between_decls=0,
    )


@parametrize(
    "data, fragment",
    [
        ({"indentation": "four"}, "indentation"),
        ({"indentation": True}, "Expected int"),
        ({"indentation": 4.0}, "Expected int"),
        ({"indent-wheres": "yes"}, "indent-wheres"),
        ({"comma-style": "middle"}, "allowed: leading, trailing"),
        ({"haddock-style": 1}, "haddock-style"),
        ({"newlines-between-decls": -1}, "newlines-between-decls"),
    ],
)
def test_from_yaml_mapping_rejects_invalid_values(data: dict[str, Any], fragment: str) -> None:
    """Invalid values raise a ConfigFileError naming the key or the expected type."""
    with pytest.raises(ConfigFileError) as excinfo:
        PrinterOptsPartial.from_yaml_mapping(data)
    assert fragment in str(excinfo.value)


def test_from_args_uses_attribute_names() -> None:
    """Caller overrides are keyed by attribute names and accept enum members."""
    opts: PrinterOptsPartial = PrinterOptsPartial.from_args(
        {
            "indentation": 3,
            "comma_style": CommaStyle.TRAILING,
            "import_export_comma_style": "leading",
            "files": ["A.hs"],
        }
    )
    assert opts == PrinterOptsPartial(
        indentation=3,
        comma_style=CommaStyle.TRAILING,
        import_export_comma_style=CommaStyle.LEADING,
    )


def test_from_args_reports_location() -> None:
    """Argument errors are reported under ``args``."""
    with pytest.raises(ConfigFileError, match=r"args\.indent_wheres"):
        PrinterOptsPartial.from_args({"indent_wheres": 1})


# ------------------ Rendering ------------------


def test_partial_to_yaml_dict_keeps_only_set_options() -> None:
    """Only present options are serialized, with YAML keys and enum tags."""
    opts = PrinterOptsPartial(comma_style=CommaStyle.TRAILING, record_brace_space=True)
    assert opts.to_yaml_dict() == {"comma-style": "trailing", "record-brace-space": True}


def test_total_to_yaml_dict_lists_every_option_in_order() -> None:
    """Every option is serialized, in schema order, and reads back unchanged."""
    data: dict[str, Any] = default_printer_opts().to_yaml_dict()
    assert list(data) == [
        "indentation",
        "comma-style",
        "import-export-comma-style",
        "indent-wheres",
        "record-brace-space",
        "diff-friendly-import-export",
        "respectful",
        "haddock-style",
        "newlines-between-decls",
    ]
    assert PrinterOptsPartial.from_yaml_mapping(data).resolve(
        fill_missing(PrinterOptsPartial(indentation=7), default_printer_opts())
    ) == default_printer_opts()
