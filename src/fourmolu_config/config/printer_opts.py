# topmark:header:start
#
#   project      : fourmolu-config
#   file         : printer_opts.py
#   file_relpath : src/fourmolu_config/config/printer_opts.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Printer options: schema, field metadata, and the partial/total algebra.

This module defines the options that control formatting output, in two views
over one schema:

    * ``PrinterOptsPartial`` holds ``T | None`` per field (``None`` means
      *absent*). It is what a config file or a set of CLI overrides produces.
      ``combine`` makes it a monoid: per field, keep the left value if present,
      else the right one; ``PrinterOptsPartial()`` is the identity.
    * ``PrinterOptsTotal`` holds a value for every field and has no defaults,
      so it can only be built exhaustively. It is the only view the formatter
      consumes.

The metadata table ``PRINTER_OPTS_META`` has exactly the schema's shape: one
``FieldMeta`` (default value + reader) per option. Default instantiation and
merging are written once, as a traversal of that table
([`over_fields`][fourmolu_config.config.printer_opts.over_fields]), never as
per-field code.

Adding an option:
    Declare it on ``PrinterOptsMeta``, ``PrinterOptsPartial`` and
    ``PrinterOptsTotal`` (same name, same position) and give it an entry in
    ``PRINTER_OPTS_META``. A missing or extra entry fails at import time, either
    in the ``PrinterOptsMeta(...)`` call or in the view shape check below.

YAML mapping (keys derived with
[`config_key`][fourmolu_config.config.keys.config_key])::

    indentation: 4
    comma-style: leading
    import-export-comma-style: trailing
    indent-wheres: false
    record-brace-space: false
    diff-friendly-import-export: true
    respectful: true
    haddock-style: multi-line
    newlines-between-decls: 1
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar, overload

from fourmolu_config.config.io import (
    get_bool_value_or_none_checked,
    get_enum_value_or_none_checked,
    get_int_value_or_none_checked,
)
from fourmolu_config.config.keys import config_key
from fourmolu_config.config.logging import get_logger
from fourmolu_config.config.types import CommaStyle, HaddockPrintStyle

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fourmolu_config.config.io import YamlDict, YamlMapping
    from fourmolu_config.config.logging import FourmoluLogger
    from fourmolu_config.config.types import ArgsLike

logger: FourmoluLogger = get_logger(__name__)

T = TypeVar("T")
_V = TypeVar("_V", "PrinterOptsPartial", "PrinterOptsTotal")


# ------------------ Views ------------------


@dataclass(frozen=True, slots=True)
class PrinterOptsTotal:
    """Fully-resolved printer options.

    Attributes:
        indentation (int): Number of spaces to use for indentation.
        comma_style (CommaStyle): Whether to place commas at start or end of lines.
        import_export_comma_style (CommaStyle): Same, for import and export lists.
        indent_wheres (bool): Whether to indent ``where`` blocks.
        record_brace_space (bool): Leave a space before an opening record brace.
        diff_friendly_import_export (bool): Trailing commas with parentheses on
            separate lines in import and export lists.
        respectful (bool): Be less opinionated about spaces and newlines.
        haddock_style (HaddockPrintStyle): How to print doc comments.
        newlines_between_decls (int): Number of blank lines between top-level
            declarations.
    """

    indentation: int
    comma_style: CommaStyle
    import_export_comma_style: CommaStyle
    indent_wheres: bool
    record_brace_space: bool
    diff_friendly_import_export: bool
    respectful: bool
    haddock_style: HaddockPrintStyle
    newlines_between_decls: int

    def thaw(self) -> PrinterOptsPartial:
        """Return a partial view with every field present."""
        return over_fields(PrinterOptsPartial, lambda name, _meta: getattr(self, name))

    def to_yaml_dict(self) -> YamlDict:
        """Serialize every option to a YAML-friendly dict (keys in schema order)."""
        return {
            config_key(name): _yaml_value(getattr(self, name))
            for name, _meta in iter_printer_opts_fields()
        }


@dataclass(frozen=True, slots=True)
class PrinterOptsPartial:
    """Printer options where any field may be absent (``None``).

    This corresponds to the information in a config file or in CLI options.
    See `PrinterOptsTotal` for the meaning of each field.
    """

    indentation: int | None = None
    comma_style: CommaStyle | None = None
    import_export_comma_style: CommaStyle | None = None
    indent_wheres: bool | None = None
    record_brace_space: bool | None = None
    diff_friendly_import_export: bool | None = None
    respectful: bool | None = None
    haddock_style: HaddockPrintStyle | None = None
    newlines_between_decls: int | None = None

    def combine(self, other: PrinterOptsPartial) -> PrinterOptsPartial:
        """Return the options of ``self``, with gaps filled from ``other``.

        Associative, with ``PrinterOptsPartial()`` as identity.
        """
        return fill_missing(self, other)

    def resolve(self, base: PrinterOptsTotal) -> PrinterOptsTotal:
        """Fill absent fields from ``base`` and return the total view."""
        return fill_missing(self, base)

    def is_empty(self) -> bool:
        """Return True if no option is set."""
        return all(getattr(self, name) is None for name, _meta in iter_printer_opts_fields())

    def to_yaml_dict(self) -> YamlDict:
        """Serialize only explicitly set options to a YAML-friendly dict."""
        out: YamlDict = {}
        for name, _meta in iter_printer_opts_fields():
            value: Any | None = getattr(self, name)
            if value is not None:
                out[config_key(name)] = _yaml_value(value)
        return out

    @classmethod
    def from_yaml_mapping(cls, data: YamlMapping, *, where: str = "") -> PrinterOptsPartial:
        """Read the printer options of a decoded ``fourmolu.yaml`` document.

        Keys are the hyphenated option names; keys that are not options are left
        for the caller to handle. A missing or ``null`` key leaves the option absent.

        Args:
            data (YamlMapping): The decoded top-level mapping.
            where (str): Location prefix used in error messages.

        Returns:
            PrinterOptsPartial: The options set by the document.

        Raises:
            ConfigFileError: If a value has the wrong type or an unknown enum tag.
        """
        return over_fields(
            cls, lambda name, meta: meta.read(data, config_key(name), where=where)
        )

    @classmethod
    def from_args(cls, args: ArgsLike) -> PrinterOptsPartial:
        """Collect overrides from an arguments mapping (CLI or API).

        Keys are attribute names (``comma_style``); values are validated like
        config file values, and enum members are accepted as-is.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            PrinterOptsPartial: The options set by ``args``.

        Raises:
            ConfigFileError: If a value has the wrong type or an unknown enum tag.
        """
        opts: PrinterOptsPartial = over_fields(
            cls, lambda name, meta: meta.read(args, name, where="args")
        )
        logger.debug("Printer option overrides from arguments: %s", opts.to_yaml_dict())
        return opts


# Either view
PrinterOptsView = PrinterOptsPartial | PrinterOptsTotal


# ------------------ Field metadata ------------------


@dataclass(frozen=True, slots=True)
class FieldMeta(Generic[T]):
    """Source of truth for one printer option.

    Attributes:
        default (T): The value used when no source sets the option.
        read (Callable[..., T | None]): Checked getter ``(table, key, *, where)``
            extracting the option from a raw mapping; returns ``None`` when absent.
        description (str): One-line description, used for generated config files.
    """

    default: T
    read: Callable[..., T | None]
    description: str


@dataclass(frozen=True, slots=True)
class PrinterOptsMeta:
    """The metadata table: one `FieldMeta` per printer option, in schema order."""

    indentation: FieldMeta[int]
    comma_style: FieldMeta[CommaStyle]
    import_export_comma_style: FieldMeta[CommaStyle]
    indent_wheres: FieldMeta[bool]
    record_brace_space: FieldMeta[bool]
    diff_friendly_import_export: FieldMeta[bool]
    respectful: FieldMeta[bool]
    haddock_style: FieldMeta[HaddockPrintStyle]
    newlines_between_decls: FieldMeta[int]


PRINTER_OPTS_META: Final[PrinterOptsMeta] = PrinterOptsMeta(
    indentation=FieldMeta(
        default=4,
        read=get_int_value_or_none_checked,
        description="Number of spaces per indentation step",
    ),
    comma_style=FieldMeta(
        default=CommaStyle.LEADING,
        read=functools.partial(get_enum_value_or_none_checked, enum_cls=CommaStyle),
        description="Styling of commas in multi-line lists (leading or trailing)",
    ),
    import_export_comma_style=FieldMeta(
        default=CommaStyle.TRAILING,
        read=functools.partial(get_enum_value_or_none_checked, enum_cls=CommaStyle),
        description="Styling of commas in import and export lists (leading or trailing)",
    ),
    indent_wheres=FieldMeta(
        default=False,
        read=get_bool_value_or_none_checked,
        description="Whether to indent 'where' bindings past the preceding body",
    ),
    record_brace_space=FieldMeta(
        default=False,
        read=get_bool_value_or_none_checked,
        description="Whether to leave a space before an opening record brace",
    ),
    diff_friendly_import_export=FieldMeta(
        default=True,
        read=get_bool_value_or_none_checked,
        description="Whether to put trailing commas and parentheses of import/export lists "
        "on separate lines",
    ),
    respectful=FieldMeta(
        default=True,
        read=get_bool_value_or_none_checked,
        description="Whether to be less opinionated about spaces and newlines",
    ),
    haddock_style=FieldMeta(
        default=HaddockPrintStyle.MULTI_LINE,
        read=functools.partial(get_enum_value_or_none_checked, enum_cls=HaddockPrintStyle),
        description="How to print doc comments (single-line or multi-line)",
    ),
    newlines_between_decls=FieldMeta(
        default=1,
        read=functools.partial(get_int_value_or_none_checked, minimum=0),
        description="Number of blank lines between top-level declarations",
    ),
)

_FIELDS: Final[tuple[tuple[str, FieldMeta[Any]], ...]] = tuple(
    (f.name, getattr(PRINTER_OPTS_META, f.name)) for f in fields(PrinterOptsMeta)
)


def _check_view_shapes() -> None:
    """Fail if a view does not declare exactly the metadata table's fields, in order."""
    expected: tuple[str, ...] = tuple(name for name, _meta in _FIELDS)
    for view in (PrinterOptsPartial, PrinterOptsTotal):
        actual: tuple[str, ...] = tuple(f.name for f in fields(view))
        if actual != expected:
            raise TypeError(
                f"{view.__name__} fields {actual} do not match the printer option "
                f"metadata {expected}"
            )


_check_view_shapes()


def iter_printer_opts_fields() -> Iterator[tuple[str, FieldMeta[Any]]]:
    """Yield ``(attribute name, metadata)`` for every option, in schema order."""
    return iter(_FIELDS)


def printer_opts_field_index(name: str) -> int:
    """Return the schema position of option ``name``.

    Raises:
        KeyError: If ``name`` is not a printer option.
    """
    for index, (field_name, _meta) in enumerate(_FIELDS):
        if field_name == name:
            return index
    raise KeyError(name)


def over_fields(view_cls: type[_V], fn: Callable[[str, FieldMeta[Any]], Any]) -> _V:
    """Build a view by computing each field from its name and metadata.

    This is the single traversal every other operation is written with.

    Args:
        view_cls (type[_V]): The view to build.
        fn (Callable[[str, FieldMeta[Any]], Any]): Produces the value of one field.

    Returns:
        _V: A new ``view_cls`` instance.
    """
    return view_cls(**{name: fn(name, meta) for name, meta in _FIELDS})


# ------------------ Algebra ------------------


@functools.cache
def default_printer_opts() -> PrinterOptsTotal:
    """Return the total view holding every option's default value."""
    return over_fields(PrinterOptsTotal, lambda _name, meta: meta.default)


@overload
def fill_missing(partial: PrinterOptsPartial, base: PrinterOptsTotal) -> PrinterOptsTotal: ...
@overload
def fill_missing(partial: PrinterOptsPartial, base: PrinterOptsPartial) -> PrinterOptsPartial: ...
def fill_missing(partial: PrinterOptsPartial, base: PrinterOptsView) -> PrinterOptsView:
    """Fill the absent fields of ``partial`` with the fields of ``base``.

    The result has the kind of ``base``: a partial base gives a partial result
    (combining two layers), a total base gives a total result (final resolution,
    no field can stay absent).

    Args:
        partial (PrinterOptsPartial): The higher-priority options.
        base (PrinterOptsView): The lower-priority options.

    Returns:
        PrinterOptsView: A new view of the same type as ``base``.
    """

    def fill(name: str, _meta: FieldMeta[Any]) -> Any:
        value: Any | None = getattr(partial, name)
        return getattr(base, name) if value is None else value

    return over_fields(type(base), fill)


def resolve_printer_opts(
    cli: PrinterOptsPartial,
    file_opts: PrinterOptsPartial,
    base: PrinterOptsTotal | None = None,
) -> PrinterOptsTotal:
    """Layer the option sources of one formatting run.

    Precedence (highest first): ``cli``, ``file_opts``, ``base`` (the schema
    defaults unless given).

    Returns:
        PrinterOptsTotal: The resolved options.
    """
    return fill_missing(cli, fill_missing(file_opts, base or default_printer_opts()))


def _yaml_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
