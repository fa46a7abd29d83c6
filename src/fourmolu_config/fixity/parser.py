# topmark:header:start
#
#   project      : fourmolu-config
#   file         : parser.py
#   file_relpath : src/fourmolu_config/fixity/parser.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Parser for fixity declarations such as ``infixr 5 <+>, `op```.

Grammar (one declaration per string, no leading blanks)::

    declaration := direction hspace+ precedence hspace+ operators hspace* EOF
    direction   := "infixl" | "infixr" | "infix"
    precedence  := digit+            (at most 9)
    operators   := operator ("," hspace* operator)*
    operator    := symbol-char+ | "`" identifier "`"
    identifier  := letter (letter | digit | "_" | "'")*

A symbol character is any Unicode symbol or punctuation character except
``,``, `````, ``(`` and ``)``.

Errors are raised as [`FixityParseError`][fourmolu_config.fixity.parser.FixityParseError];
``pretty()`` renders the position, the offending line with a caret, and what was
expected at that point.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING, Final

from fourmolu_config.config.logging import get_logger
from fourmolu_config.fixity.model import FixityDirection, FixityInfo

if TYPE_CHECKING:
    from fourmolu_config.config.logging import FourmoluLogger

logger: FourmoluLogger = get_logger(__name__)

MAX_PRECEDENCE: Final[int] = 9

# "infixl"/"infixr" must be tried before their prefix "infix"
_DIRECTIONS: Final[tuple[FixityDirection, ...]] = (
    FixityDirection.INFIXL,
    FixityDirection.INFIXR,
    FixityDirection.INFIXN,
)
# Haskell special characters, plus the underscore and quotes
_EXCLUDED_OPERATOR_CHARS: Final[frozenset[str]] = frozenset("(),;[]`{}_\"'")
_HSPACE: Final[frozenset[str]] = frozenset(" \t")


class FixityParseError(ValueError):
    """A fixity declaration could not be parsed.

    Attributes:
        source (str): The declaration text.
        offset (int): 0-based offset of the problem in ``source``.
        unexpected (str | None): Description of the offending input, if any.
        expecting (tuple[str, ...]): Descriptions of what would have been accepted.
        reason (str | None): Free-form message for semantic failures.
    """

    def __init__(
        self,
        source: str,
        offset: int,
        *,
        unexpected: str | None = None,
        expecting: tuple[str, ...] = (),
        reason: str | None = None,
    ) -> None:
        self.source: str = source
        self.offset: int = offset
        self.unexpected: str | None = unexpected
        self.expecting: tuple[str, ...] = expecting
        self.reason: str | None = reason
        super().__init__(self.pretty())

    @property
    def line(self) -> int:
        """1-based line of the problem."""
        return self.source.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """1-based column of the problem."""
        return self.offset - (self.source.rfind("\n", 0, self.offset) + 1) + 1

    def pretty(self) -> str:
        """Render the error with its position, the source line and a caret."""
        line_text: str = self.source.split("\n")[self.line - 1]
        gutter: str = " " * len(str(self.line))
        out: list[str] = [
            f"{self.line}:{self.column}:",
            f"{gutter} |",
            f"{self.line} | {line_text}",
            f"{gutter} | {' ' * (self.column - 1)}^",
        ]
        if self.unexpected is not None:
            out.append(f"unexpected {self.unexpected}")
        if self.expecting:
            out.append(f"expecting {_or_list(self.expecting)}")
        if self.reason is not None:
            out.append(self.reason)
        return "\n".join(out) + "\n"


def _or_list(items: tuple[str, ...]) -> str:
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} or {items[1]}"
    return ", ".join(items[:-1]) + f", or {items[-1]}"


def is_operator_char(c: str) -> bool:
    """Return True if ``c`` may appear in a symbolic operator name."""
    category: str = unicodedata.category(c)
    return category[0] in ("S", "P") and c not in _EXCLUDED_OPERATOR_CHARS


class _Parser:
    def __init__(self, text: str) -> None:
        self.text: str = text
        self.pos: int = 0

    def _peek(self) -> str | None:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _unexpected(self) -> str:
        c: str | None = self._peek()
        return "end of input" if c is None else repr(c)

    def _fail(self, *expecting: str) -> FixityParseError:
        return FixityParseError(
            self.text, self.pos, unexpected=self._unexpected(), expecting=expecting
        )

    def _hspace(self, *, required: bool) -> None:
        start: int = self.pos
        while self._peek() in _HSPACE:
            self.pos += 1
        if required and self.pos == start:
            raise self._fail("white space")

    def direction(self) -> FixityDirection:
        for d in _DIRECTIONS:
            if self.text.startswith(d.value, self.pos):
                self.pos += len(d.value)
                return d
        raise self._fail(*(f'"{d.value}"' for d in sorted(_DIRECTIONS, key=lambda d: d.value)))

    def precedence(self) -> int:
        start: int = self.pos
        while (c := self._peek()) is not None and c.isdigit() and c.isascii():
            self.pos += 1
        if self.pos == start:
            raise self._fail("integer")
        value = int(self.text[start : self.pos])
        if value > MAX_PRECEDENCE:
            raise FixityParseError(
                self.text,
                start,
                reason=f"precedence should not be greater than {MAX_PRECEDENCE}",
            )
        return value

    def operator(self) -> str:
        c: str | None = self._peek()
        if c == "`":
            self.pos += 1
            name: str = self.identifier()
            if self._peek() != "`":
                raise self._fail("'`'", "identifier character")
            self.pos += 1
            return name
        start: int = self.pos
        while (c := self._peek()) is not None and is_operator_char(c):
            self.pos += 1
        if self.pos == start:
            raise self._fail("'`'", "operator character")
        return self.text[start : self.pos]

    def identifier(self) -> str:
        start: int = self.pos
        c: str | None = self._peek()
        if c is None or not c.isalpha():
            raise self._fail("letter")
        self.pos += 1
        while (c := self._peek()) is not None and (c.isalnum() or c in "_'"):
            self.pos += 1
        return self.text[start : self.pos]

    def declaration(self) -> list[tuple[str, FixityInfo]]:
        direction: FixityDirection = self.direction()
        self._hspace(required=True)
        info: FixityInfo = FixityInfo.declared(direction, self.precedence())
        self._hspace(required=True)
        names: list[str] = [self.operator()]
        while self._peek() == ",":
            self.pos += 1
            self._hspace(required=False)
            names.append(self.operator())
        self._hspace(required=False)
        if self._peek() is not None:
            raise self._fail("','", "end of input")
        return [(name, info) for name in names]


def parse_fixity_declaration(text: str) -> list[tuple[str, FixityInfo]]:
    """Parse one fixity declaration.

    Args:
        text (str): The declaration, e.g. ``"infixl 5 <+>, <->"``.

    Returns:
        list[tuple[str, FixityInfo]]: One ``(operator, fixity)`` pair per declared
            operator, in declaration order. Backticked identifiers are returned
            without their backticks.

    Raises:
        FixityParseError: If ``text`` is not a valid declaration.
    """
    pairs: list[tuple[str, FixityInfo]] = _Parser(text).declaration()
    logger.trace("Parsed fixity declaration %r -> %s", text, pairs)
    return pairs
