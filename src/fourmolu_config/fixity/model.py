# topmark:header:start
#
#   project      : fourmolu-config
#   file         : model.py
#   file_relpath : src/fourmolu_config/fixity/model.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Fixity (operator associativity and precedence) value types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class FixityDirection(str, Enum):
    """Associativity of an operator, tagged with its declaration keyword."""

    INFIXL = "infixl"
    INFIXR = "infixr"
    INFIXN = "infix"


@dataclass(frozen=True, slots=True)
class FixityInfo:
    """Fixity information of one operator.

    A declaration always yields a single precedence (``min == max``); a range
    describes an operator whose fixity is only known to lie within bounds.

    Attributes:
        direction (FixityDirection | None): Associativity, ``None`` when unknown.
        min_precedence (int): Lowest possible precedence (0-9).
        max_precedence (int): Highest possible precedence (0-9).
    """

    direction: FixityDirection | None
    min_precedence: int
    max_precedence: int

    @classmethod
    def declared(cls, direction: FixityDirection, precedence: int) -> FixityInfo:
        """Return the fixity stated by an explicit declaration."""
        return cls(direction=direction, min_precedence=precedence, max_precedence=precedence)

    def to_declaration(self, name: str) -> str:
        """Render this fixity as a declaration for operator ``name``.

        Identifiers are wrapped in backticks. Fixities without a direction or with
        a precedence range have no declaration syntax.

        Raises:
            ValueError: If the fixity cannot be expressed as a single declaration.
        """
        if self.direction is None or self.min_precedence != self.max_precedence:
            raise ValueError(f"Fixity of {name!r} cannot be written as a declaration: {self}")
        op: str = f"`{name}`" if name[:1].isalpha() else name
        return f"{self.direction.value} {self.min_precedence} {op}"


# Operator name -> fixity
FixityMap = Mapping[str, FixityInfo]
