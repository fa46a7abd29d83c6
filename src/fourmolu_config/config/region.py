# topmark:header:start
#
#   project      : fourmolu-config
#   file         : region.py
#   file_relpath : src/fourmolu_config/config/region.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Region selection: user-facing line indices and internal line deltas.

A region restricts formatting to a range of lines. Users give it as 1-based,
inclusive ``start``/``end`` indices (either may be open). The formatter works
with the number of lines to leave untouched before and after the region, which
can only be computed once the total line count of the input is known.

Example:
    For a 10-line input, ``RegionIndices(start=3, end=7)`` becomes
    ``RegionDeltas(prefix_lines=2, suffix_lines=3)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fourmolu_config.config.errors import InvalidRegionError
from fourmolu_config.config.logging import get_logger

if TYPE_CHECKING:
    from fourmolu_config.config.logging import FourmoluLogger

logger: FourmoluLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RegionIndices:
    """Region as given by the user.

    Attributes:
        start (int | None): First line to format (1-based, inclusive), ``None``
            for the beginning of the input.
        end (int | None): Last line to format (1-based, inclusive), ``None`` for
            the end of the input.
    """

    start: int | None = None
    end: int | None = None

    def check(self, total_lines: int) -> None:
        """Validate the region against an input of ``total_lines`` lines.

        Args:
            total_lines (int): Number of lines of the input.

        Raises:
            InvalidRegionError: If either bound lies outside ``1..total_lines``
                or ``start > end``.
        """
        if self.start is not None and self.start < 1:
            raise InvalidRegionError(f"Region start must be at least 1, got {self.start}")
        if self.start is not None and self.start > total_lines:
            raise InvalidRegionError(
                f"Region start {self.start} is past the last line of the input ({total_lines})"
            )
        if self.end is not None and self.end < 1:
            raise InvalidRegionError(f"Region end must be at least 1, got {self.end}")
        if self.end is not None and self.end > total_lines:
            raise InvalidRegionError(
                f"Region end {self.end} is past the last line of the input ({total_lines})"
            )
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidRegionError(f"Region start {self.start} is after region end {self.end}")


@dataclass(frozen=True, slots=True)
class RegionDeltas:
    """Region as consumed by the formatter.

    Attributes:
        prefix_lines (int): Number of lines before the region.
        suffix_lines (int): Number of lines after the region.
    """

    prefix_lines: int
    suffix_lines: int


def region_indices_to_deltas(total_lines: int, indices: RegionIndices) -> RegionDeltas:
    """Convert user-facing indices to deltas for an input of ``total_lines`` lines.

    No bounds checking is done; use `RegionIndices.check` first to reject
    out-of-range regions.

    Args:
        total_lines (int): Number of lines of the input.
        indices (RegionIndices): The region to convert.

    Returns:
        RegionDeltas: Lines before and after the region.
    """
    deltas = RegionDeltas(
        prefix_lines=indices.start - 1 if indices.start is not None else 0,
        suffix_lines=total_lines - indices.end if indices.end is not None else 0,
    )
    logger.trace("Region %s of %d lines -> %s", indices, total_lines, deltas)
    return deltas
