"""
Document tree values consumed and produced by the filter.

Inline and block content are closed sets of frozen dataclasses. Anything the
filter does not model explicitly lands in a fallback variant that keeps only
its plain text, so rendering can always degrade instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Inline content


@dataclass(frozen=True)
class Str:
    """Plain text run."""

    text: str


@dataclass(frozen=True)
class Space:
    """Inter-word space."""


@dataclass(frozen=True)
class Math:
    """Math expression, inline or display."""

    text: str
    display: bool = False


@dataclass(frozen=True)
class Code:
    """Literal code span."""

    text: str


@dataclass(frozen=True)
class OtherInline:
    """Any inline kind without dedicated handling, flattened to text."""

    kind: str
    text: str


Inline = Union[Str, Space, Math, Code, OtherInline]


# Block content


@dataclass(frozen=True)
class Plain:
    """Paragraph-like block without paragraph spacing."""

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Para:
    """Paragraph block."""

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True)
class RawBlock:
    """Raw markup passed through to a given output format."""

    format: str
    text: str


@dataclass(frozen=True)
class OtherBlock:
    """Any block kind without dedicated handling, flattened to text."""

    kind: str
    text: str


Block = Union[Plain, Para, RawBlock, OtherBlock]


def has_inlines(block: Block) -> bool:
    """Check whether a block exposes inline content."""
    return isinstance(block, (Plain, Para))


# Tables


class Alignment(str, Enum):
    """Column alignment."""

    LEFT = "AlignLeft"
    RIGHT = "AlignRight"
    CENTER = "AlignCenter"
    DEFAULT = "AlignDefault"

    @classmethod
    def parse(cls, value: str | None) -> Alignment:
        """Parse an alignment tag, unknown tags map to DEFAULT."""
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True)
class ColSpec:
    """Column specification: alignment plus optional relative width."""

    align: Alignment = Alignment.DEFAULT
    width: float | None = None


@dataclass(frozen=True)
class Cell:
    """Table cell holding block content."""

    contents: tuple[Block, ...] = ()
    align: Alignment = Alignment.DEFAULT
    row_span: int = 1
    col_span: int = 1


@dataclass(frozen=True)
class Row:
    """Table row."""

    cells: tuple[Cell, ...] = ()


@dataclass(frozen=True)
class TableBody:
    """One body section of a table."""

    rows: tuple[Row, ...] = ()
    head_rows: tuple[Row, ...] = ()
    row_head_columns: int = 0


@dataclass(frozen=True)
class Caption:
    """Table caption, long form plus optional short form."""

    long: tuple[Block, ...] = ()
    short: tuple[Inline, ...] | None = None


@dataclass(frozen=True)
class Table:
    """
    Structured table node.

    Only ``colspecs`` is required; caption, identifier and head default to
    absent so a partially filled node still renders.
    """

    colspecs: tuple[ColSpec, ...] = ()
    caption: Caption | None = None
    identifier: str = ""
    head: tuple[Row, ...] = ()
    bodies: tuple[TableBody, ...] = ()
    foot: tuple[Row, ...] = ()
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()


# Metadata values


@dataclass(frozen=True)
class MetaList:
    """Ordered list of metadata values."""

    items: tuple[MetaValue, ...] = ()


@dataclass(frozen=True)
class MetaBlocks:
    """Metadata value made of block content."""

    blocks: tuple[Block, ...] = ()


@dataclass(frozen=True)
class MetaOpaque:
    """Metadata value carried through untouched in its wire form."""

    data: Any = field(default=None, compare=True, hash=False)


MetaValue = Union[MetaList, MetaBlocks, MetaOpaque]
