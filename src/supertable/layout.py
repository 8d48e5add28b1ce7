"""Column layout strategies for the supertabular column format."""

from __future__ import annotations

from collections.abc import Sequence

from .nodes import Alignment, ColSpec

# Share of the line width per column, keyed by column count
WIDTH_FRACTIONS: dict[int, float] = {
    1: 0.95,
    2: 0.45,
    3: 0.29,
    4: 0.21,
}
TOTAL_FRACTION = 0.95


def column_fraction(column_count: int) -> float:
    """Width of each column as a fraction of the line width."""
    if column_count in WIDTH_FRACTIONS:
        return WIDTH_FRACTIONS[column_count]
    return TOTAL_FRACTION / max(column_count, 1)


def join_columns(columns: Sequence[str]) -> str:
    """Join column types with vertical rules between and around them."""
    return "|" + "|".join(columns) + "|"


class ColumnLayout:
    """Base column layout: maps column specs to a LaTeX column format."""

    name = ""

    def column(self, spec: ColSpec, column_count: int) -> str:
        raise NotImplementedError

    def format(self, colspecs: Sequence[ColSpec]) -> str:
        """Build the full column format string."""
        count = len(colspecs)
        return join_columns([self.column(spec, count) for spec in colspecs])


class SimpleLayout(ColumnLayout):
    """Single-character alignment codes, no width control."""

    name = "simple"

    CODES = {
        Alignment.LEFT: "l",
        Alignment.RIGHT: "r",
        Alignment.CENTER: "c",
    }

    def column(self, spec: ColSpec, column_count: int) -> str:
        return self.CODES.get(spec.align, "l")


class WidthLayout(ColumnLayout):
    """Paragraph columns sized as a fixed share of the line width."""

    name = "width"

    PREFIXES = {
        Alignment.RIGHT: r">{\raggedleft\arraybackslash}",
        Alignment.CENTER: r">{\centering\arraybackslash}",
    }

    def __init__(self, line_width: str = r"\linewidth"):
        self.line_width = line_width

    def column(self, spec: ColSpec, column_count: int) -> str:
        width = f"{column_fraction(column_count):.2f}"
        prefix = self.PREFIXES.get(spec.align, "")
        return f"{prefix}p{{{width}{self.line_width}}}"


LAYOUTS: dict[str, type[ColumnLayout]] = {
    SimpleLayout.name: SimpleLayout,
    WidthLayout.name: WidthLayout,
}


def get_layout(name: str, line_width: str = r"\linewidth") -> ColumnLayout:
    """Get a layout by name. Raises KeyError for unknown names."""
    layout_cls = LAYOUTS[name]
    if layout_cls is WidthLayout:
        return WidthLayout(line_width)
    return layout_cls()
