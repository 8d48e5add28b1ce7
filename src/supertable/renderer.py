"""
Table renderer.
Turns a structured table node into a supertabular LaTeX block.
"""

from __future__ import annotations

from collections.abc import Iterable

from .inlines import normalize_inlines, stringify_blocks
from .layout import ColumnLayout, WidthLayout
from .messages import Trace, null_trace
from .nodes import Row, Table, has_inlines

ENVIRONMENT = "supertabular"
ROW_END = r" \\"
CELL_SEPARATOR = " & "
RULE = r"\hline"


def extract_caption(table: Table) -> str:
    """Caption text from the first caption block with inline content."""
    if table.caption is None:
        return ""
    for block in table.caption.long:
        if has_inlines(block):
            return normalize_inlines(block.content)
    return ""


def one_line(text: str) -> str:
    return text.replace("\n", " ")


def bold(text: str) -> str:
    """Bold cell content; \\bfseries also works around math."""
    return r"{\bfseries " + text + "}"


def render_rows(rows: Iterable[Row], header: bool = False, trace: Trace = null_trace) -> list[str]:
    """Render rows, each followed by a horizontal rule."""
    kind = "Header" if header else "Body"
    lines = []
    for index, row in enumerate(rows, start=1):
        cells = [stringify_blocks(cell.contents) for cell in row.cells]
        trace(f"  {kind} row {index}: " + " ".join(f"[{one_line(c)}]" for c in cells))
        if header:
            cells = [bold(cell) for cell in cells]
        lines.append(CELL_SEPARATOR.join(cells) + ROW_END)
        lines.append(RULE)
    return lines


def render_table(
    table: Table,
    layout: ColumnLayout | None = None,
    trace: Trace = null_trace,
    float_placement: str = "htbp",
) -> str:
    """
    Render a table as a supertabular environment.

    Args:
        table: Table node to render
        layout: Column layout strategy (defaults to WidthLayout)
        trace: Callable receiving diagnostic lines
        float_placement: Placement specifier for the surrounding table float

    Returns:
        LaTeX text. A table float with caption (and label, when the table has
        an identifier) is only emitted for captioned tables.
    """
    if layout is None:
        layout = WidthLayout()

    caption = extract_caption(table)
    label = table.identifier or ""
    col_format = layout.format(table.colspecs)

    trace("=== TABLE DETECTED ===")
    trace(f"Caption: {caption}")
    trace(f"Label: {label}")
    trace(f"Number of columns: {len(table.colspecs)}")
    trace(f"Column format: {col_format}")

    latex = []
    if caption:
        latex.append(rf"\begin{{table}}[{float_placement}]")
        latex.append(r"\centering")
        if label:
            latex.append(rf"\caption{{{caption}}}\label{{{label}}}")
        else:
            latex.append(rf"\caption{{{caption}}}")

    latex.append(rf"\begin{{{ENVIRONMENT}}}{{{col_format}}}")
    latex.append(RULE)

    if table.head:
        trace(f"Header rows: {len(table.head)}")
    else:
        trace("No header rows found")
    latex.extend(render_rows(table.head, header=True, trace=trace))

    trace(f"Body sections: {len(table.bodies)}")
    for index, body in enumerate(table.bodies, start=1):
        trace(f"Body {index} rows: {len(body.rows)}")
        latex.extend(render_rows(body.rows, trace=trace))

    if table.foot:
        trace(f"Foot rows skipped: {len(table.foot)}")

    latex.append(rf"\end{{{ENVIRONMENT}}}")
    if caption:
        latex.append(r"\end{table}")

    trace("=== END TABLE ===")
    return "\n".join(latex)
