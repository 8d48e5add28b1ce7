"""
Pandoc JSON AST codec.

Decodes the parts of a pandoc document the filter cares about (tables and
metadata) into ``supertable.nodes`` values and encodes results back. Element
kinds without a dedicated node decode to the fallback variants with their
plain text, so unexpected input never stops a table from rendering.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    Alignment,
    Block,
    Caption,
    Cell,
    Code,
    ColSpec,
    Inline,
    Math,
    MetaBlocks,
    MetaList,
    MetaOpaque,
    MetaValue,
    OtherBlock,
    OtherInline,
    Para,
    Plain,
    RawBlock,
    Row,
    Space,
    Str,
    Table,
    TableBody,
)

# Element kinds whose text is dropped when flattening
_SILENT = {"RawInline", "RawBlock", "Note"}
_QUOTES = {"SingleQuote": ("‘", "’"), "DoubleQuote": ("“", "”")}


class PandocFormatError(ValueError):
    """Raised when a pandoc JSON element does not have the expected shape."""


def stringify(value: Any) -> str:
    """
    Flatten pandoc JSON content to plain text.

    Formatting is discarded, text is kept. Bare strings outside of ``Str``
    elements (attributes, link targets) do not contribute.
    """
    if isinstance(value, list):
        return "".join(stringify(item) for item in value)
    if not isinstance(value, dict):
        return ""

    tag = value.get("t")
    content = value.get("c")
    if tag in ("Str", "MetaString"):
        return content if isinstance(content, str) else ""
    if tag in ("Space", "SoftBreak", "LineBreak"):
        return " "
    if tag in ("Code", "Math", "CodeBlock"):
        return content[1] if isinstance(content, list) and len(content) > 1 else ""
    if tag in _SILENT:
        return ""
    if tag == "Quoted" and isinstance(content, list) and len(content) == 2:
        open_quote, close_quote = _QUOTES.get(content[0].get("t"), ('"', '"'))
        return open_quote + stringify(content[1]) + close_quote
    return stringify(content)


# Decoding


def decode_inline(obj: dict[str, Any]) -> Inline:
    """Decode one pandoc inline element."""
    tag = obj.get("t")
    content = obj.get("c")
    if tag == "Str":
        return Str(content)
    if tag == "Space":
        return Space()
    if tag == "Math":
        return Math(content[1], display=content[0].get("t") == "DisplayMath")
    if tag == "Code":
        return Code(content[1])
    return OtherInline(tag or "", stringify(obj))


def decode_inlines(items: list[dict[str, Any]]) -> tuple[Inline, ...]:
    return tuple(decode_inline(item) for item in items)


def decode_block(obj: dict[str, Any]) -> Block:
    """Decode one pandoc block element."""
    tag = obj.get("t")
    content = obj.get("c")
    if tag == "Plain":
        return Plain(decode_inlines(content))
    if tag == "Para":
        return Para(decode_inlines(content))
    if tag == "RawBlock":
        return RawBlock(content[0], content[1])
    return OtherBlock(tag or "", stringify(obj))


def decode_blocks(items: list[dict[str, Any]]) -> tuple[Block, ...]:
    return tuple(decode_block(item) for item in items)


def decode_attr(attr: list[Any]) -> tuple[str, tuple[str, ...], tuple[tuple[str, str], ...]]:
    """Decode an ``[identifier, classes, key-values]`` triple."""
    identifier, classes, attributes = attr
    return identifier, tuple(classes), tuple((key, val) for key, val in attributes)


def decode_colspec(spec: list[Any]) -> ColSpec:
    align, width = spec
    value = None
    if isinstance(width, dict) and width.get("t") == "ColWidth":
        value = float(width["c"])
    return ColSpec(Alignment.parse(align.get("t")), value)


def decode_cell(cell: list[Any]) -> Cell:
    _attr, align, row_span, col_span, blocks = cell
    return Cell(decode_blocks(blocks), Alignment.parse(align.get("t")), int(row_span), int(col_span))


def decode_row(row: list[Any]) -> Row:
    _attr, cells = row
    return Row(tuple(decode_cell(cell) for cell in cells))


def decode_rows(rows: list[Any]) -> tuple[Row, ...]:
    return tuple(decode_row(row) for row in rows)


def decode_body(body: list[Any]) -> TableBody:
    _attr, row_head_columns, head_rows, rows = body
    return TableBody(decode_rows(rows), decode_rows(head_rows), int(row_head_columns))


def decode_caption(caption: list[Any]) -> Caption:
    short, long = caption
    return Caption(decode_blocks(long), decode_inlines(short) if short is not None else None)


def decode_table(obj: dict[str, Any]) -> Table:
    """
    Decode a pandoc ``Table`` block (pandoc API 1.22 and later).

    Raises:
        PandocFormatError: If the element is not a table of the expected shape
    """
    if obj.get("t") != "Table":
        raise PandocFormatError(f"Expected a Table element, got {obj.get('t')!r}")
    try:
        attr, caption, colspecs, head, bodies, foot = obj["c"]
        identifier, classes, attributes = decode_attr(attr)
        return Table(
            colspecs=tuple(decode_colspec(spec) for spec in colspecs),
            caption=decode_caption(caption),
            identifier=identifier,
            head=decode_rows(head[1]),
            bodies=tuple(decode_body(body) for body in bodies),
            foot=decode_rows(foot[1]),
            classes=classes,
            attributes=attributes,
        )
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise PandocFormatError(f"Malformed Table element: {e}") from e


def decode_meta_value(obj: Any) -> MetaValue:
    """Decode a metadata value; anything but a list is kept opaque."""
    if isinstance(obj, dict) and obj.get("t") == "MetaList":
        return MetaList(tuple(decode_meta_value(item) for item in obj.get("c", [])))
    return MetaOpaque(obj)


def decode_meta(meta: dict[str, Any]) -> dict[str, MetaValue]:
    return {key: decode_meta_value(value) for key, value in meta.items()}


# Encoding


def encode_inline(inline: Inline) -> dict[str, Any]:
    """Encode an inline element; fallback inlines become plain text."""
    if isinstance(inline, Str):
        return {"t": "Str", "c": inline.text}
    if isinstance(inline, Space):
        return {"t": "Space"}
    if isinstance(inline, Math):
        return {"t": "Math", "c": [{"t": "DisplayMath" if inline.display else "InlineMath"}, inline.text]}
    if isinstance(inline, Code):
        return {"t": "Code", "c": [["", [], []], inline.text]}
    return {"t": "Str", "c": inline.text}


def encode_block(block: Block) -> dict[str, Any]:
    """Encode a block element; fallback blocks become plain text."""
    if isinstance(block, RawBlock):
        return {"t": "RawBlock", "c": [block.format, block.text]}
    if isinstance(block, Para):
        return {"t": "Para", "c": [encode_inline(inline) for inline in block.content]}
    if isinstance(block, Plain):
        return {"t": "Plain", "c": [encode_inline(inline) for inline in block.content]}
    return {"t": "Plain", "c": [{"t": "Str", "c": block.text}]}


def encode_meta_value(value: MetaValue) -> Any:
    if isinstance(value, MetaList):
        return {"t": "MetaList", "c": [encode_meta_value(item) for item in value.items]}
    if isinstance(value, MetaBlocks):
        return {"t": "MetaBlocks", "c": [encode_block(block) for block in value.blocks]}
    return value.data


def encode_meta(meta: dict[str, MetaValue]) -> dict[str, Any]:
    return {key: encode_meta_value(value) for key, value in meta.items()}
