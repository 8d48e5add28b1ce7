"""Flatten inline and cell content into LaTeX text."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Block, Code, Inline, Math, OtherBlock, OtherInline, Para, Plain, RawBlock, Space, Str

TEXT_BACKSLASH = r"\textbackslash{}"


def escape_code(text: str) -> str:
    """Escape backslashes in a code span."""
    return text.replace("\\", TEXT_BACKSLASH)


def render_inline(inline: Inline) -> str:
    """Render a single inline element."""
    if isinstance(inline, Math):
        if inline.display:
            return f"$${inline.text}$$"
        return f"${inline.text}$"
    if isinstance(inline, Code):
        return r"\texttt{" + escape_code(inline.text) + "}"
    if isinstance(inline, Str):
        # A lone dollar is a currency sign, never a math delimiter
        if inline.text == "$":
            return r"\$"
        return inline.text
    if isinstance(inline, Space):
        return " "
    if isinstance(inline, OtherInline):
        return inline.text
    return ""


def normalize_inlines(inlines: Iterable[Inline]) -> str:
    """
    Convert inline content to LaTeX text, preserving math and code.

    Args:
        inlines: Inline elements in document order

    Returns:
        Concatenated LaTeX text ("" for no elements)
    """
    return "".join(render_inline(inline) for inline in inlines)


def flatten_block(block: Block) -> str:
    """Plain text of a block without dedicated handling."""
    if isinstance(block, OtherBlock):
        return block.text
    if isinstance(block, RawBlock):
        return ""
    return normalize_inlines(block.content)


def stringify_blocks(blocks: Iterable[Block]) -> str:
    """
    Convert the blocks of a table cell to one LaTeX string.

    Paragraph-like blocks keep math and code; anything else degrades to its
    plain text. Results are joined with a single space.
    """
    parts = []
    for block in blocks:
        if isinstance(block, (Plain, Para)):
            parts.append(normalize_inlines(block.content))
        else:
            parts.append(flatten_block(block))
    return " ".join(parts)
