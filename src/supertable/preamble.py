"""Preamble augmentation: make sure the packages supertabular needs are loaded."""

from __future__ import annotations

from collections.abc import Mapping

from .messages import Trace, null_trace
from .nodes import MetaBlocks, MetaList, MetaValue, RawBlock

HEADER_INCLUDES = "header-includes"

PACKAGES = (
    r"\usepackage{supertabular}",
    r"\usepackage{array}",
    r"\usepackage{calc}",
)


def package_entries() -> tuple[MetaBlocks, ...]:
    """Header-include entries declaring the required packages."""
    return tuple(MetaBlocks((RawBlock("latex", declaration),)) for declaration in PACKAGES)


def augment_metadata(meta: Mapping[str, MetaValue], trace: Trace = null_trace) -> dict[str, MetaValue]:
    """
    Append the package declarations to ``header-includes``.

    Existing entries are kept in order; a single non-list value is wrapped
    into a one-element list first.

    Args:
        meta: Document metadata
        trace: Callable receiving diagnostic lines

    Returns:
        New metadata mapping with every original key preserved
    """
    result = dict(meta)
    current = result.get(HEADER_INCLUDES)

    if current is None:
        items: tuple[MetaValue, ...] = ()
    elif isinstance(current, MetaList):
        items = current.items
    else:
        items = (current,)

    result[HEADER_INCLUDES] = MetaList(items + package_entries())
    trace(f"header-includes: {len(items)} existing, {len(PACKAGES)} added")
    return result
