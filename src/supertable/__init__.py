"""
supertable - Render pandoc tables as supertabular LaTeX.

A pandoc JSON filter and Python library that rewrites tables into the
supertabular environment, which paginates well in double-column documents.
"""

from .config import DEFAULT_CONFIG, Config
from .converter import PandocError, convert, convert_file, filter_document, run_filter
from .inlines import normalize_inlines, stringify_blocks
from .layout import ColumnLayout, SimpleLayout, WidthLayout
from .pandoc import PandocFormatError
from .preamble import augment_metadata
from .renderer import render_table

__version__ = "0.1.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "ColumnLayout",
    "SimpleLayout",
    "WidthLayout",
    "PandocError",
    "PandocFormatError",
    "augment_metadata",
    "convert",
    "convert_file",
    "filter_document",
    "normalize_inlines",
    "render_table",
    "run_filter",
    "stringify_blocks",
]
