"""
Core filter module for supertable.
Rewrites the tables of a pandoc document as supertabular LaTeX blocks.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import IO, Any

import pypandoc

from .config import Config, parse_layout
from .messages import Trace, null_trace, print_error, print_info, print_trace
from .nodes import RawBlock
from .pandoc import PandocFormatError, decode_meta, decode_table, encode_block, encode_meta, stringify
from .preamble import augment_metadata
from .renderer import render_table

LAYOUT_META_KEY = "supertable-layout"


class PandocError(RuntimeError):
    """Raised when the pandoc executable is missing or fails."""


def get_trace(config: Config) -> Trace:
    return print_trace if config.trace else null_trace


def document_config(meta: dict[str, Any], config: Config) -> Config:
    """Apply per-document options from metadata on top of config."""
    if not config.layout_from_metadata or LAYOUT_META_KEY not in meta:
        return config
    layout = parse_layout(stringify(meta[LAYOUT_META_KEY]))
    return replace(config, layout=layout)


class TableFilter:
    """Replaces every Table block of a pandoc JSON document, outermost first."""

    def __init__(self, config: Config):
        self.config = config
        self.layout = config.get_layout()
        self.trace = get_trace(config)
        self.converted = 0
        self.failed = 0

    def convert_table(self, obj: dict[str, Any]) -> dict[str, Any]:
        try:
            table = decode_table(obj)
        except PandocFormatError as e:
            print_error(f"Leaving table unchanged: {e}")
            self.failed += 1
            return obj
        latex = render_table(
            table,
            layout=self.layout,
            trace=self.trace,
            float_placement=self.config.float_placement,
        )
        self.converted += 1
        return encode_block(RawBlock("latex", latex))

    def walk(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self.walk(item) for item in value]
        if isinstance(value, dict):
            if value.get("t") == "Table":
                return self.convert_table(value)
            return {key: self.walk(item) for key, item in value.items()}
        return value


def filter_document(doc: dict[str, Any], config: Config | None = None) -> dict[str, Any]:
    """
    Filter a pandoc JSON document.

    Args:
        doc: Parsed pandoc JSON document
        config: Configuration object (uses defaults if None)

    Returns:
        New document with augmented header-includes and every table
        replaced by a raw LaTeX block

    Raises:
        PandocFormatError: If doc is not a pandoc JSON document
    """
    if config is None:
        config = Config()

    if not isinstance(doc, dict) or not {"pandoc-api-version", "meta", "blocks"} <= doc.keys():
        raise PandocFormatError("Input is not a pandoc JSON document (pandoc 2.10 or later required)")

    config = document_config(doc["meta"], config)
    trace = get_trace(config)

    meta = augment_metadata(decode_meta(doc["meta"]), trace=trace)

    table_filter = TableFilter(config)
    blocks = table_filter.walk(doc["blocks"])
    if table_filter.converted:
        print_info(f"Converted {table_filter.converted} tables to supertabular ({config.layout} layout)")
    if table_filter.failed:
        print_error(f"{table_filter.failed} tables could not be converted")

    return {**doc, "meta": encode_meta(meta), "blocks": blocks}


def run_filter(stdin: IO[str], stdout: IO[str], config: Config | None = None) -> None:
    """Run as a pandoc JSON filter: read a document, write the filtered one."""
    try:
        doc = json.load(stdin)
    except json.JSONDecodeError as e:
        raise PandocFormatError(f"Invalid JSON input: {e}") from e
    json.dump(filter_document(doc, config), stdout, ensure_ascii=False)


def run_pandoc(
    source: str,
    to: str,
    format: str,
    extra_args: list[str] | None = None,
    outputfile: str | None = None,
) -> str:
    """
    Convert text with pandoc.

    Raises:
        PandocError: If pandoc is not installed or the conversion fails
    """
    try:
        return pypandoc.convert_text(
            source,
            to,
            format=format,
            extra_args=extra_args or [],
            outputfile=outputfile,
        )
    except OSError as e:
        raise PandocError(f"pandoc is not available: {e}") from e
    except RuntimeError as e:
        raise PandocError(f"pandoc conversion failed: {e}") from e


def convert(
    markdown_content: str,
    output_path: str | Path,
    config: Config | None = None,
) -> Path:
    """
    Convert Markdown content to a standalone LaTeX document.

    Args:
        markdown_content: Markdown text content
        output_path: Output file path
        config: Configuration object (uses defaults if None)

    Returns:
        Path to the output file
    """
    if config is None:
        config = Config()

    output_path = Path(output_path)

    try:
        doc = json.loads(run_pandoc(markdown_content, "json", format="markdown"))
    except json.JSONDecodeError as e:
        raise PandocFormatError(f"pandoc returned invalid JSON: {e}") from e
    filtered = filter_document(doc, config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    run_pandoc(
        json.dumps(filtered, ensure_ascii=False),
        "latex",
        format="json",
        extra_args=["-s", *config.pandoc_extra_args],
        outputfile=str(output_path),
    )
    print_info(f"Document saved: {output_path}")

    return output_path


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Config | str | Path | None = None,
) -> Path:
    """
    Convert Markdown file to a LaTeX document.

    Args:
        input_path: Input Markdown file path
        output_path: Output file path (defaults to input with .tex extension)
        config: Configuration object or path to config file

    Returns:
        Path to the output file
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = input_path.with_suffix(".tex")
    else:
        output_path = Path(output_path)

    # Load config
    if config is None:
        config = Config()
    elif isinstance(config, (str, Path)):
        config = Config.from_file(config)

    markdown_content = input_path.read_text(encoding="utf-8")

    return convert(markdown_content, output_path, config)
