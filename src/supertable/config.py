"""Configuration classes for supertable."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .layout import LAYOUTS, ColumnLayout, WidthLayout, get_layout
from .messages import print_info, print_warn

DEFAULT_LAYOUT = WidthLayout.name


def parse_layout(value: Any) -> str:
    """Parse a column layout name, falling back to the default layout."""
    if isinstance(value, str):
        value = value.strip().lower()
        if value in LAYOUTS:
            return value
    print_warn(f"Unrecognized table layout: {value}, using default {DEFAULT_LAYOUT}")
    return DEFAULT_LAYOUT


@dataclass
class Config:
    """Global configuration for the supertable filter."""

    layout: str = DEFAULT_LAYOUT
    line_width: str = r"\linewidth"
    float_placement: str = "htbp"
    layout_from_metadata: bool = True
    pandoc_extra_args: list[str] = field(default_factory=list)
    trace: bool = False

    @classmethod
    def from_file(cls, config_path: str | Path) -> Config:
        """Load configuration from JSON file."""
        config_path = Path(config_path)
        if not config_path.exists():
            print_info(f"Config file not found: {config_path}, using defaults")
            return cls()

        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from dictionary."""
        config = cls()

        # Table configuration
        table_config = data.get("table", {})
        if "layout" in table_config:
            config.layout = parse_layout(table_config["layout"])
        config.line_width = table_config.get("line_width", config.line_width)
        config.float_placement = table_config.get("float_placement", config.float_placement)
        config.layout_from_metadata = bool(table_config.get("layout_from_metadata", config.layout_from_metadata))

        # Pandoc configuration
        pandoc_config = data.get("pandoc", {})
        config.pandoc_extra_args = list(pandoc_config.get("extra_args", config.pandoc_extra_args))

        config.trace = bool(data.get("trace", config.trace))

        return config

    def get_layout(self) -> ColumnLayout:
        """Column layout strategy for this configuration."""
        return get_layout(parse_layout(self.layout), self.line_width)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "table": {
                "layout": self.layout,
                "line_width": self.line_width,
                "float_placement": self.float_placement,
                "layout_from_metadata": self.layout_from_metadata,
            },
            "pandoc": {
                "extra_args": list(self.pandoc_extra_args),
            },
            "trace": self.trace,
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=4)


# Default configuration template
DEFAULT_CONFIG = {
    "table": {
        "layout": DEFAULT_LAYOUT,
        "line_width": r"\linewidth",
        "float_placement": "htbp",
        "layout_from_metadata": True,
    },
    "pandoc": {
        "extra_args": [],
    },
    "trace": False,
}
