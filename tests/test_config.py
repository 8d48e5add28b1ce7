"""Tests for supertable configuration module."""

import json
import os
import tempfile
from pathlib import Path

from supertable.config import DEFAULT_CONFIG, Config, parse_layout
from supertable.layout import SimpleLayout, WidthLayout


class TestParseLayout:
    """Tests for parse_layout function."""

    def test_known_layouts(self):
        """Test parsing known layout names."""
        assert parse_layout("width") == "width"
        assert parse_layout("simple") == "simple"

    def test_case_and_whitespace(self):
        """Test layout names are normalized."""
        assert parse_layout("  Simple ") == "simple"

    def test_invalid_returns_default(self):
        """Test invalid layout returns default."""
        assert parse_layout("fancy") == "width"
        assert parse_layout("") == "width"
        assert parse_layout(None) == "width"


class TestConfig:
    """Tests for Config class."""

    def test_default_values(self):
        """Test default values are set correctly."""
        config = Config()
        assert config.layout == "width"
        assert config.line_width == r"\linewidth"
        assert config.float_placement == "htbp"
        assert config.layout_from_metadata is True
        assert config.pandoc_extra_args == []
        assert config.trace is False

    def test_from_dict(self):
        """Test creating Config from dictionary."""
        data = {
            "table": {"layout": "simple", "float_placement": "t", "layout_from_metadata": False},
            "pandoc": {"extra_args": ["--top-level-division=section"]},
            "trace": True,
        }
        config = Config.from_dict(data)
        assert config.layout == "simple"
        assert config.float_placement == "t"
        assert config.layout_from_metadata is False
        assert config.pandoc_extra_args == ["--top-level-division=section"]
        assert config.trace is True

    def test_from_dict_invalid_layout(self):
        """Test invalid layout in config falls back to default."""
        config = Config.from_dict({"table": {"layout": "bogus"}})
        assert config.layout == "width"

    def test_get_layout(self):
        """Test layout strategy selection."""
        assert isinstance(Config().get_layout(), WidthLayout)
        assert isinstance(Config(layout="simple").get_layout(), SimpleLayout)

    def test_get_layout_uses_line_width(self):
        """Test width layout picks up the configured width macro."""
        layout = Config(line_width=r"\columnwidth").get_layout()
        assert layout.line_width == r"\columnwidth"

    def test_from_file(self):
        """Test loading config from file."""
        temp_dir = tempfile.mkdtemp()
        config_path = Path(temp_dir) / "supertable.json"
        try:
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump({"table": {"layout": "simple"}}, f)
            config = Config.from_file(config_path)
            assert config.layout == "simple"
        finally:
            config_path.unlink(missing_ok=True)
            os.rmdir(temp_dir)

    def test_from_nonexistent_file(self):
        """Test loading from non-existent file returns default config."""
        config = Config.from_file("/nonexistent/path/supertable.json")
        assert config.layout == "width"

    def test_save_and_load(self):
        """Test saving and loading config."""
        config = Config(layout="simple", line_width=r"\textwidth", trace=True)

        temp_dir = tempfile.mkdtemp()
        config_path = Path(temp_dir) / "supertable.json"
        try:
            config.save(config_path)
            loaded = Config.from_file(config_path)
            assert loaded == config
        finally:
            config_path.unlink(missing_ok=True)
            os.rmdir(temp_dir)


class TestDefaultConfig:
    """Tests for DEFAULT_CONFIG."""

    def test_default_config_structure(self):
        """Test DEFAULT_CONFIG has expected structure."""
        assert "table" in DEFAULT_CONFIG
        assert "pandoc" in DEFAULT_CONFIG
        assert "trace" in DEFAULT_CONFIG

    def test_default_config_loadable(self):
        """Test DEFAULT_CONFIG matches the dataclass defaults."""
        assert Config.from_dict(DEFAULT_CONFIG) == Config()
