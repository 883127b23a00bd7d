"""Unit tests for preview configuration loading."""

import json

import pytest

from jsx_svg_preview.config.config_loader import ConfigLoader, load_config
from jsx_svg_preview.config.models import PreviewConfig
from jsx_svg_preview.exceptions import ConfigError


class TestPreviewConfig:
    """Test the configuration models."""

    def test_defaults(self):
        """Defaults are shallow extraction and shallow conversion."""
        config = PreviewConfig()
        assert config.extraction.recursive is False
        assert config.extraction.max_depth == 32
        assert config.extraction.expression_marker == "[Expression]"
        assert config.conversion.deep is False
        assert config.conversion.translate_attribute_names is True
        assert config.render.condensed is False
        assert config.logging.debug is False

    def test_bounds_validated(self):
        """Out-of-range values are rejected."""
        with pytest.raises(ValueError):
            PreviewConfig.model_validate({"extraction": {"max_depth": 0}})

    def test_unknown_keys_rejected(self):
        """Typos in config sections are errors."""
        with pytest.raises(ValueError):
            PreviewConfig.model_validate({"render": {"titel": "x"}})


class TestConfigLoader:
    """Test loading precedence."""

    def test_no_file_gives_defaults(self, tmp_path):
        """A project without config file uses defaults."""
        config = ConfigLoader(project_path=tmp_path, environ={}).load()
        assert config == PreviewConfig()

    def test_project_file_loaded(self, tmp_path):
        """.svg-preview.json in the project is picked up."""
        (tmp_path / ".svg-preview.json").write_text(
            json.dumps({"extraction": {"recursive": True}, "render": {"title": "Icons"}})
        )
        config = ConfigLoader(project_path=tmp_path, environ={}).load()
        assert config.extraction.recursive is True
        assert config.render.title == "Icons"

    def test_environment_overrides_file(self, tmp_path):
        """Environment variables beat the config file."""
        (tmp_path / ".svg-preview.json").write_text(
            json.dumps({"conversion": {"deep": False, "preview_width": 50}})
        )
        environ = {"SVG_PREVIEW_DEEP": "true", "SVG_PREVIEW_UNKNOWN": "1", "HOME": "/x"}
        config = ConfigLoader(project_path=tmp_path, environ=environ).load()
        assert config.conversion.deep is True
        assert config.conversion.preview_width == 50

    def test_overrides_beat_environment(self, tmp_path):
        """Explicit overrides have the highest priority."""
        environ = {"SVG_PREVIEW_MAX_DEPTH": "4"}
        loader = ConfigLoader(project_path=tmp_path, environ=environ)
        config = loader.load(max_depth=8, **{"render.condensed": True})
        assert config.extraction.max_depth == 8
        assert config.render.condensed is True

    def test_invalid_json_raises(self, tmp_path):
        """Broken JSON is a ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            ConfigLoader(config_file=path, environ={}).load()

    def test_non_object_json_raises(self, tmp_path):
        """The file must hold a JSON object."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            ConfigLoader(config_file=path, environ={}).load()

    def test_missing_explicit_file_raises(self, tmp_path):
        """An explicit file that does not exist is an error."""
        with pytest.raises(ConfigError):
            ConfigLoader(config_file=tmp_path / "nope.json", environ={}).load()

    def test_invalid_value_raises(self, tmp_path):
        """Validation failures surface as ConfigError."""
        loader = ConfigLoader(project_path=tmp_path, environ={})
        with pytest.raises(ConfigError):
            loader.load(preview_width=-1)


class TestLoadConfig:
    """Test the load_config helper."""

    def test_directory_argument(self, tmp_path, monkeypatch):
        """A directory is treated as the project path."""
        for name in ("SVG_PREVIEW_RECURSIVE", "SVG_PREVIEW_DEBUG"):
            monkeypatch.delenv(name, raising=False)
        (tmp_path / ".svg-preview.json").write_text(json.dumps({"logging": {"debug": True}}))
        config = load_config(tmp_path)
        assert config.logging.debug is True

    def test_file_argument_with_overrides(self, tmp_path, monkeypatch):
        """A file path is loaded directly; overrides still apply."""
        monkeypatch.delenv("SVG_PREVIEW_RECURSIVE", raising=False)
        path = tmp_path / "preview.json"
        path.write_text(json.dumps({"extraction": {"recursive": True}}))
        config = load_config(path, title="Custom")
        assert config.extraction.recursive is True
        assert config.render.title == "Custom"
