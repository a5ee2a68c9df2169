"""
Unit tests for configuration loading and saving.
"""

import logging
from pathlib import Path

from luminescence import config
from luminescence.loader import DEFAULT_RESOURCE_NAME


class TestConfig:
    """Test TOML configuration handling."""

    def test_defaults(self):
        """Test default values."""
        cfg = config.Config()

        assert cfg.catalog.resource_name == DEFAULT_RESOURCE_NAME
        assert cfg.catalog.path is None
        assert cfg.logging.level == "INFO"

    def test_missing_file_defaults(self, tmp_path):
        """Test a missing config file yields defaults."""
        cfg = config.load_config(tmp_path / "absent.toml")

        assert cfg == config.Config()

    def test_save_load(self, tmp_path):
        """Test saved values are loaded back."""
        path = tmp_path / "nested" / "config.toml"
        cfg = config.Config(
            catalog=config.CatalogConfig(path="/opt/effects.plist"),
            logging=config.LoggingConfig(level="DEBUG"),
        )
        config.save_config(cfg, path)

        assert path.exists()
        assert config.load_config(path) == cfg

    def test_load_partial(self, tmp_path):
        """Test unspecified sections keep defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "WARNING"\n')
        cfg = config.load_config(path)

        assert cfg.logging.level == "WARNING"
        assert cfg.catalog.resource_name == DEFAULT_RESOURCE_NAME

    def test_config_path_xdg(self, tmp_path, monkeypatch):
        """Test XDG_CONFIG_HOME is honored."""
        monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert config.get_config_path() == tmp_path / "luminescence" / "config.toml"

    def test_config_path_env_override(self, tmp_path, monkeypatch):
        """Test LUMINESCENCE_CONFIG takes precedence over XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "unit7.toml"))

        assert config.get_config_path() == tmp_path / "unit7.toml"

    def test_path_expanded_on_validation(self):
        """Test ~ in the resource path is expanded when the config is built."""
        cfg = config.CatalogConfig(path="~/effects.plist")

        assert cfg.path == Path.home() / "effects.plist"

    def test_path_expanded_on_load(self, tmp_path):
        """Test ~ in a loaded TOML resource path is expanded."""
        path = tmp_path / "config.toml"
        path.write_text('[catalog]\npath = "~/effects.plist"\n')

        assert config.load_config(path).catalog.path == Path.home() / "effects.plist"

    def test_saved_path_is_string(self, tmp_path):
        """Test a resource path is written as a TOML string."""
        path = tmp_path / "config.toml"
        config.save_config(config.Config(catalog=config.CatalogConfig(path="/opt/fx.plist")), path)

        assert 'path = "/opt/fx.plist"' in path.read_text()

    def test_resolve_explicit_path(self):
        """Test an explicit path overrides the bundled resource."""
        source = config.CatalogConfig(path="~/effects.plist").resolve_source()

        assert source == Path.home() / "effects.plist"

    def test_resolve_bundled(self):
        """Test the default source is the bundled plist."""
        source = config.CatalogConfig().resolve_source()

        assert source.name == DEFAULT_RESOURCE_NAME + ".plist"


class TestConfigureLogging:
    """Test logging setup."""

    def test_level_applied(self, monkeypatch):
        """Test the configured level reaches basicConfig."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        config.configure_logging(config.LoggingConfig(level="debug"))

        assert calls["level"] == logging.DEBUG
        assert "%(message)s" in calls["format"]

    def test_unknown_level_falls_back(self, monkeypatch):
        """Test an unknown level name falls back to INFO."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        config.configure_logging(config.LoggingConfig(level="LOUD"))

        assert calls["level"] == logging.INFO
