"""Unit tests for config.py"""

import pytest

from mdauto.config import load_config


def test_load_config_defaults():
    """Settings defaults apply when there is no config.yaml, env var, or CLI override."""
    settings = load_config()
    assert settings.docs_root == "docs"
    assert settings.workspace_root == "."
    assert settings.sidebar_command is None
    assert settings.log_level == "INFO"


def test_load_config_uses_env_docs_root(monkeypatch):
    monkeypatch.setenv("MDAUTO_DOCS_ROOT", "content")
    assert load_config().docs_root == "content"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDAUTO_DOCS_ROOT takes precedence over config.yaml docs_root."""
    (tmp_path / "config.yaml").write_text("docs_root: site-docs\nsidebar_command: node assign.js\n")
    monkeypatch.setenv("MDAUTO_DOCS_ROOT", "env-docs")
    settings = load_config()
    assert settings.docs_root == "env-docs"
    assert settings.sidebar_command == "node assign.js"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDAUTO_DOCS_ROOT", "env-docs")
    assert load_config(overrides={"docs_root": "cli-docs"}).docs_root == "cli-docs"
    assert load_config(overrides={"docs_root": None}).docs_root == "env-docs"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_log_level_normalized(monkeypatch):
    monkeypatch.setenv("MDAUTO_LOG_LEVEL", "debug")
    assert load_config().log_level == "DEBUG"


def test_load_config_unknown_log_level(monkeypatch):
    """Validation errors surface as ValueError, which the CLI reports."""
    monkeypatch.setenv("MDAUTO_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        load_config()


def test_docs_path_is_absolute(tmp_path):
    settings = load_config(overrides={"workspace_root": str(tmp_path), "docs_root": "docs"})
    assert settings.docs_path == tmp_path / "docs"
