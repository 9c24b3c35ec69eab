"""Root test configuration: isolate every test from the caller's config and environment"""

import pytest


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no MDAUTO_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("WORKSPACE_ROOT", "DOCS_ROOT", "SIDEBAR_COMMAND", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(f"MDAUTO_{name}", raising=False)


@pytest.fixture(name="docs_dir")
def docs_dir_fixture(tmp_path):
    """The default documents root (./docs) inside the tmp workspace."""
    d = tmp_path / "docs"
    d.mkdir()
    return d
