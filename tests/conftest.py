"""Shared pytest fixtures and test helpers for mintcompat tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from mintcompat.config.settings import MintSettings

COMPONENT_PAGE = """\
# Overview

<Columns cols={2}>
  <Card title="Install" href="/install" />
</Columns>

<iframe src="https://example.com/embed" frameBorder="0" allowFullScreen />

```jsx
<Columns cols={2} />
```
"""

PLAIN_PAGE = "# Plain\n\nNothing to rewrite here.\n"


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() side effects from CLI invocations."""
    mint = logging.getLogger("mintcompat")
    handlers, level, propagate = mint.handlers[:], mint.level, mint.propagate
    yield
    mint.handlers = handlers
    mint.setLevel(level)
    mint.propagate = propagate


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's MINTCOMPAT_* environment out of the tests."""
    monkeypatch.delenv("MINTCOMPAT_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary site project with a ``docs/`` tree.

    Layout::

        docs/index.md           component page (needs rewriting)
        docs/guide/plain.md     plain page (unchanged)
        docs/guide/notes.txt    not markdown
        docs/zh-CN/index.md     component page, excluded by some tests
    """
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "zh-CN").mkdir()
    (docs / "index.md").write_text(COMPONENT_PAGE, encoding="utf-8")
    (docs / "guide" / "plain.md").write_text(PLAIN_PAGE, encoding="utf-8")
    (docs / "guide" / "notes.txt").write_text("cols={2}", encoding="utf-8")
    (docs / "zh-CN" / "index.md").write_text(COMPONENT_PAGE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> MintSettings:
    """Default settings rooted at the temporary project, plugins off."""
    return make_settings(project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temporary project so the CLI picks it up.

    Plugins are disabled so installed third-party plugins cannot leak
    into CLI tests.
    """
    (project_root / "mintcompat.toml").write_text("[plugins]\nenabled = false\n")
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_settings(project_root: Path, toml: str = "[plugins]\nenabled = false\n") -> MintSettings:
    """Write *toml* as mintcompat.toml and build settings from it."""
    config = project_root / "mintcompat.toml"
    config.write_text(toml, encoding="utf-8")
    return MintSettings.from_cli(config_path=str(config), project_root=project_root)
