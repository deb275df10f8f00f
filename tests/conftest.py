"""Shared test fixtures for tw-pattern-analyzer tests."""

import logging
import os

import pytest

from tw_patterns.config import AnalyzerConfig, OutputConfig
from tw_patterns.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_tw_patterns_logger():
    """CLI runs call setup_logging; undo it so caplog sees every test's warnings."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TW_PATTERNS_* variables from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("TW_PATTERNS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config():
    """Default configuration with console and JSON output switched off."""
    return AnalyzerConfig(
        output=OutputConfig(console_enabled=False, json_enabled=False),
    )


@pytest.fixture
def workspace(tmp_path):
    """A small monorepo with React, Astro and Vue sources."""
    (tmp_path / "package.json").write_text('{"name": "demo", "workspaces": ["apps/*"]}')

    web = tmp_path / "apps" / "web" / "src"
    web.mkdir(parents=True)
    (web / "Card.tsx").write_text(
        '<div className="flex gap-4 items-center">\n'
        '  <span className="text-sm font-bold">x</span>\n'
        "</div>\n"
    )
    (web / "Row.tsx").write_text(
        '<div className="items-center gap-4 flex">\n'
        '  <p className="flex gap-4 justify-center">y</p>\n'
        "</div>\n"
    )
    (web / "Page.astro").write_text(
        '<section class="flex gap-4 items-center"></section>\n'
        '<ul class:list={["rounded", "shadow"]}></ul>\n'
    )

    ignored = tmp_path / "apps" / "web" / "node_modules" / "lib"
    ignored.mkdir(parents=True)
    (ignored / "Vendor.tsx").write_text('<div className="flex gap-4 items-center">')

    return tmp_path
