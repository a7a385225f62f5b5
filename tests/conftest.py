"""Shared fixtures for the library API tests."""

import logging

import pytest
from rich.logging import RichHandler

import common.logger as logger_module
from store import IdStrategy, LibraryStore


@pytest.fixture
def store():
    """An isolated store seeded with the fixture data."""
    return LibraryStore.seeded(id_strategy=IdStrategy.COUNTER)


@pytest.fixture
def length_store():
    """A seeded store that assigns ids as collection length + 1."""
    return LibraryStore.seeded(id_strategy=IdStrategy.LENGTH)


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo logger levels, handlers and setup_logging() state after a test."""
    root = logging.getLogger()
    root_level = root.level
    saved = [
        (lg, lg.level, list(lg.handlers))
        for lg in logging.root.manager.loggerDict.values()
        if isinstance(lg, logging.Logger)
    ]
    monkeypatch.setattr(logger_module, "_root_configured", False)
    monkeypatch.setattr(logger_module, "_module_handlers", dict(logger_module._module_handlers))

    yield

    for lg, level, handlers in saved:
        lg.setLevel(level)
        lg.handlers[:] = handlers
    # Root keeps the capture handlers pytest manages; drop the one setup_logging added
    root.setLevel(root_level)
    root.handlers[:] = [h for h in root.handlers if not isinstance(h, RichHandler)]
