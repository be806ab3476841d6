"""Shared fixtures: keep the event log out of the repository."""
import asyncio

import pytest

from engine.logging.event_logger import logger


@pytest.fixture(autouse=True)
def isolated_event_log(tmp_path, monkeypatch):
    """Point the global event logger at a per-test file."""
    monkeypatch.setattr(logger, "log_path", tmp_path / "events.jsonl")
    monkeypatch.setattr(logger, "lock", asyncio.Lock())
    return logger
