"""Pytest configuration and shared fixtures."""

import logging
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import structlog

from naegele.dates.models import CalendarDate


@pytest.fixture
def winter_lnmp() -> CalendarDate:
    """LNMP whose following weeks contain no DST change in either hemisphere."""
    return CalendarDate(day=1, month=12, year=2023)


@pytest.fixture
def winter_lnmp_text() -> str:
    return "01/12/2023"


@pytest.fixture
def noon_after():
    """Build a local-time instant at noon, a given number of days after a date."""
    def _noon_after(date: CalendarDate, days: int) -> datetime:
        return datetime(date.year, date.month, date.day, 12, 0, 0) + timedelta(days=days)
    return _noon_after


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch) -> Path:
    """Empty configuration directory, also used as the working directory."""
    monkeypatch.delenv("NAEGELE_CONFIG_DIR", raising=False)
    monkeypatch.delenv("NAEGELE_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog and stdlib logging defaults after each test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
