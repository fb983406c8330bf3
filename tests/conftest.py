"""Shared pytest fixtures for the looseini test suite."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterator

import pytest

from looseini.telemetry import ParseLogger
from tests.fixture_paths import ini_fixture_path


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    """Provide a resolver for literal `.ini` fixtures."""

    return ini_fixture_path


@pytest.fixture
def log_sink() -> io.StringIO:
    """Collect parse log lines written by `parse_logger`."""

    return io.StringIO()


@pytest.fixture
def parse_logger(log_sink: io.StringIO) -> Iterator[ParseLogger]:
    """Provide a parse logger writing into `log_sink`, removed after the test."""

    run_logger = ParseLogger(sink=log_sink)
    yield run_logger
    run_logger.close()
