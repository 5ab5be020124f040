"""
Pytest fixtures for the contract kernel test suite.

Provides:
- Facade reset between tests (facades are process-wide state)
- Structured log capture
- A FailureRecorder-backed checker
- Temporary YAML configuration files
"""

import json
import logging
from io import StringIO
from pathlib import Path

import pytest
import yaml

from contract_kernel.checker import ConditionChecker
from contract_kernel.domain.policy import CheckerSettings, FailurePolicy
from contract_kernel.facades import reset_facades
from contract_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from contract_kernel.reporting import FailureRecorder


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture contract_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            Assert.check_true(False)
            logs = captured_logs()
            assert logs[0]["level"] == "WARNING"
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("contract_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Checker fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_facades():
    """Restore Assert / Require / Expect to defaults around every test."""
    reset_facades()
    yield
    reset_facades()


@pytest.fixture
def recorder() -> FailureRecorder:
    return FailureRecorder()


@pytest.fixture
def checker(recorder) -> ConditionChecker:
    """A report-policy checker whose failures land in ``recorder``."""
    return ConditionChecker(
        "Test",
        settings=CheckerSettings(policy=FailurePolicy.REPORT),
        handler=recorder,
    )


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path):
    """
    Write a dict as YAML and return its path.

    Usage::

        path = write_config({"lenient": True})
    """

    def _write(data: dict, name: str = "checks.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write
