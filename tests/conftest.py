"""
Pytest configuration and fixtures for niwalog-records tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import json
from typing import Any

import pytest

from src.export import column


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the CLI"
    )


# =======================
# HOST FIXTURES
# =======================

class RecordingArtifactHost:
    """
    In-memory artifact host that records every call.

    Set ``fail_on_trigger`` to make the download trigger raise, the way a
    browser refusing the download would.
    """

    def __init__(self, fail_on_trigger: bool = False):
        self.fail_on_trigger = fail_on_trigger
        self.calls: list[tuple[str, Any]] = []
        self.live_handles: set[int] = set()
        self.downloads: dict[str, tuple[bytes, str]] = {}
        self._contents: dict[int, tuple[bytes, str]] = {}
        self._next_handle = 0

    def create_artifact(self, content: bytes, mime_type: str) -> int:
        self._next_handle += 1
        handle = self._next_handle
        self._contents[handle] = (content, mime_type)
        self.live_handles.add(handle)
        self.calls.append(("create", handle))
        return handle

    def trigger_download(self, handle: int, filename: str) -> None:
        self.calls.append(("trigger", filename))
        if self.fail_on_trigger:
            raise PermissionError("download refused by host")
        self.downloads[filename] = self._contents[handle]

    def release_artifact(self, handle: int) -> None:
        self.calls.append(("release", handle))
        self.live_handles.discard(handle)


@pytest.fixture
def recording_host() -> RecordingArtifactHost:
    return RecordingArtifactHost()


@pytest.fixture
def refusing_host() -> RecordingArtifactHost:
    return RecordingArtifactHost(fail_on_trigger=True)


# =======================
# DATA FIXTURES
# =======================

@pytest.fixture
def employee_candidate() -> dict[str, Any]:
    """A valid hourly employee as the form submits it (rates as strings)."""
    return {
        "employee_code": "EMP-001",
        "name": "山田 太郎",
        "salary_type": "hourly",
        "hourly_rate": "1200",
        "daily_rate": None,
    }


@pytest.fixture
def simple_columns():
    return [
        column("code", "Code"),
        column("name", "Name"),
        column("active", "Active"),
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload to a temp file and return its path."""

    def _write(payload: Any, name: str = "input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
