"""Pytest fixtures for endeavour tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from helpers import RecordingServer

from endeavour import UploadConfig


@pytest.fixture
def server() -> RecordingServer:
    """A fake Nexus that accepts every upload."""
    return RecordingServer()


@pytest.fixture
def http_client(server: RecordingServer) -> Any:
    """An httpx client wired to the fake Nexus."""
    client = httpx.Client(transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def make_config() -> Callable[..., UploadConfig]:
    """Build an UploadConfig with sensible defaults, overridable per test."""

    def _make(**overrides: Any) -> UploadConfig:
        values: dict[str, Any] = {
            "url": "http://h",
            "repo": "r",
            "path": "p",
            "username": "deployer",
            "password": "s3cret",
            "files": ("f.bin",),
        }
        values.update(overrides)
        return UploadConfig(**values)

    return _make


@pytest.fixture
def temp_file(tmp_path: Path) -> Path:
    """Create a temporary binary file for testing."""
    file_path = tmp_path / "f.bin"
    file_path.write_bytes(b"\x00\x01 artifact content")
    return file_path


@pytest.fixture
def temp_tree(tmp_path: Path) -> Path:
    """Create root/x.txt and root/sub/y.txt."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "x.txt").write_text("x")
    (root / "sub" / "y.txt").write_text("y")
    return root
