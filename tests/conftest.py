"""Shared pytest fixtures for the filecopy test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ── Config Fixtures ───────────────────────────────────────────────


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "copy_config.yaml"


@pytest.fixture
def invalid_config_path() -> Path:
    return FIXTURES_DIR / "invalid_config.yaml"


@pytest.fixture
def list_config_path() -> Path:
    return FIXTURES_DIR / "list_config.yaml"


# ── File Fixtures ─────────────────────────────────────────────────


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A small text source file."""
    path = tmp_path / "source.txt"
    path.write_bytes(b"Hello, World!")
    return path


@pytest.fixture
def binary_content() -> bytes:
    """Every byte value, including NUL, CR/LF and high bytes."""
    return bytes(range(256)) + b"\r\n\x00\xff\xfe\r"


@pytest.fixture
def binary_file(tmp_path: Path, binary_content: bytes) -> Path:
    path = tmp_path / "binary.bin"
    path.write_bytes(binary_content)
    return path


@pytest.fixture
def dest_path(tmp_path: Path) -> Path:
    return tmp_path / "dest.txt"
