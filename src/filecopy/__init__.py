"""Byte-for-byte single file copy utility."""

from __future__ import annotations

__version__ = "0.1.0"
