"""Copy configuration — loads and validates optional YAML settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_BUFFER_SIZE = 64 * 1024

IDENTITY_CHECKS = {"path", "inode"}


@dataclass
class CopyConfig:
    """Tunables for a single copy invocation."""
    buffer_size: int = DEFAULT_BUFFER_SIZE
    identity_check: str = "path"  # "path" | "inode"


def load_config(path: str | Path) -> CopyConfig:
    """Load copy settings from a YAML file.

    Keys not present in the file keep their defaults. Unknown keys are ignored.

    Args:
        path: Path to the YAML config file.

    Returns:
        A CopyConfig instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the YAML document is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return CopyConfig()

    if not isinstance(data, dict):
        raise ValueError("Config YAML must be a mapping at the top level.")

    return CopyConfig(
        buffer_size=data.get("buffer_size", DEFAULT_BUFFER_SIZE),
        identity_check=data.get("identity_check", "path"),
    )


def validate_config(config: CopyConfig) -> list[str]:
    """Validate a loaded config.

    Returns a list of validation error messages. Empty list means valid.
    """
    errors: list[str] = []

    # bool is an int subclass; reject it explicitly
    if (
        not isinstance(config.buffer_size, int)
        or isinstance(config.buffer_size, bool)
        or config.buffer_size <= 0
    ):
        errors.append(
            f"buffer_size must be a positive integer, got {config.buffer_size!r}."
        )

    if config.identity_check not in IDENTITY_CHECKS:
        errors.append(
            f"identity_check '{config.identity_check}' is not valid. "
            f"Must be one of: {', '.join(sorted(IDENTITY_CHECKS))}."
        )

    return errors
