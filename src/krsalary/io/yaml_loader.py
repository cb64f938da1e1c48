"""Read policy tables shipped as YAML inside the package."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Parse a UTF-8 YAML file; policy files carry Korean labels."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def package_path(relative_path: str) -> Path:
    """Resolve a path inside the installed krsalary package, e.g. ``"tables"``."""
    return Path(__file__).resolve().parent.parent / relative_path


def load_package_yaml(relative_path: str) -> Any:
    """Load a shipped table such as ``"tables/kr_2025.yaml"``.

    Raises:
        FileNotFoundError: If no such table ships with the package.
    """
    return load_yaml(package_path(relative_path))
