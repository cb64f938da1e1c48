"""Serialization for policies and calculation results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from krsalary.config.schema import PolicyConfig
from krsalary.core.calculator import SalaryBreakdown
from krsalary.io.yaml_loader import load_yaml
from krsalary.utils.exceptions import ConfigError


def dump_policy(policy: PolicyConfig) -> str:
    """Serialize a policy to a JSON string."""
    return json.dumps(policy.model_dump(), indent=2, ensure_ascii=False)


def load_policy(path: Path) -> PolicyConfig:
    """Load and validate a policy from a YAML or JSON file.

    Args:
        path: ``.yaml``/``.yml`` or ``.json`` file holding a full policy.

    Returns:
        Validated PolicyConfig.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    try:
        if path.suffix.lower() == ".json":
            data: Any = json.loads(path.read_text(encoding="utf-8"))
        elif path.suffix.lower() in (".yaml", ".yml"):
            data = load_yaml(path)
        else:
            raise ConfigError(f"Unsupported policy file type: {path.suffix or path.name}")
    except OSError as exc:
        raise ConfigError(f"Cannot read policy file {path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot parse policy file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Policy file {path} must contain a mapping")
    try:
        return PolicyConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid policy in {path}:\n{exc}") from exc


def dump_breakdown(breakdown: SalaryBreakdown) -> str:
    """Serialize a calculation result, debug tree included, to JSON."""
    return json.dumps(breakdown.to_dict(), indent=2, ensure_ascii=False)
