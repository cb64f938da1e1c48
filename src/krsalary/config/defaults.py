"""Default policy tables for krsalary."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from krsalary.config.schema import PolicyConfig
from krsalary.io.yaml_loader import load_package_yaml, package_path
from krsalary.utils.exceptions import ConfigError

DEFAULT_TAX_YEAR: int = 2025

_LOGGER = logging.getLogger(__name__)


def available_tax_years() -> list[int]:
    """Tax years with a shipped policy table."""
    suffixes = (p.stem.removeprefix("kr_") for p in package_path("tables").glob("kr_*.yaml"))
    return sorted(int(s) for s in suffixes if s.isdigit())


@lru_cache(maxsize=None)
def default_policy(tax_year: int = DEFAULT_TAX_YEAR) -> PolicyConfig:
    """Load the shipped policy table for ``tax_year``.

    Args:
        tax_year: Year of the table under ``tables/kr_<year>.yaml``.

    Returns:
        Frozen PolicyConfig, shared between callers.

    Raises:
        ConfigError: If no table exists for the year.
    """
    if tax_year not in available_tax_years():
        raise ConfigError(
            f"No policy table for tax year {tax_year}; available: {available_tax_years()}"
        )
    data: dict[str, Any] = load_package_yaml(f"tables/kr_{tax_year}.yaml")
    _LOGGER.debug("Loaded policy table for tax year %d", tax_year)
    return PolicyConfig.model_validate(data)
