"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from krsalary.config.defaults import default_policy
from krsalary.config.schema import PolicyConfig, TaxBracket


@pytest.fixture
def policy() -> PolicyConfig:
    """Shipped policy table."""
    return default_policy()


@pytest.fixture
def brackets(policy: PolicyConfig) -> tuple[TaxBracket, ...]:
    return policy.income_tax.brackets


@pytest.fixture
def policy_data(policy: PolicyConfig) -> dict[str, Any]:
    """Plain-dict copy of the shipped policy, for building variants."""
    return policy.model_dump()
