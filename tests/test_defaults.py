"""Tests for the shipped policy table."""

from __future__ import annotations

from pathlib import Path

import pytest

from krsalary.config import defaults
from krsalary.config.defaults import DEFAULT_TAX_YEAR, available_tax_years, default_policy
from krsalary.utils.exceptions import ConfigError


class TestDefaultPolicy:
    def test_loads_shipped_year(self) -> None:
        assert DEFAULT_TAX_YEAR in available_tax_years()
        policy = default_policy()
        assert policy.tax_year == 2025
        assert policy.currency == "KRW"
        assert policy.periods_per_year == 12
        assert policy.rounding == "floor"
        assert policy.non_taxable_allowance == 200_000
        assert policy.dependents == 1
        assert policy.basic_deduction_per_dependent == 1_500_000

    def test_social_rates(self) -> None:
        social = default_policy().social
        assert social.national_pension.rate == 0.045
        assert social.national_pension.monthly_min_base == 390_000
        assert social.national_pension.monthly_max_base == 5_900_000
        assert social.health_insurance.rate == 0.03545
        assert social.health_insurance.long_term_care.rate_on_health == 0.1295
        assert social.employment_insurance.rate == 0.009

    def test_brackets(self) -> None:
        income_tax = default_policy().income_tax
        assert len(income_tax.brackets) == 8
        assert income_tax.brackets[0].up_to == 14_000_000
        assert income_tax.brackets[-1].up_to is None
        assert income_tax.brackets[-1].rate == 0.45
        assert income_tax.local_tax_rate == 0.10

    def test_shared_instance(self) -> None:
        assert default_policy() is default_policy()

    def test_ignores_non_year_tables(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for name in ("kr_2025.yaml", "kr_2024.yaml", "kr_draft.yaml", "kr_.yaml"):
            (tmp_path / name).write_text("", encoding="utf-8")
        monkeypatch.setattr(defaults, "package_path", lambda relative_path: tmp_path)
        assert available_tax_years() == [2024, 2025]

    def test_unknown_year(self) -> None:
        with pytest.raises(ConfigError, match="1999"):
            default_policy(1999)
