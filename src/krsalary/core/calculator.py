"""Net take-home pay calculation, from annual gross salary to monthly net."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

from krsalary.config.schema import PolicyConfig
from krsalary.core.rounding import round_amount
from krsalary.taxes.income_tax import (
    apply_earned_income_tax_credit,
    earned_income_deduction,
    progressive_tax_by_quick_deduction,
)
from krsalary.taxes.social_insurance import monthly_social_insurance

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrossAmount:
    monthly_total: int
    annual: int


@dataclass(frozen=True)
class NonTaxableAmount:
    monthly: int
    annual: int


@dataclass(frozen=True)
class TaxableBase:
    monthly: int


@dataclass(frozen=True)
class Deductions:
    """Rounded withholding amounts.

    Attributes:
        monthly: Monthly social insurance contributions keyed by label, in
            the order pension, health, long-term care, employment.
        monthly_social: Monthly social insurance total.
        monthly_taxes: Monthly share of income tax plus local tax.
        monthly_total: Monthly social insurance and taxes combined.
        annual_social: Annual social insurance total.
        annual_taxes: Annual income tax plus local tax.
    """

    monthly: dict[str, int]
    monthly_social: int
    monthly_taxes: int
    monthly_total: int
    annual_social: int
    annual_taxes: int


@dataclass(frozen=True)
class NetAmount:
    monthly: int
    annual: int


@dataclass(frozen=True)
class DebugInfo:
    """Intermediate annual quantities of the income tax computation."""

    annual_total_salary: int
    earned_deduction: int
    earned_income: int
    basic_personal_deduction: int
    annual_taxable: int
    annual_income_tax: int
    annual_local_tax: int  # before the tax credit
    tax_credit: int
    final_income_tax: int
    final_local_tax: int


@dataclass(frozen=True)
class SalaryBreakdown:
    """Result of one net pay calculation."""

    currency: str
    gross: GrossAmount
    non_taxable: NonTaxableAmount
    taxable_base: TaxableBase
    deductions: Deductions
    net: NetAmount
    debug: DebugInfo

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-dict form, suitable for JSON."""
        return asdict(self)


def calculate_net_pay(annual_gross: float, policy: PolicyConfig) -> SalaryBreakdown:
    """Compute take-home pay for an annual gross salary.

    Social insurance is levied monthly on the pay left after the
    non-taxable allowance. Income tax is computed on the annual total
    salary (the same post-allowance figure times the number of periods)
    after the earned-income deduction, the basic personal deduction and the
    annual social insurance, then reduced by the earned-income tax credit.
    Local tax is a share of the final income tax, truncated to a whole won.

    Args:
        annual_gross: Annual gross salary in KRW. Must be non-negative;
            not validated here.
        policy: Withholding policy for the tax year.

    Returns:
        SalaryBreakdown with every figure rounded by ``policy.rounding``.
    """
    periods = policy.periods_per_year
    mode = policy.rounding

    monthly_gross_total = annual_gross / periods
    monthly_taxable_base = max(0.0, monthly_gross_total - policy.non_taxable_allowance)

    social = monthly_social_insurance(monthly_taxable_base, policy.social)
    monthly_social_total = social.total
    annual_social_total = monthly_social_total * periods

    annual_total_salary = monthly_taxable_base * periods
    earned_deduction = earned_income_deduction(annual_total_salary)
    earned_income = max(0.0, annual_total_salary - earned_deduction)
    basic_personal_deduction = policy.basic_deduction_per_dependent * policy.dependents
    annual_taxable = max(0.0, earned_income - basic_personal_deduction - annual_social_total)

    income_tax = progressive_tax_by_quick_deduction(annual_taxable, policy.income_tax.brackets)
    local_tax_rate = policy.income_tax.local_tax_rate
    local_tax = math.floor(income_tax * local_tax_rate)

    tax_credit = apply_earned_income_tax_credit(income_tax, annual_total_salary)
    final_income_tax = max(0.0, income_tax - tax_credit)
    final_local_tax = math.floor(final_income_tax * local_tax_rate)

    annual_tax_total = final_income_tax + final_local_tax
    monthly_tax_total = annual_tax_total / periods

    monthly_net = monthly_gross_total - monthly_social_total - monthly_tax_total
    annual_net = monthly_net * periods

    _LOGGER.debug(
        "total salary %.0f, earned deduction %.0f, earned income %.0f",
        annual_total_salary,
        earned_deduction,
        earned_income,
    )
    _LOGGER.debug(
        "taxable %.0f, income tax %.0f, credit %.0f, final income tax %.0f, local tax %d",
        annual_taxable,
        income_tax,
        tax_credit,
        final_income_tax,
        final_local_tax,
    )

    return SalaryBreakdown(
        currency=policy.currency,
        gross=GrossAmount(
            monthly_total=round_amount(monthly_gross_total, mode),
            annual=round_amount(annual_gross, mode),
        ),
        non_taxable=NonTaxableAmount(
            monthly=round_amount(policy.non_taxable_allowance, mode),
            annual=round_amount(policy.non_taxable_allowance * periods, mode),
        ),
        taxable_base=TaxableBase(monthly=round_amount(monthly_taxable_base, mode)),
        deductions=Deductions(
            monthly={
                label: round_amount(amount, mode)
                for label, amount in social.by_label(policy.social).items()
            },
            monthly_social=round_amount(monthly_social_total, mode),
            monthly_taxes=round_amount(monthly_tax_total, mode),
            monthly_total=round_amount(monthly_social_total + monthly_tax_total, mode),
            annual_social=round_amount(annual_social_total, mode),
            annual_taxes=round_amount(annual_tax_total, mode),
        ),
        net=NetAmount(
            monthly=round_amount(monthly_net, mode),
            annual=round_amount(annual_net, mode),
        ),
        debug=DebugInfo(
            annual_total_salary=round_amount(annual_total_salary, mode),
            earned_deduction=round_amount(earned_deduction, mode),
            earned_income=round_amount(earned_income, mode),
            basic_personal_deduction=round_amount(basic_personal_deduction, mode),
            annual_taxable=round_amount(annual_taxable, mode),
            annual_income_tax=round_amount(income_tax, mode),
            annual_local_tax=round_amount(local_tax, mode),
            tax_credit=round_amount(tax_credit, mode),
            final_income_tax=round_amount(final_income_tax, mode),
            final_local_tax=round_amount(final_local_tax, mode),
        ),
    )
