"""Earned-income deduction, progressive income tax and earned-income tax credit.

All amounts are annual KRW. The functions are total over their numeric
domain and clamp instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from krsalary.config.schema import TaxBracket

# (upper bound of total salary, deduction accumulated at the lower bound, rate on the excess)
_EARNED_INCOME_DEDUCTION_TIERS: tuple[tuple[float, float, float], ...] = (
    (5_000_000, 0, 0.70),
    (15_000_000, 3_500_000, 0.40),
    (45_000_000, 7_500_000, 0.15),
    (100_000_000, 12_000_000, 0.05),
    (math.inf, 14_750_000, 0.02),
)

# (upper bound of total salary, limit at the lower bound, reduction rate, floor)
_CREDIT_LIMIT_TIERS: tuple[tuple[float, float, float, float], ...] = (
    (33_000_000, 740_000, 0.0, 740_000),
    (70_000_000, 740_000, 0.008, 660_000),
    (120_000_000, 660_000, 0.5, 500_000),
    (math.inf, 500_000, 0.5, 200_000),
)

_CREDIT_THRESHOLD: float = 1_300_000
_CREDIT_RATE_LOW: float = 0.55
_CREDIT_RATE_HIGH: float = 0.30
# 1,300,000 x 55%
_CREDIT_AT_THRESHOLD: float = 715_000


def earned_income_deduction(total_salary: float) -> float:
    """Earned-income deduction for an annual total salary.

    Piecewise linear over five tiers; each tier's base equals the deduction
    at the previous tier's upper bound, so the schedule is continuous.
    """
    lower = 0.0
    for upper, base, rate in _EARNED_INCOME_DEDUCTION_TIERS:
        if total_salary <= upper:
            return base + (total_salary - lower) * rate
        lower = upper
    return 0.0  # unreachable: last tier is unbounded


def progressive_tax_by_quick_deduction(
    annual_tax_base: float,
    brackets: Sequence[TaxBracket],
) -> float:
    """Income tax on a taxable base using the quick-deduction table.

    The first bracket whose upper bound is at or above the base applies
    (bounds are inclusive). Tax is the bracket's accumulated deduction plus
    its rate on the excess over the previous bound, floored at zero.

    Args:
        annual_tax_base: Annual taxable base; may be zero or negative.
        brackets: Brackets sorted ascending by upper bound.

    Returns:
        Non-negative tax amount.
    """
    prev_bound = 0.0
    for bracket in brackets:
        if annual_tax_base <= bracket.upper_bound:
            return max(0.0, (annual_tax_base - prev_bound) * bracket.rate + bracket.deduction)
        prev_bound = bracket.upper_bound
    # Above every bound: a zero-rate, zero-deduction bracket applies.
    return 0.0


def earned_income_tax_credit_limit(total_salary: float) -> float:
    """Ceiling on the earned-income tax credit for an annual total salary.

    Never below the tier's floor, and so never below 200,000.
    """
    lower = 0.0
    for upper, start, reduction, floor in _CREDIT_LIMIT_TIERS:
        if total_salary <= upper:
            return max(floor, start - (total_salary - lower) * reduction)
        lower = upper
    return _CREDIT_LIMIT_TIERS[-1][3]  # unreachable


def earned_income_tax_credit(calculated_tax: float) -> float:
    """Earned-income tax credit before the salary-tiered cap."""
    if calculated_tax <= _CREDIT_THRESHOLD:
        return calculated_tax * _CREDIT_RATE_LOW
    return _CREDIT_AT_THRESHOLD + (calculated_tax - _CREDIT_THRESHOLD) * _CREDIT_RATE_HIGH


def apply_earned_income_tax_credit(calculated_tax: float, total_salary: float) -> float:
    """Credit actually applied: the lesser of the formula credit and its cap."""
    credit = earned_income_tax_credit(calculated_tax)
    limit = earned_income_tax_credit_limit(total_salary)
    return min(credit, limit)
