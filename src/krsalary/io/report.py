"""Plain-text report of a salary breakdown."""

from __future__ import annotations

from krsalary.core.calculator import SalaryBreakdown
from krsalary.core.rounding import format_amount

RULE = "-" * 38


def format_report(breakdown: SalaryBreakdown, suffix: str = "원") -> list[str]:
    """Render the gross, deductions and net pay as report lines."""

    def fmt(amount: float) -> str:
        return format_amount(amount, suffix)

    d = breakdown.deductions
    lines = [
        RULE,
        f"연봉(총액): {fmt(breakdown.gross.annual)}",
        f"월 총액   : {fmt(breakdown.gross.monthly_total)}",
        f"비과세(월): {fmt(breakdown.non_taxable.monthly)}",
        f"과세급여(월): {fmt(breakdown.taxable_base.monthly)}",
        RULE,
        "공제(월):",
    ]
    lines.extend(f"  - {label}: {fmt(amount)}" for label, amount in d.monthly.items())
    lines.extend(
        [
            f"  - (소계) 사회보험 합계: {fmt(d.monthly_social)}",
            f"  - (소계) 소득세/지방세: {fmt(d.monthly_taxes)}",
            f"  - (소계) 공제 합계   : {fmt(d.monthly_total)}",
            RULE,
            f"월 실수령액: {fmt(breakdown.net.monthly)}",
            f"연 실수령액: {fmt(breakdown.net.annual)}",
            RULE,
        ]
    )
    return lines


def format_details(breakdown: SalaryBreakdown, suffix: str = "원") -> list[str]:
    """Render the intermediate annual tax quantities."""
    dbg = breakdown.debug
    rows = [
        ("총급여", dbg.annual_total_salary),
        ("근로소득공제", dbg.earned_deduction),
        ("근로소득금액", dbg.earned_income),
        ("인적공제", dbg.basic_personal_deduction),
        ("과세표준", dbg.annual_taxable),
        ("산출세액", dbg.annual_income_tax),
        ("지방소득세(공제 전)", dbg.annual_local_tax),
        ("근로소득세액공제", dbg.tax_credit),
        ("결정세액", dbg.final_income_tax),
        ("지방소득세", dbg.final_local_tax),
    ]
    lines = ["세금 계산 내역(연):"]
    lines.extend(f"  - {label}: {format_amount(value, suffix)}" for label, value in rows)
    lines.append(RULE)
    return lines
