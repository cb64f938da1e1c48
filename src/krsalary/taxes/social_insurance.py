"""Monthly employee social insurance contributions."""

from __future__ import annotations

from dataclasses import dataclass

from krsalary.config.schema import SocialInsuranceConfig


@dataclass(frozen=True)
class SocialInsuranceContributions:
    """Unrounded monthly contributions for one earner."""

    national_pension: float
    health_insurance: float
    long_term_care: float
    employment_insurance: float

    @property
    def total(self) -> float:
        """Sum of all four contributions."""
        return (
            self.national_pension
            + self.health_insurance
            + self.long_term_care
            + self.employment_insurance
        )

    def by_label(self, social: SocialInsuranceConfig) -> dict[str, float]:
        """Contributions keyed by their display labels, in withholding order."""
        return {
            social.national_pension.label: self.national_pension,
            social.health_insurance.label: self.health_insurance,
            social.health_insurance.long_term_care.label: self.long_term_care,
            social.employment_insurance.label: self.employment_insurance,
        }


def pension_base(monthly_taxable_base: float, social: SocialInsuranceConfig) -> float:
    """Clamp the monthly taxable base into the pension's [min, max] range."""
    pension = social.national_pension
    return min(max(monthly_taxable_base, pension.monthly_min_base), pension.monthly_max_base)


def monthly_social_insurance(
    monthly_taxable_base: float,
    social: SocialInsuranceConfig,
) -> SocialInsuranceContributions:
    """Compute monthly contributions on the taxable base.

    Only the pension base is clamped; health and employment insurance use
    the taxable base as is, and long-term care is a share of the health
    premium.

    Args:
        monthly_taxable_base: Monthly pay after the non-taxable allowance,
            already floored at zero.
        social: Social insurance parameters.

    Returns:
        SocialInsuranceContributions with unrounded amounts.
    """
    health = monthly_taxable_base * social.health_insurance.rate
    return SocialInsuranceContributions(
        national_pension=pension_base(monthly_taxable_base, social) * social.national_pension.rate,
        health_insurance=health,
        long_term_care=health * social.health_insurance.long_term_care.rate_on_health,
        employment_insurance=monthly_taxable_base * social.employment_insurance.rate,
    )
