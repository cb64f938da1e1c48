"""Pydantic v2 policy models for krsalary."""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

RoundingMode = Literal["floor", "nearest", "ceiling"]


class NationalPensionConfig(BaseModel):
    """National pension contribution, levied on a clamped monthly base."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = "국민연금"
    rate: float = Field(ge=0, le=1)
    monthly_min_base: float = Field(ge=0, description="Lower limit of the monthly base")
    monthly_max_base: float = Field(ge=0, description="Upper limit of the monthly base")

    @model_validator(mode="after")
    def _validate_bounds(self) -> NationalPensionConfig:
        if self.monthly_min_base > self.monthly_max_base:
            raise ValueError("monthly_min_base must not exceed monthly_max_base")
        return self


class LongTermCareConfig(BaseModel):
    """Long-term-care surcharge, a share of the health premium."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = "장기요양"
    rate_on_health: float = Field(ge=0, le=1)


class HealthInsuranceConfig(BaseModel):
    """Health insurance contribution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = "건강보험"
    rate: float = Field(ge=0, le=1)
    long_term_care: LongTermCareConfig


class EmploymentInsuranceConfig(BaseModel):
    """Employment insurance contribution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = "고용보험"
    rate: float = Field(ge=0, le=1)


class SocialInsuranceConfig(BaseModel):
    """Employee-side social insurance parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    national_pension: NationalPensionConfig
    health_insurance: HealthInsuranceConfig
    employment_insurance: EmploymentInsuranceConfig


class TaxBracket(BaseModel):
    """One bracket of the quick-deduction income tax table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: float | None = Field(
        default=None,
        gt=0,
        description="Inclusive upper bound of the bracket; None means unbounded",
    )
    rate: float = Field(ge=0, le=1, description="Marginal rate within the bracket")
    deduction: float = Field(
        ge=0,
        description="Tax accumulated up to the previous bracket's upper bound",
    )

    @property
    def upper_bound(self) -> float:
        """Upper bound with ``None`` mapped to infinity."""
        return math.inf if self.up_to is None else self.up_to


class IncomeTaxConfig(BaseModel):
    """Progressive income tax table and the local surtax."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: tuple[TaxBracket, ...] = Field(min_length=1)
    local_tax_rate: float = Field(ge=0, le=1, description="Local tax as a share of income tax")

    @model_validator(mode="after")
    def _validate_brackets(self) -> IncomeTaxConfig:
        *bounded, last = self.brackets
        if last.up_to is not None:
            raise ValueError("the last bracket must be unbounded (up_to: null)")
        prev = 0.0
        for i, bracket in enumerate(bounded):
            if bracket.up_to is None:
                raise ValueError(f"bracket {i} is unbounded but is not the last bracket")
            if bracket.up_to <= prev:
                raise ValueError(
                    f"brackets must be sorted ascending by up_to, got {bracket.up_to} after {prev}"
                )
            prev = bracket.up_to
        return self


class PolicyConfig(BaseModel):
    """Withholding policy for one tax year.

    Loaded once at startup and passed explicitly to every calculation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: int = Field(ge=2000)
    currency: str = "KRW"
    currency_suffix: str = "원"
    periods_per_year: Literal[12] = 12
    rounding: RoundingMode = "floor"
    non_taxable_allowance: float = Field(
        ge=0, description="Monthly allowance excluded from tax and insurance"
    )
    dependents: int = Field(default=1, ge=1, description="People claimed, the earner included")
    basic_deduction_per_dependent: float = Field(default=1_500_000, ge=0)
    social: SocialInsuranceConfig
    income_tax: IncomeTaxConfig
