"""krsalary — Korean salary take-home pay calculator."""

__version__ = "0.2.0"

from krsalary.config.defaults import default_policy as default_policy
from krsalary.config.schema import IncomeTaxConfig as IncomeTaxConfig
from krsalary.config.schema import PolicyConfig as PolicyConfig
from krsalary.config.schema import SocialInsuranceConfig as SocialInsuranceConfig
from krsalary.config.schema import TaxBracket as TaxBracket
from krsalary.core.calculator import SalaryBreakdown as SalaryBreakdown
from krsalary.core.calculator import calculate_net_pay as calculate_net_pay
from krsalary.taxes.income_tax import (
    apply_earned_income_tax_credit as apply_earned_income_tax_credit,
)
from krsalary.taxes.income_tax import earned_income_deduction as earned_income_deduction
from krsalary.taxes.income_tax import earned_income_tax_credit as earned_income_tax_credit
from krsalary.taxes.income_tax import (
    earned_income_tax_credit_limit as earned_income_tax_credit_limit,
)
from krsalary.taxes.income_tax import (
    progressive_tax_by_quick_deduction as progressive_tax_by_quick_deduction,
)
