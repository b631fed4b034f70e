"""Loan-to-value financing estimate for vehicle valuations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from assetlens.core.config import settings
from assetlens.core.exceptions import NoComparableDataError, ValidationError

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class LoanTerms:
    """Financing policy: loan-to-value ratio, APR in percent and term in months."""

    ltv_ratio: Decimal
    annual_rate_percent: Decimal
    term_months: int

    @classmethod
    def from_settings(cls) -> "LoanTerms":
        policy = settings.policy
        return cls(
            ltv_ratio=Decimal(str(policy.loan_ltv_ratio)),
            annual_rate_percent=Decimal(str(policy.loan_annual_rate_percent)),
            term_months=policy.loan_term_months,
        )


@dataclass(frozen=True)
class LoanAnalysis:
    loan_amount: Decimal
    monthly_payment: Decimal


def _as_decimal(value: Number) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def compute_loan(
    base_value: Number,
    ltv_ratio: Number,
    annual_rate_percent: Number,
    term_months: int,
) -> LoanAnalysis:
    """Compute the loan amount and the amortized monthly payment.

    Args:
        base_value: Vehicle value the loan is secured against (> 0)
        ltv_ratio: Loan-to-value ratio in (0, 1]
        annual_rate_percent: APR in percent (>= 0)
        term_months: Loan term in months (> 0)

    Returns:
        LoanAnalysis with unrounded ``Decimal`` amounts

    Raises:
        ValidationError: If any input is out of range
    """
    base_value = _as_decimal(base_value)
    ltv_ratio = _as_decimal(ltv_ratio)
    annual_rate_percent = _as_decimal(annual_rate_percent)

    if base_value <= 0:
        raise ValidationError(f"Base value must be positive, got {base_value}")
    if not (0 < ltv_ratio <= 1):
        raise ValidationError(f"LTV ratio must be in (0, 1], got {ltv_ratio}")
    if annual_rate_percent < 0:
        raise ValidationError(f"Annual rate must be non-negative, got {annual_rate_percent}")
    if not isinstance(term_months, int) or term_months <= 0:
        raise ValidationError(f"Term must be a positive number of months, got {term_months}")

    loan_amount = base_value * ltv_ratio
    monthly_rate = annual_rate_percent / 100 / 12

    if monthly_rate == 0:
        return LoanAnalysis(loan_amount=loan_amount, monthly_payment=loan_amount / term_months)

    growth = (1 + monthly_rate) ** term_months
    monthly_payment = loan_amount * monthly_rate * growth / (growth - 1)
    return LoanAnalysis(loan_amount=loan_amount, monthly_payment=monthly_payment)


def select_base_value(
    trade_in_value: Optional[Number],
    private_party_value: Optional[Number],
    retail_value: Optional[Number],
) -> Decimal:
    """First non-zero value in trade-in, private-party, retail order.

    Raises:
        NoComparableDataError: If all three are zero or missing
    """
    for value in (trade_in_value, private_party_value, retail_value):
        if value:
            return _as_decimal(value)
    raise NoComparableDataError("All vehicle price tiers are zero")
