from __future__ import annotations
import logging
import math
from typing import Dict, Mapping, Optional, Sequence, Tuple

from core.models import (
    ComparableListing,
    MortgageParameters,
    MortgageResult,
    PropertyMetrics,
    PropertyRecord,
    RepairCategory,
    RepairROIResult,
)
from core.presets import LOAN_TERMS
from core.validation import validate_number

logger = logging.getLogger(__name__)

MAX_LOAN_AMOUNT = 10_000_000
MAX_INTEREST_RATE = 30
MAX_PURCHASE_PRICE = 50_000_000
MAX_REPAIR_BUDGET = 1_000_000
MAX_TIME_REDUCTION_DAYS = 45


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form fields arrive as ``None``, empty strings or ``NaN`` when the agent
    leaves them blank.  This helper mirrors the spreadsheet ``NZ()`` function
    so the escrow and value math treats a blank as zero.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def finite_or_zero(x: float) -> float:
    return x if math.isfinite(x) else 0.0


def round_half_up(x: float) -> int:
    """Round to the nearest whole currency unit, halves going up."""
    return int(math.floor(x + 0.5))


def calculate_mortgage_payment(params: MortgageParameters) -> MortgageResult:
    """Calculate the fixed-rate monthly payment and escrow-inclusive total.

    ``interest_rate`` is the nominal yearly rate in percent (``7.25`` for
    7.25%) and ``loan_term`` the amortization period in years.  Out of range
    inputs never raise; they come back as a zero result with ``error`` set.
    """

    if not validate_number(params.loan_amount, 0, MAX_LOAN_AMOUNT):
        return MortgageResult(error="Invalid loan amount")
    if not validate_number(params.interest_rate, 0, MAX_INTEREST_RATE):
        return MortgageResult(error="Invalid interest rate")
    if not validate_number(params.loan_term, 1, 50):
        return MortgageResult(error="Invalid loan term")

    try:
        P = float(params.loan_amount)
        r = params.interest_rate / 100 / 12
        n = params.loan_term * 12
        if params.interest_rate == 0:
            payment = P / n
        else:
            growth = (1 + r) ** n
            denominator = growth - 1
            if denominator == 0:
                return MortgageResult(error="Invalid calculation parameters")
            payment = P * (r * growth) / denominator
        total = (
            payment
            + nz(params.property_tax)
            + nz(params.home_insurance)
            + nz(params.hoa)
            + nz(params.pmi)
        )
        total_interest = payment * n - P
    except ArithmeticError as exc:
        logger.exception("Mortgage calculation failed")
        return MortgageResult(error=str(exc))

    return MortgageResult(
        monthly_principal_and_interest=finite_or_zero(payment),
        total_monthly_payment=finite_or_zero(total),
        total_interest=finite_or_zero(total_interest),
    )


def valid_comparables(comparables: Sequence[ComparableListing]) -> list[ComparableListing]:
    """Comparables usable for pricing: not the subject, sane $/sqft and size."""
    return [
        c
        for c in comparables
        if c is not None
        and c.status != "Subject"
        and validate_number(c.price_per_sqft, 1, 10_000)
        and validate_number(c.sqft, 100, 50_000)
    ]


def calculate_property_metrics(
    subject: PropertyRecord,
    comparables: Sequence[ComparableListing],
    loan_amount: Optional[float],
) -> PropertyMetrics:
    """Estimate the subject's value from the average comparable $/sqft.

    When nothing usable remains after filtering, the subject's list price is
    returned as the estimate together with an explanatory ``error``.
    """

    fallback = round_half_up(nz(subject.list_price))
    if not comparables:
        return PropertyMetrics(estimated_value=fallback, error="No comparable data available")
    active = valid_comparables(comparables)
    if not active:
        return PropertyMetrics(estimated_value=fallback, error="No valid comparable data")

    avg_ppsf = sum(c.price_per_sqft for c in active) / len(active)
    estimated = nz(subject.sqft) * avg_ppsf
    equity = estimated - nz(loan_amount)
    appreciation = 0.0
    purchase = nz(subject.purchase_price)
    if purchase > 0:
        appreciation = (estimated - purchase) / purchase * 100

    return PropertyMetrics(
        avg_price_per_sqft=round_half_up(avg_ppsf),
        estimated_value=round_half_up(estimated),
        equity=round_half_up(equity),
        appreciation_percent=round(appreciation, 1),
    )


def calculate_repair_roi(
    budgets: Mapping[str, float],
    categories: Mapping[str, RepairCategory],
    current_value: Optional[float],
) -> RepairROIResult:
    """Aggregate value added and days-on-market reduction over repair budgets.

    A funded category contributes its full fixed day reduction regardless of
    how much of its maximum is spent.  The total reduction is capped at 45
    days.
    """

    if not isinstance(budgets, Mapping):
        return RepairROIResult(
            new_estimated_value=round_half_up(nz(current_value)),
            error="Invalid repair budget data",
        )

    entries = [
        (key, float(budget))
        for key, budget in budgets.items()
        if key in categories and validate_number(budget, 0, MAX_REPAIR_BUDGET)
    ]
    total_investment = sum(b for _, b in entries)

    value_added = 0.0
    time_reduction = 0
    for key, budget in entries:
        if budget > 0:
            category = categories[key]
            value_added += budget * category.roi
            time_reduction += category.time_reduction

    net = value_added - total_investment
    roi_pct = net / total_investment * 100 if total_investment > 0 else 0.0

    return RepairROIResult(
        total_investment=total_investment,
        value_added=round_half_up(value_added),
        net_roi=round_half_up(net),
        roi_percent=f"{roi_pct:.1f}",
        time_reduction_days=min(round_half_up(time_reduction), MAX_TIME_REDUCTION_DAYS),
        new_estimated_value=round_half_up(nz(current_value) + value_added),
    )


def reset_budgets(categories: Mapping[str, RepairCategory]) -> Dict[str, float]:
    return {key: 0 for key in categories}


def recommended_budgets(categories: Mapping[str, RepairCategory]) -> Dict[str, float]:
    """Half of each category's maximum."""
    return {key: round_half_up(c.max_budget * 0.5) for key, c in categories.items()}


def high_roi_budgets(categories: Mapping[str, RepairCategory]) -> Dict[str, float]:
    """Fund only categories returning more than $1.50 per dollar, at 70% of max."""
    return {
        key: round_half_up(c.max_budget * 0.7) if c.roi > 1.5 else 0
        for key, c in categories.items()
    }


def update_repair_budget(
    budgets: Mapping[str, float],
    categories: Mapping[str, RepairCategory],
    key: str,
    value,
) -> Tuple[Dict[str, float], Optional[str]]:
    """Apply a single budget edit.

    Returns the new budget map and a message for the user.  Negative values
    are rejected and leave the map untouched; values more than 20% over the
    category maximum are applied with a warning.
    """

    try:
        amount = int(float(value))
    except (TypeError, ValueError, OverflowError):
        amount = 0
    if amount < 0:
        return dict(budgets), "Budget cannot be negative"
    message = None
    category = categories.get(key)
    max_budget = category.max_budget if category else 0
    if amount > max_budget * 1.2:
        message = (
            f"Budget for {key} seems unusually high. "
            f"Maximum recommended: ${max_budget:,.0f}"
        )
    updated = dict(budgets)
    updated[key] = amount
    return updated, message


def update_mortgage_field(
    params: MortgageParameters, field: str, value
) -> Tuple[MortgageParameters, Optional[str]]:
    """Validate and apply one mortgage form edit.

    Purchase price and down payment edits re-derive the loan amount.  A
    rejected edit returns the unchanged parameters and an error message.
    """

    num = nz(value)
    if field == "purchase_price" and not 0 <= num <= MAX_PURCHASE_PRICE:
        return params, "Purchase price must be between $0 and $50,000,000"
    if field == "down_payment" and not 0 <= num <= params.purchase_price:
        return params, "Down payment cannot exceed purchase price"
    if field == "interest_rate" and not 0 <= num <= MAX_INTEREST_RATE:
        return params, "Interest rate must be between 0% and 30%"
    if field == "loan_term" and num not in LOAN_TERMS:
        return params, "Loan term must be 15, 20, 25, 30, or 40 years"

    updated = params.model_copy(update={field: num})
    if field in ("purchase_price", "down_payment"):
        updated.loan_amount = max(0.0, updated.purchase_price - updated.down_payment)
    return updated, None
