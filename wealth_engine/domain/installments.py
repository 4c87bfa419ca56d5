"""Installment amortization for recurring obligations"""

from datetime import date
from typing import Iterable

from wealth_engine.domain.models import Obligation
from wealth_engine.utils.date_utils import months_between


def pending_total(obligation: Obligation) -> float:
    """
    Amount still owed on an obligation.

    Counts the current installment as unpaid:
        remaining = installments - current_installment + 1

    Example:
        1200 over 12, currently on installment 4 → 9 × 100 = 900
    """
    if obligation.paid:
        return 0.0

    remaining = obligation.installments - obligation.current_installment + 1
    return obligation.monthly_amount * max(0, remaining)


def monthly_charge_at(obligation: Obligation, target_date: date) -> float:
    """
    Installment charged in the month of target_date.

    The month offset from the start date ignores the day of month, so a
    purchase on the 31st is charged in full in its own month.
    """
    if obligation.paid:
        return 0.0

    # Deferred payment not due yet
    if obligation.payment_date is not None and target_date < obligation.payment_date:
        return 0.0

    offset = months_between(obligation.start_date, target_date)
    if 0 <= offset < obligation.installments:
        return obligation.monthly_amount
    return 0.0


def remaining_installments(obligation: Obligation, target_date: date) -> int:
    """Installments left to charge as of target_date"""
    if obligation.paid:
        return 0

    offset = months_between(obligation.start_date, target_date)
    if offset < 0:
        return obligation.installments
    if offset >= obligation.installments:
        return 0
    return obligation.installments - offset


def monthly_expenses(obligations: Iterable[Obligation], target_date: date) -> float:
    return sum((monthly_charge_at(o, target_date) for o in obligations), 0.0)


def total_pending(obligations: Iterable[Obligation]) -> float:
    return sum((pending_total(o) for o in obligations), 0.0)


def monthly_commitment(obligations: Iterable[Obligation]) -> float:
    """Sum of monthly amounts across unpaid obligations"""
    return sum((o.monthly_amount for o in obligations if not o.paid), 0.0)
