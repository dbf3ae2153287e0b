"""
Pricing Engine Module
Tuition computation and payment outcome resolution
Deterministic: the same inputs always give the same outcome
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

import config


ZERO = Decimal('0')
WHOLE = Decimal('1')


class PaymentMethod(Enum):
    CASH = "Cash (full)"
    INSTALLMENT = "Installment"


@dataclass(frozen=True)
class PaymentOutcome:
    method: PaymentMethod
    surcharge: Decimal
    total_due: Decimal
    amount_paid: Decimal
    balance: Decimal
    installment_months: int
    monthly_due: Decimal
    is_enrolled: bool


def total_units(subjects: Iterable) -> int:
    """Sum of units over a subject list"""
    return sum(subject.units for subject in subjects)


def compute_tuition(units: int, unit_rate: Decimal = config.UNIT_RATE) -> Decimal:
    """
    Tuition for a unit load

    Args:
        units: Total academic units
        unit_rate: Price per unit

    Returns:
        units x rate, rounded half-up to a whole currency unit
    """
    return (Decimal(units) * unit_rate).quantize(WHOLE, rounding=ROUND_HALF_UP)


def minimum_down_payment(total_due: Decimal) -> Decimal:
    return total_due * config.MIN_DOWN_PERCENT


def cash_outcome(tuition: Decimal, amount_paid: Decimal) -> PaymentOutcome:
    """Full payment: enrolled only when the tuition is covered"""
    total_due = Decimal(tuition)
    amount_paid = Decimal(amount_paid)

    return PaymentOutcome(
        method=PaymentMethod.CASH,
        surcharge=ZERO,
        total_due=total_due,
        amount_paid=amount_paid,
        balance=max(ZERO, total_due - amount_paid),
        installment_months=0,
        monthly_due=ZERO,
        is_enrolled=amount_paid >= total_due,
    )


def installment_outcome(tuition: Decimal, amount_paid: Decimal, months: int) -> PaymentOutcome:
    """
    Installment plan outcome

    The flat fee is added to the tuition. A down payment below the minimum
    leaves the student unenrolled with no schedule; full coverage enrolls;
    anything in between spreads the balance over the chosen months.

    Raises:
        ValueError: months outside the allowed installment range
    """
    if not config.MIN_INSTALL_MONTHS <= months <= config.MAX_INSTALL_MONTHS:
        raise ValueError(
            f"Installments must be between {config.MIN_INSTALL_MONTHS} "
            f"and {config.MAX_INSTALL_MONTHS} months"
        )

    surcharge = config.INSTALLMENT_FEE
    total_due = Decimal(tuition) + surcharge
    amount_paid = Decimal(amount_paid)
    balance = max(ZERO, total_due - amount_paid)
    monthly_due = ZERO

    if amount_paid < minimum_down_payment(total_due):
        is_enrolled = False
    elif amount_paid >= total_due:
        is_enrolled = True
        balance = ZERO
    else:
        is_enrolled = False
        monthly_due = balance / months

    return PaymentOutcome(
        method=PaymentMethod.INSTALLMENT,
        surcharge=surcharge,
        total_due=total_due,
        amount_paid=amount_paid,
        balance=balance,
        installment_months=months,
        monthly_due=monthly_due,
        is_enrolled=is_enrolled,
    )


def resolve_payment(method: PaymentMethod, tuition: Decimal, amount_paid: Decimal,
                    months: int = 0) -> PaymentOutcome:
    """Dispatch to the outcome rule for the chosen payment method"""
    if method == PaymentMethod.INSTALLMENT:
        return installment_outcome(tuition, amount_paid, months)
    return cash_outcome(tuition, amount_paid)


def gwa_average(grades: Sequence) -> float:
    """Arithmetic mean of GWA entries (informational only)"""
    if len(grades) == 0:
        return 0.0
    return float(np.mean(np.asarray(grades, dtype=float)))
