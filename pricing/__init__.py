"""
Pricing module
Tuition and payment outcome computation
"""

from .engine import (
    PaymentMethod,
    PaymentOutcome,
    compute_tuition,
    resolve_payment,
    total_units,
)

__all__ = ['PaymentMethod', 'PaymentOutcome', 'compute_tuition',
           'resolve_payment', 'total_units']
