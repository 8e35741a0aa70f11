"""Payment processor implementations."""

from rentfleet.payments.base import PaymentProcessor
from rentfleet.payments.registry import get_processor

__all__ = [
    "PaymentProcessor",
    "get_processor",
]
