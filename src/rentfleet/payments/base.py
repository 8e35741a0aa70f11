"""Abstract base payment processor."""

from abc import ABC, abstractmethod
from decimal import Decimal

from rentfleet.models import PaymentReceipt


class PaymentProcessor(ABC):
    """Abstract base class for payment processors.

    The rental manager only needs one capability from a processor: charge an
    amount through a named payment method and say whether it went through.
    A decline is reported in the receipt, not raised.
    """

    # Override in subclasses
    name: str

    @abstractmethod
    def charge(self, amount: Decimal, method: str) -> PaymentReceipt:
        """Charge ``amount`` using ``method``.

        Args:
            amount: Total to charge, full precision
            method: Free-text payment method entered by the renter

        Returns:
            PaymentReceipt with ``approved`` set
        """
        ...
