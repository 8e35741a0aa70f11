"""Offline payment processor that approves every charge."""

import logging
import uuid
from decimal import Decimal

from rentfleet.models import PaymentReceipt
from rentfleet.payments.base import PaymentProcessor

logger = logging.getLogger(__name__)


class StubPaymentProcessor(PaymentProcessor):
    """Approves every charge without contacting any gateway."""

    name = "stub"

    def charge(self, amount: Decimal, method: str) -> PaymentReceipt:
        reference = f"STUB-{uuid.uuid4().hex[:8].upper()}"
        logger.info("Stub charge approved: amount=%s method=%s ref=%s", amount, method, reference)
        return PaymentReceipt(
            approved=True,
            amount=amount,
            method=method,
            reference=reference,
        )
