"""Payment data model."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PaymentReceipt(BaseModel):
    """What a payment processor reports back for one charge."""

    approved: bool
    amount: Decimal
    method: str = Field(..., description="Free-text payment method, e.g. 'cash'")
    reference: Optional[str] = None
    message: Optional[str] = None
