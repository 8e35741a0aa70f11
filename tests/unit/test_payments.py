"""Tests for payment processors and their registry."""

from decimal import Decimal

import pytest

from rentfleet.payments import PaymentProcessor, get_processor
from rentfleet.payments.stub import StubPaymentProcessor


class TestStubPaymentProcessor:
    def test_always_approves(self):
        receipt = StubPaymentProcessor().charge(Decimal("5000"), "cash")
        assert receipt.approved is True
        assert receipt.amount == Decimal("5000")
        assert receipt.method == "cash"

    def test_reference_assigned(self):
        receipt = StubPaymentProcessor().charge(Decimal("1"), "card")
        assert receipt.reference.startswith("STUB-")

    def test_references_unique(self):
        processor = StubPaymentProcessor()
        a = processor.charge(Decimal("1"), "card")
        b = processor.charge(Decimal("1"), "card")
        assert a.reference != b.reference

    def test_is_payment_processor(self):
        assert isinstance(StubPaymentProcessor(), PaymentProcessor)


class TestRegistry:
    def test_get_stub(self):
        assert get_processor("stub") is StubPaymentProcessor

    def test_get_case_insensitive(self):
        assert get_processor("STUB") is StubPaymentProcessor

    def test_unknown_processor(self):
        with pytest.raises(ValueError, match="No payment processor"):
            get_processor("paypal")

    def test_abstract_cannot_instantiate(self):
        with pytest.raises(TypeError):
            PaymentProcessor()
