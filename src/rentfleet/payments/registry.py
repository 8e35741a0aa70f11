"""Processor registry for discovering and instantiating payment processors."""

from typing import Type

from rentfleet.payments.base import PaymentProcessor


def _get_processors() -> dict[str, Type[PaymentProcessor]]:
    """Get all available processors.

    Lazy import to avoid circular dependencies.
    """
    from rentfleet.payments.stub import StubPaymentProcessor

    return {
        "stub": StubPaymentProcessor,
    }


def get_processor(name: str) -> Type[PaymentProcessor]:
    """Get processor class by registry key.

    Args:
        name: Processor key (e.g., "stub")

    Returns:
        Processor class

    Raises:
        ValueError: If no processor is registered under the name
    """
    processors = _get_processors()
    key = name.strip().lower()

    if key not in processors:
        available = ", ".join(sorted(processors.keys()))
        raise ValueError(
            f"No payment processor named '{name}'. "
            f"Available: {available}"
        )

    return processors[key]
