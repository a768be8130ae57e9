# payments/errors.py
from typing import Optional


class PaymentError(Exception):
    """Base error for anything raised while a gateway processes a payment."""

    def __init__(self, message: str, payment_id: Optional[str] = None):
        super().__init__(message)
        # effective id, including one generated by the gateway
        self.payment_id = payment_id


class InvalidPaymentError(PaymentError):
    """The payment is semantically invalid (negative or non-finite amount)."""


class PaymentProcessingError(PaymentError):
    """Internal fault while processing or storing a payment."""


class GatewayRegistrationError(Exception):
    """Empty or duplicate gateway name registered at startup."""
