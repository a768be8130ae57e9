# payments/services/payment_service.py
import logging
from dataclasses import dataclass
from typing import Optional

from payments.errors import InvalidPaymentError, PaymentError
from payments.gateways.base import PaymentGateway
from payments.models import Bill, Payment
from payments.observability import get_correlation_id
from payments.resilience import ResilienceState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentOutcome:
    """Result of handling one payment: a bill, or an error message and its HTTP status."""
    status_code: int
    bill: Optional[Bill] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.bill is not None


class PaymentService:
    def __init__(self, gateway: PaymentGateway, gateway_name: str,
                 resilience: Optional[ResilienceState] = None):
        self.gateway = gateway
        self.gateway_name = gateway_name
        self.resilience = resilience if resilience is not None else ResilienceState(gateway_name)

    def handle_pay(self, payment: Payment) -> PaymentOutcome:
        cid = get_correlation_id()
        try:
            bill = self.gateway.pay(payment)
        except Exception as e:
            # the gateway may have generated the id of a payment sent without one
            payment_id = (e.payment_id if isinstance(e, PaymentError) else None) or payment.id
            status_code = 400 if isinstance(e, InvalidPaymentError) else 500
            msg = f"Failed to process payment id '{payment_id}' with amount ${payment.paid_amount}"
            logger.error(msg, extra={"extra": {
                "event": "payment_failed",
                "payment_id": payment_id,
                "amount": payment.paid_amount,
                "gateway": self.gateway_name,
                "status_code": status_code,
                "error": str(e),
            }}, exc_info=True)
            self.resilience.record_failure(payment_id, status_code, e, cid)
            return PaymentOutcome(status_code=status_code, error=msg)

        logger.info("payment_processed", extra={"extra": {
            "event": "payment_processed",
            "payment_id": bill.payment_id,
            "amount": bill.amount,
            "gateway": self.gateway_name,
        }})
        self.resilience.record_success(bill.payment_id, bill.amount, cid)
        return PaymentOutcome(status_code=200, bill=bill)

    # Probes; nothing is evaluated yet.
    def readiness(self) -> str:
        return "ok"

    def liveness(self) -> str:
        return "ok"
