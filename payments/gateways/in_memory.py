# payments/gateways/in_memory.py
import logging
import math
import uuid
from typing import Optional

from payments.errors import InvalidPaymentError, PaymentProcessingError
from payments.gateways.base import PaymentGateway
from payments.models import Bill, BillStatus, Payment, PaymentRecord
from payments.store import PaymentRecordStore

logger = logging.getLogger(__name__)


class InMemoryPaymentGateway(PaymentGateway):
    """Simulated gateway: every valid payment succeeds and is kept in memory."""

    def __init__(self, store: Optional[PaymentRecordStore] = None):
        self.store = store if store is not None else PaymentRecordStore()

    def pay(self, payment: Payment) -> Bill:
        payment_id = payment.id or uuid.uuid4().hex
        if not payment.id:
            payment = payment.model_copy(update={"id": payment_id})

        # nan < 0 is False, so non-finite amounts need their own check
        if not math.isfinite(payment.paid_amount) or payment.paid_amount < 0:
            raise InvalidPaymentError(
                f"paidAmount must be a finite, non-negative number, got {payment.paid_amount}",
                payment_id=payment_id,
            )

        # paidAmount is the billed total, items are informational
        bill = Bill(payment_id=payment_id, amount=payment.paid_amount, status=BillStatus.SUCCESS)

        try:
            self.store.put(payment_id, PaymentRecord(payment=payment, bill=bill))
        except Exception as e:
            raise PaymentProcessingError(
                f"could not store payment '{payment_id}': {e}", payment_id=payment_id
            ) from e

        logger.info("payment_stored", extra={"extra": {
            "event": "payment_stored",
            "payment_id": payment_id,
            "amount": bill.amount,
            "items": len(payment.items),
        }})
        return bill

    def get_record(self, payment_id: str) -> Optional[PaymentRecord]:
        return self.store.get(payment_id)
