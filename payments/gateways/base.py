# payments/gateways/base.py
from abc import ABC, abstractmethod

from payments.models import Bill, Payment


class PaymentGateway(ABC):
    """
    Backend that turns a Payment into a Bill.

    Several gateways can be registered at the same time, but only one of them
    is active while the service runs. Changing it requires a restart.
    """

    @abstractmethod
    def pay(self, payment: Payment) -> Bill:
        """
        Process the payment and return its bill.

        Raises InvalidPaymentError for payments that cannot be processed and
        PaymentProcessingError for any internal fault.
        """
        raise NotImplementedError
