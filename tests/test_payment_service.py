import pytest

from payments.errors import PaymentProcessingError
from payments.gateways.base import PaymentGateway
from payments.models import BillStatus, Payment
from payments.services.payment_service import PaymentService


class _FailingGateway(PaymentGateway):
    def __init__(self, error):
        self.error = error

    def pay(self, payment):
        raise self.error


@pytest.fixture()
def service(gateway):
    return PaymentService(gateway, "IN_MEMORY")


class TestHandlePay:
    def test_success_outcome(self, service):
        outcome = service.handle_pay(Payment(id="p1", paid_amount=12.5))
        assert outcome.ok
        assert outcome.status_code == 200
        assert outcome.error is None
        assert outcome.bill.status == BillStatus.SUCCESS

    def test_invalid_payment_is_400(self, service):
        outcome = service.handle_pay(Payment(id="p2", paid_amount=-5))
        assert not outcome.ok
        assert outcome.status_code == 400
        assert outcome.error == "Failed to process payment id 'p2' with amount $-5.0"

    def test_processing_error_is_500(self):
        service = PaymentService(_FailingGateway(PaymentProcessingError("boom")), "FAKE")
        outcome = service.handle_pay(Payment(id="p3", paid_amount=1))
        assert outcome.status_code == 500
        assert "'p3'" in outcome.error

    def test_unexpected_error_is_500(self):
        service = PaymentService(_FailingGateway(ValueError("bad")), "FAKE")
        outcome = service.handle_pay(Payment(id="p4", paid_amount=7.25))
        assert outcome.status_code == 500
        assert outcome.error == "Failed to process payment id 'p4' with amount $7.25"

    def test_outcomes_are_counted(self, service):
        service.handle_pay(Payment(id="ok", paid_amount=1.5))
        service.handle_pay(Payment(id="bad", paid_amount=-1))
        snapshot = service.resilience.snapshot()
        assert snapshot["gateway"] == "IN_MEMORY"
        assert snapshot["pay_success"] == 1
        assert snapshot["pay_fail"] == 1
        assert snapshot["fail_by_status"] == {"400": 1}
        assert snapshot["amount_billed"] == 1.5
        assert snapshot["consecutive_failures"] == 1
        assert snapshot["last_error"]["payment_id"] == "bad"
        assert snapshot["last_error"]["status_code"] == 400
        assert [e["type"] for e in snapshot["recent"]] == ["pay_success", "pay_rejected"]

    def test_gateway_faults_are_counted_apart_from_rejections(self):
        service = PaymentService(_FailingGateway(PaymentProcessingError("boom")), "FAKE")
        service.handle_pay(Payment(id="f1", paid_amount=1))
        snapshot = service.resilience.snapshot()
        assert snapshot["fail_by_status"] == {"500": 1}
        assert snapshot["recent"][0]["type"] == "pay_failure"
        assert snapshot["recent"][0]["gateway"] == "FAKE"

    def test_generated_id_is_reported_on_failure(self):
        error = PaymentProcessingError("could not store payment 'gen-1'", payment_id="gen-1")
        service = PaymentService(_FailingGateway(error), "FAKE")
        outcome = service.handle_pay(Payment(paid_amount=3))
        assert outcome.status_code == 500
        assert outcome.error == "Failed to process payment id 'gen-1' with amount $3.0"
        assert service.resilience.snapshot()["last_error"]["payment_id"] == "gen-1"

    def test_non_finite_amount_is_400(self, service, store):
        outcome = service.handle_pay(Payment(id="n1", paid_amount=float("nan")))
        assert outcome.status_code == 400
        assert "'n1'" in outcome.error
        assert len(store) == 0


class TestProbes:
    def test_probes_always_ok(self):
        service = PaymentService(_FailingGateway(RuntimeError("down")), "FAKE")
        assert service.readiness() == "ok"
        assert service.liveness() == "ok"
