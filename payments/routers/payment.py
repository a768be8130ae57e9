# payments/routers/payment.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from payments.models import Payment
from payments.services.payment_service import PaymentService

router = APIRouter()

GREETING = "Hello Payments Service - Payments Controller"


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


@router.get("/", response_class=PlainTextResponse)
def home():
    return GREETING


@router.get("/ready", response_class=PlainTextResponse)
def readiness(service: PaymentService = Depends(get_payment_service)):
    """Readiness probe: 200 once the server accepts requests."""
    return service.readiness()


@router.get("/healthy", response_class=PlainTextResponse)
def liveness(service: PaymentService = Depends(get_payment_service)):
    """Liveness probe: 200 while the server is serving requests."""
    return service.liveness()


@router.post("/pay")
def pay(payment: Payment, service: PaymentService = Depends(get_payment_service)):
    """Process the payment with the active gateway and return its bill."""
    outcome = service.handle_pay(payment)
    if not outcome.ok:
        return PlainTextResponse(outcome.error, status_code=outcome.status_code)
    return JSONResponse(outcome.bill.model_dump(mode="json", by_alias=True), status_code=outcome.status_code)


@router.get("/resilience")
def resilience(service: PaymentService = Depends(get_payment_service)):
    """Simple dashboard of payment outcomes (in-memory)."""
    return {
        "gateway": service.gateway_name,
        "snapshot": service.resilience.snapshot(),
    }
