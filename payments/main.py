# payments/main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI

from payments import __version__
from payments.config import Settings
from payments.gateways import GatewayRegistry, build_default_registry, select_active_gateway
from payments.observability import init_logging, CorrelationIdMiddleware, RequestLoggingMiddleware, PathCORSMiddleware
from payments.routers.payment import router as payment_router
from payments.services.payment_service import PaymentService


def create_app(settings: Optional[Settings] = None, registry: Optional[GatewayRegistry] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    logger = init_logging(settings.service_name, settings.log_level)

    # gateway is chosen once here; changing PAYMENT_GW needs a restart
    if registry is None:
        registry = build_default_registry()
    gateway_name, gateway = select_active_gateway(settings.payment_gw, registry)

    app = FastAPI(title="Payments Service", version=__version__)
    app.state.settings = settings
    app.state.payment_service = PaymentService(gateway, gateway_name)

    app.add_middleware(CorrelationIdMiddleware, header_name="x-correlation-id")
    app.add_middleware(RequestLoggingMiddleware, logger=logger)
    app.add_middleware(
        PathCORSMiddleware,
        prefix=settings.cors_path_prefix,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(payment_router)
    app.include_router(payment_router, prefix="/api", include_in_schema=False)

    logger.info("payments_service_ready", extra={"extra": {
        "event": "payments_service_ready", "gateway": gateway_name,
    }})
    return app


app = create_app()


if __name__ == "__main__":
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
