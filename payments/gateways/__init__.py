"""
Payment gateways

Pluggable backends that process payments, plus the registry and the
startup-time selection of the active one.
"""
from payments.gateways.base import PaymentGateway
from payments.gateways.in_memory import InMemoryPaymentGateway
from payments.gateways.registry import IN_MEMORY_GATEWAY, GatewayRegistry, build_default_registry
from payments.gateways.selector import (
    PAYMENT_GW_TYPE_ENV_VAR,
    resolve_gateway_name,
    select_active_gateway,
    select_gateway,
)

__all__ = [
    "PaymentGateway",
    "InMemoryPaymentGateway",
    "GatewayRegistry",
    "build_default_registry",
    "IN_MEMORY_GATEWAY",
    "PAYMENT_GW_TYPE_ENV_VAR",
    "resolve_gateway_name",
    "select_active_gateway",
    "select_gateway",
]
