# payments/gateways/selector.py
import logging
from typing import Optional, Tuple

from payments.gateways.base import PaymentGateway
from payments.gateways.registry import IN_MEMORY_GATEWAY, GatewayRegistry

logger = logging.getLogger(__name__)

PAYMENT_GW_TYPE_ENV_VAR = "PAYMENT_GW"


def resolve_gateway_name(
    configured_name: Optional[str],
    registry: GatewayRegistry,
    default_name: str = IN_MEMORY_GATEWAY,
) -> str:
    """
    Turn the configured gateway type into a registered name.

    A blank or unknown value is not an error: it is logged and the default
    name is returned instead.
    """
    name = (configured_name or "").strip()
    if not name:
        logger.warning(
            f"'{PAYMENT_GW_TYPE_ENV_VAR}' environment variable is not set; thus defaulting to: {default_name}",
            extra={"extra": {"event": "payment_gw_default", "gateway": default_name}},
        )
        return default_name

    if name not in registry:
        logger.warning(
            f"'{PAYMENT_GW_TYPE_ENV_VAR}' value '{name}' is not a known gateway type; thus defaulting to: {default_name}",
            extra={"extra": {
                "event": "payment_gw_unknown",
                "configured": name,
                "available": registry.names(),
                "gateway": default_name,
            }},
        )
        return default_name
    return name


def select_active_gateway(
    configured_name: Optional[str],
    registry: GatewayRegistry,
    default_name: str = IN_MEMORY_GATEWAY,
) -> Tuple[str, PaymentGateway]:
    """Pick the active gateway and the name it is registered under. The default name must be registered."""
    name = resolve_gateway_name(configured_name, registry, default_name)
    gateway = registry.lookup(name)
    if gateway is None:
        # only reachable when the registry was built without its default entry
        raise KeyError(default_name)

    logger.info(f"Active connector type is: {name}", extra={"extra": {
        "event": "payment_gw_selected", "gateway": name,
    }})
    return name, gateway


def select_gateway(
    configured_name: Optional[str],
    registry: GatewayRegistry,
    default_name: str = IN_MEMORY_GATEWAY,
) -> PaymentGateway:
    return select_active_gateway(configured_name, registry, default_name)[1]
