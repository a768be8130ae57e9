# payments/gateways/registry.py
from typing import Dict, List, Optional

from payments.errors import GatewayRegistrationError
from payments.gateways.base import PaymentGateway
from payments.gateways.in_memory import InMemoryPaymentGateway
from payments.store import PaymentRecordStore

IN_MEMORY_GATEWAY = "IN_MEMORY"


class GatewayRegistry:
    """Gateway-type name -> gateway instance. Filled once at startup."""

    def __init__(self):
        self._gateways: Dict[str, PaymentGateway] = {}

    def register(self, name: str, gateway: PaymentGateway) -> None:
        if not isinstance(name, str) or not name.strip():
            raise GatewayRegistrationError("gateway name must be a non-empty string")
        if name in self._gateways:
            raise GatewayRegistrationError(f"gateway '{name}' is already registered")
        self._gateways[name] = gateway

    def lookup(self, name: Optional[str]) -> Optional[PaymentGateway]:
        if name is None:
            return None
        return self._gateways.get(name)

    def names(self) -> List[str]:
        return list(self._gateways)

    def __contains__(self, name: object) -> bool:
        return name in self._gateways

    def __len__(self) -> int:
        return len(self._gateways)


def build_default_registry(store: Optional[PaymentRecordStore] = None) -> GatewayRegistry:
    registry = GatewayRegistry()
    registry.register(IN_MEMORY_GATEWAY, InMemoryPaymentGateway(store))
    return registry
