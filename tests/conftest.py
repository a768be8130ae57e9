import pytest
from fastapi.testclient import TestClient

from payments.config import Settings
from payments.gateways import InMemoryPaymentGateway, build_default_registry
from payments.main import create_app
from payments.store import PaymentRecordStore


@pytest.fixture()
def store():
    return PaymentRecordStore()


@pytest.fixture()
def gateway(store):
    return InMemoryPaymentGateway(store)


@pytest.fixture()
def settings():
    return Settings(service_name="payments-test", payment_gw="IN_MEMORY")


@pytest.fixture()
def app(settings, store):
    return create_app(settings, build_default_registry(store))


@pytest.fixture()
def client(app):
    return TestClient(app)
