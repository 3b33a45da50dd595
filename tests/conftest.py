import base64
import hashlib
import hmac
import json

import pytest
from fastapi.testclient import TestClient

from app.config import Config
from app.dependencies import get_supabase_client
from app.internal.integrations.supabase import SupabaseException
from app.main import create_app

SECRET = 'shopify-test-secret'


class FakeSupabaseClient:
    """Registra las inserciones en memoria. fallar_en indica (tabla, n-ésima inserción en esa tabla) que responde 500."""

    def __init__(self, fallar_en: set[tuple[str, int]] | None = None) -> None:
        self.inserts: list[tuple[str, dict]] = []
        self._fallar_en = fallar_en or set()

    def filas(self, tabla: str) -> list[dict]:
        return [payload for t, payload in self.inserts if t == tabla]

    async def insertar(self, tabla: str, payload: dict) -> None:
        self.inserts.append((tabla, payload))
        if (tabla, len(self.filas(tabla))) in self._fallar_en:
            raise SupabaseException(msg='Supabase insert failed: 500', status_code=500)


def firmar(body: bytes, secret: str = SECRET) -> str:
    digest = hmac.new(secret.encode(), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


@pytest.fixture
def config() -> Config:
    return Config(
        environment='test',
        supabase_url='https://example.supabase.co',
        supabase_service_role_key='service-role-key',
        webhook_secret_shopify=SECRET,
    )


@pytest.fixture
def supabase() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def app(config, supabase):
    app = create_app(config)
    app.dependency_overrides[get_supabase_client] = lambda: supabase
    return app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def order_payload() -> dict:
    return {
        'id': 5678901234,
        'name': '#S1001',
        'created_at': '2025-03-01T10:15:00-05:00',
        'customer': {'first_name': 'Ana', 'last_name': 'Lee'},
        'shipping_address': {'name': 'Ana Lee', 'phone': '+57 300 000 0000', 'country_code': 'CO'},
        'fulfillment_status': None,
        'financial_status': 'paid',
        'cancelled_at': None,
        'note_attributes': [
            {'name': 'gift', 'value': 'no'},
            {'name': 'Physical SIM / eSIM', 'value': 'eSIM'},
        ],
        'line_items': [
            {
                'title': 'Europe 10GB',
                'quantity': 1,
                'properties': [{'name': 'Activation Plan', 'value': '30 days'}],
            },
            {'title': 'Asia 5GB', 'quantity': 2, 'properties': []},
        ],
    }


@pytest.fixture
def post_order(client):
    def _post(payload, secret: str = SECRET, path: str = '/webhooks/shopify/orders'):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        return client.post(path, content=body, headers={'X-Shopify-Hmac-Sha256': firmar(body, secret)})

    return _post


@pytest.fixture
def override_supabase(app):
    """Reemplaza el cliente por uno que falla en las inserciones indicadas, ej. ('orders', 1)."""

    def _override(*fallar_en: tuple[str, int]) -> FakeSupabaseClient:
        fake = FakeSupabaseClient(set(fallar_en))
        app.dependency_overrides[get_supabase_client] = lambda: fake
        return fake

    return _override
