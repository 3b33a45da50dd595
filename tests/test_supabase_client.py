import json

import httpx
import pytest

from app.config import Config
from app.internal.integrations.supabase import SupabaseClient, SupabaseException


CONFIG = Config(supabase_url='https://example.supabase.co', supabase_service_role_key='service-role-key')


def _client(status_code: int, requests: list[httpx.Request], body: str = '[]') -> SupabaseClient:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, text=body)

    return SupabaseClient(CONFIG, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_insert_request():
    requests: list[httpx.Request] = []
    result = await _client(201, requests).insertar('orders', {'order_id': '1'})

    assert result is None
    (request,) = requests
    assert request.method == 'POST'
    assert str(request.url) == 'https://example.supabase.co/rest/v1/orders'
    assert request.headers['apikey'] == 'service-role-key'
    assert request.headers['Authorization'] == 'Bearer service-role-key'
    assert request.headers['Content-Type'] == 'application/json'
    assert request.headers['Prefer'] == 'return=representation'
    assert json.loads(request.content) == {'order_id': '1'}


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_code():
    requests: list[httpx.Request] = []
    body = '{"code":"23505","message":"duplicate key value violates unique constraint"}'
    with pytest.raises(SupabaseException) as exc_info:
        await _client(409, requests, body).insertar('order_items', {'order_id': '1'})

    assert exc_info.value.status_code == 409
    assert '409' in exc_info.value.msg
    assert exc_info.value.response['content'] == body
    assert len(requests) == 1


@pytest.mark.asyncio
async def test_no_retry_on_server_error():
    requests: list[httpx.Request] = []
    with pytest.raises(SupabaseException):
        await _client(503, requests, 'unavailable').insertar('orders', {'order_id': '1'})
    assert len(requests) == 1


def test_config_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv('SUPABASE_URL', 'https://example.supabase.co/')
    monkeypatch.setenv('SHOPIFY_SECRET', 'secret')
    config = Config.from_env()
    assert config.supabase_url == 'https://example.supabase.co'
    assert config.webhook_secret_shopify == 'secret'
