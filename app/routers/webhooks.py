# app/routers/webhooks.py
import json
import httpx
from enum import Enum
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from app.dependencies import SupabaseClientDep
from app.internal.integrations.base import ClientException
from app.internal.integrations.shopify_supabase import registrar_pedido
from app.internal.log import factory_logger
from app.models.pydantic.shopify.order import OrderWebhook

# Seguridad
from app.routers.auth import hmac_validation_shopify, solo_post

log_webhooks = factory_logger('webhooks', file=True)


class Tags(Enum):
    SHOPIFY = 'Shopify'


router = APIRouter(tags=[Tags.SHOPIFY])

METODOS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


# Shopify puede apuntar el webhook a cualquier ruta, se aceptan todas y todos los métodos
# para responder 405 en lugar de 404 cuando el método no es POST.
@router.api_route(
    '/{ruta:path}',
    methods=METODOS,
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    summary='Recibe pedidos de Shopify y los registra en Supabase',
    dependencies=[Depends(solo_post), Depends(hmac_validation_shopify)],
)
async def recibir_pedido_shopify(request: Request, supabase_client: SupabaseClientDep):
    raw_body = await request.body()
    try:
        order = OrderWebhook(**json.loads(raw_body))
    except (ValueError, TypeError) as e:
        log_webhooks.error(f'Payload de pedido inválido: {e}')
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail='Invalid payload')

    try:
        await registrar_pedido(order, supabase_client)
    except ClientException as e:
        log_webhooks.error(f'Error al registrar pedido {order.name} ({order.order_id}): {e}')
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.msg)
    except httpx.HTTPError as e:
        log_webhooks.error(f'Sin respuesta de Supabase para el pedido {order.name} ({order.order_id}): {e!r}')
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail='Supabase unreachable')

    return 'OK'
