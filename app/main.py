# main.py
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Config, config
from app.routers import webhooks
from app.internal.log import factory_logger

logger = factory_logger('main', file=False)


async def plain_text_http_exception(request: Request, exc: StarletteHTTPException):
    # Shopify solo evalúa el código de estado, el cuerpo se deja en texto plano
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(config: Config) -> FastAPI:
    app = FastAPI(
        title='Webhook de pedidos Shopify',
        description='Recibe pedidos de Shopify y los registra en las tablas orders y order_items de Supabase.',
        version='1.0.0',
    )
    app.state.config = config
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception)

    # Webhook de pedidos, acepta cualquier ruta
    app.include_router(webhooks.router)

    if not config.webhook_secret_shopify:
        logger.warning('SHOPIFY_SECRET no está configurado, las firmas se validan con una clave vacía')
    return app


app = create_app(config)
