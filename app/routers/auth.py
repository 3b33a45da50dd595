# app/routers/auth.py
from fastapi import Request, HTTPException, status
import hmac
import hashlib
import base64

from app.dependencies import ConfigDep
from app.internal.log import factory_logger

log_auth = factory_logger('auth', file=False)


class AuthException:
    method_not_allowed = HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail='Method Not Allowed',
        headers={'Allow': 'POST'},
    )

    hmac_validation_failed = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail='Invalid HMAC',
    )


def verificar_hmac_shopify(body: bytes, secret: str, received_hmac: str | None) -> bool:
    """
    Valida una firma de webhook de Shopify.
    https://shopify.dev/docs/apps/build/webhooks/subscribe/https#step-2-validate-the-origin-of-your-webhook-to-ensure-its-coming-from-shopify

    El cuerpo debe ser el recibido en la petición sin volver a serializarlo,
    cualquier cambio de bytes invalida la firma.
    """
    if not received_hmac:
        return False

    # 1. Calcular el digest HMAC-SHA256 con el secreto como clave y el cuerpo crudo como mensaje.
    calculated_hmac_digest = hmac.new(secret.encode('utf-8'), msg=body, digestmod=hashlib.sha256).digest()

    # 2. Codificar el digest en Base64, formato del encabezado que envía Shopify.
    calculated_hmac_base64 = base64.b64encode(calculated_hmac_digest).decode('utf-8')

    # 3. Comparación exacta y timing-safe.
    return hmac.compare_digest(calculated_hmac_base64.encode('utf-8'), received_hmac.encode('utf-8'))


async def solo_post(request: Request) -> None:
    if request.method != 'POST':
        log_auth.warning(f'Método no permitido: {request.method} {request.url.path}')
        raise AuthException.method_not_allowed


# Webhooks Shopify
async def hmac_validation_shopify(request: Request, config: ConfigDep) -> bool:
    body = await request.body()
    received_hmac = request.headers.get('x-shopify-hmac-sha256')
    if not verificar_hmac_shopify(body, config.webhook_secret_shopify, received_hmac):
        log_auth.warning(f'HMAC inválido en {request.url.path}')
        raise AuthException.hmac_validation_failed
    return True
