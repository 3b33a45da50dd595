# app.internal.integrations.supabase

import httpx

from app.config import Config
from app.internal.integrations.base import BaseClient, ClientException
from app.internal.log import factory_logger

supabase_log = factory_logger('supabase', file=True)


class SupabaseException(ClientException):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class SupabaseClient(BaseClient):
    class Paths:
        rest: str = '/rest/v1'

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(transport=transport)
        self.host = config.supabase_url
        self.api_key = config.supabase_service_role_key

    @property
    def headers(self) -> dict:
        return {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
            'Prefer': 'return=representation',
        }

    async def insertar(self, tabla: str, payload: dict) -> None:
        """Inserta una fila en la tabla indicada mediante PostgREST.

        La representación devuelta por Supabase se descarta. No hay reintentos:
        cualquier respuesta fuera de 2xx es un error definitivo para la fila.
        """
        url = f'{self.host}{self.Paths.rest}/{tabla}'
        response = await self.request('POST', self.headers, url, payload=payload)
        if not response.is_success:
            supabase_log.error(f'Supabase error ({tabla}): {response.text}')
            raise SupabaseException(
                msg=f'Supabase insert failed: {response.status_code}',
                status_code=response.status_code,
                url=url,
                payload=payload,
                response={'status_code': response.status_code, 'content': response.text},
            )
