import json
import httpx


class ClientException(Exception):
    def __init__(
        self,
        *,
        payload: dict | None = None,
        url: str | None = None,
        response: dict | None = None,
        msg: str | None = None,
        status_code: int | None = None,
    ):
        self.url = url
        self.payload = payload
        self.response = response
        self.msg = msg
        self.status_code = status_code
        super().__init__(msg)

    def __str__(self):
        _str = f'\nmsg: {self.msg}' if self.msg else ''
        _str += f'\nstatus_code: {self.status_code}' if self.status_code else ''
        _str += f'\nurl: {self.url}' if self.url else ''
        _str += f'\npayload: {json.dumps(self.payload)}' if self.payload else ''
        _str += f'\nresponse: {self.response}' if self.response else ''
        return _str

    def __repr__(self):
        return self.__str__()


class BaseClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        # transport permite sustituir la red en pruebas (httpx.MockTransport)
        self._transport = transport

    async def request(
        self,
        method: str,
        headers: dict,
        url: str,
        payload: dict | None = None,
        timeout: int = 30,
    ) -> httpx.Response:
        timeout_config = httpx.Timeout(float(timeout))
        async with httpx.AsyncClient(timeout=timeout_config, transport=self._transport) as client:
            return await client.request(method, url, headers=headers, json=payload)
