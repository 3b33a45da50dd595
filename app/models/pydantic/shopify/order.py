# app.models.pydantic.shopify.order

# Modelos del payload que Shopify envía en el webhook orders/create (REST, snake_case)

from typing import Any
from pydantic import computed_field
from app.models.pydantic.base import Base


class Atributo(Base):
    """Par nombre/valor usado por Shopify en note_attributes y en properties de cada línea."""

    name: str = ''
    value: Any = ''


def buscar_atributo(atributos: list[Atributo], nombre: str) -> Any:
    """Retorna el valor del primer atributo cuyo nombre coincide exactamente, o '' si no existe."""
    for atributo in atributos:
        if atributo.name == nombre:
            return atributo.value
    return ''


class Customer(Base):
    first_name: str = ''
    last_name: str = ''

    @computed_field
    @property
    def nombre_completo(self) -> str:
        # Se concatena y luego se recorta: si falta un nombre no queda espacio sobrante
        return f'{self.first_name} {self.last_name}'.strip()


class ShippingAddress(Base):
    name: str = ''
    phone: str = ''
    country_code: str = ''


class LineItem(Base):
    title: str = ''
    quantity: int = 0
    properties: list[Atributo] = []


class OrderWebhook(Base):
    id: int
    name: str = ''  # Es el número de pedido que se ve en la interfaz de Shopify, ej. #S1001
    created_at: str | None = None  # ISO 8601, se envía tal cual
    customer: Customer = Customer()
    shipping_address: ShippingAddress = ShippingAddress()
    fulfillment_status: str | None = None
    financial_status: str | None = None
    cancelled_at: str | None = None
    note_attributes: list[Atributo] = []
    line_items: list[LineItem] = []

    @computed_field
    @property
    def order_id(self) -> str:
        return str(self.id)
