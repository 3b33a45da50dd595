# app.models.pydantic.supabase.rows

# Filas que se insertan en las tablas orders y order_items de Supabase

from typing import Any
from pydantic import BaseModel


class OrderRow(BaseModel):
    order_id: str
    order_number: str = ''
    created_at: str | None = None
    customer: str = ''
    shipping_name: str = ''
    shipping_phone: str = ''
    shipping_country: str = ''
    fulfillment_status: str | None = None
    financial_status: str | None = None
    cancelled_at: str | None = None


class OrderItemRow(BaseModel):
    order_id: str  # Llave foránea a orders.order_id
    title: str = ''
    sim_type: Any = ''
    sim_number: str = ''  # Se diligencia después del despacho, fuera de este servicio
    quantity: int = 0
    activation_plan: Any = ''
