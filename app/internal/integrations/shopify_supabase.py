# app.internal.integrations.shopify_supabase

from asyncio import gather

from app.internal.integrations.supabase import SupabaseClient
from app.internal.log import factory_logger
from app.models.pydantic.shopify.order import OrderWebhook, buscar_atributo
from app.models.pydantic.supabase.rows import OrderItemRow, OrderRow


log_pedidos = factory_logger('pedidos', file=True)

# Etiquetas configuradas en el checkout de la tienda
ATRIBUTO_SIM = 'Physical SIM / eSIM'
PROPIEDAD_PLAN = 'Activation Plan'


class Tablas:
    orders = 'orders'
    order_items = 'order_items'


def construir_order_row(order: OrderWebhook) -> OrderRow:
    return OrderRow(
        order_id=order.order_id,
        order_number=order.name,
        created_at=order.created_at,
        customer=order.customer.nombre_completo,
        shipping_name=order.shipping_address.name,
        shipping_phone=order.shipping_address.phone,
        shipping_country=order.shipping_address.country_code,
        fulfillment_status=order.fulfillment_status,
        financial_status=order.financial_status,
        cancelled_at=order.cancelled_at,
    )


def construir_order_item_rows(order: OrderWebhook) -> list[OrderItemRow]:
    # El tipo de SIM es un atributo de la orden, se repite en cada línea
    sim_type = buscar_atributo(order.note_attributes, ATRIBUTO_SIM)
    return [
        OrderItemRow(
            order_id=order.order_id,
            title=item.title,
            sim_type=sim_type,
            sim_number='',
            quantity=item.quantity,
            activation_plan=buscar_atributo(item.properties, PROPIEDAD_PLAN),
        )
        for item in order.line_items
    ]


async def registrar_pedido(order: OrderWebhook, supabase_client: SupabaseClient) -> None:
    """
    Registra el pedido y sus líneas en Supabase.

    Las líneas solo se envían si la orden se insertó correctamente. Las inserciones
    de líneas se lanzan en paralelo y se espera a que terminen todas; si alguna falla
    se propaga el primer error, las que ya se insertaron no se revierten.
    Un reenvío del mismo webhook duplica la orden, no hay llave de idempotencia.
    """
    order_row = construir_order_row(order)
    await supabase_client.insertar(Tablas.orders, order_row.model_dump())

    item_rows = construir_order_item_rows(order)
    resultados = await gather(
        *[supabase_client.insertar(Tablas.order_items, row.model_dump()) for row in item_rows],
        return_exceptions=True,
    )
    errores = [r for r in resultados if isinstance(r, BaseException)]
    if errores:
        log_pedidos.error(
            f'Pedido {order.name} ({order.order_id}): {len(errores)} de {len(item_rows)} líneas no se registraron'
        )
        raise errores[0]

    log_pedidos.info(f'Pedido {order.name} ({order.order_id}) registrado con {len(item_rows)} líneas')
