from __future__ import annotations

"""WooCommerce REST API operations exposed as tools."""

from typing import List, Optional

import httpx

from core.config import WooCommerceSettings
from core.schema import ParameterSpec, ToolDefinition

from .http import HttpToolAdapter


UPDATE_CUSTOMER = ToolDefinition(
    name="update_customer",
    description="Update a customer in WooCommerce.",
    properties={
        "id": ParameterSpec(description="The unique identifier for the customer.", required=True),
        "email": ParameterSpec(description="The email address for the customer."),
        "first_name": ParameterSpec(description="Customer first name."),
        "last_name": ParameterSpec(description="Customer last name."),
        "username": ParameterSpec(description="Customer login name."),
        "password": ParameterSpec(description="Customer password."),
        "billing": ParameterSpec(description="List of billing address data."),
        "shipping": ParameterSpec(description="List of shipping address data."),
        "meta_data": ParameterSpec(description="Meta data."),
    },
)

GET_ORDER = ToolDefinition(
    name="get_order",
    description="Retrieve an order by ID from WooCommerce.",
    properties={
        "id": ParameterSpec(description="The unique identifier for the order.", required=True),
    },
)

GET_CUSTOMER = ToolDefinition(
    name="get_customer",
    description="Retrieve a customer by ID from WooCommerce.",
    properties={
        "id": ParameterSpec(description="The unique identifier for the customer.", required=True),
    },
)

UPDATE_ORDER = ToolDefinition(
    name="update_order",
    description="Update an order in WooCommerce.",
    properties={
        "id": ParameterSpec(description="The unique identifier for the order.", required=True),
        "status": ParameterSpec(
            description="Order status, e.g. pending, processing, on-hold, completed, cancelled."
        ),
        "customer_note": ParameterSpec(description="Note left by the customer during checkout."),
        "billing": ParameterSpec(type="object", description="Billing address data."),
        "shipping": ParameterSpec(type="object", description="Shipping address data."),
        "meta_data": ParameterSpec(type="array", description="Meta data entries."),
        "set_paid": ParameterSpec(
            type="boolean",
            description="Mark the order as paid; sets status to processing and reduces stock.",
        ),
    },
)


def update_customer(
    settings: Optional[WooCommerceSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpToolAdapter:
    return HttpToolAdapter(
        UPDATE_CUSTOMER,
        "PUT",
        "/wc/v3/customers/{id}",
        "An error occurred while updating the customer.",
        settings=settings,
        transport=transport,
    )


def get_order(
    settings: Optional[WooCommerceSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpToolAdapter:
    return HttpToolAdapter(
        GET_ORDER,
        "GET",
        "/wc/v3/orders/{id}",
        "An error occurred while retrieving the order.",
        defaults={"context": "view"},
        settings=settings,
        transport=transport,
    )


def get_customer(
    settings: Optional[WooCommerceSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpToolAdapter:
    return HttpToolAdapter(
        GET_CUSTOMER,
        "GET",
        "/wc/v3/customers/{id}",
        "An error occurred while retrieving the customer.",
        defaults={"context": "view"},
        settings=settings,
        transport=transport,
    )


def update_order(
    settings: Optional[WooCommerceSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpToolAdapter:
    return HttpToolAdapter(
        UPDATE_ORDER,
        "PUT",
        "/wc/v3/orders/{id}",
        "An error occurred while updating the order.",
        argument_style="body",
        settings=settings,
        transport=transport,
    )


def build_adapters(
    settings: Optional[WooCommerceSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[HttpToolAdapter]:
    """Create one adapter per WooCommerce operation."""
    factories = (update_customer, get_order, get_customer, update_order)
    return [factory(settings=settings, transport=transport) for factory in factories]


__all__ = [
    "UPDATE_CUSTOMER",
    "GET_ORDER",
    "GET_CUSTOMER",
    "UPDATE_ORDER",
    "update_customer",
    "get_order",
    "get_customer",
    "update_order",
    "build_adapters",
]
