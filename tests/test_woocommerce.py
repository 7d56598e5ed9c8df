import pytest

from tools.woocommerce import (
    GET_CUSTOMER,
    GET_ORDER,
    UPDATE_CUSTOMER,
    UPDATE_ORDER,
    build_adapters,
    get_customer,
    get_order,
    update_customer,
    update_order,
)


@pytest.mark.parametrize("definition", [UPDATE_CUSTOMER, GET_ORDER, GET_CUSTOMER, UPDATE_ORDER])
def test_definitions_require_only_id(definition):
    assert definition.parameters["required"] == ["id"]
    assert definition.parameters["type"] == "object"


def test_update_customer_function_schema():
    schema = UPDATE_CUSTOMER.to_function_schema()
    assert schema["type"] == "function"
    function = schema["function"]
    assert function["name"] == "update_customer"
    assert function["description"] == "Update a customer in WooCommerce."
    assert list(function["parameters"]["properties"]) == [
        "id",
        "email",
        "first_name",
        "last_name",
        "username",
        "password",
        "billing",
        "shipping",
        "meta_data",
    ]
    assert all(p["type"] == "string" for p in function["parameters"]["properties"].values())


def test_get_order_input_schema():
    schema = GET_ORDER.to_input_schema()
    assert schema["name"] == "get_order"
    assert schema["input_schema"]["properties"]["id"] == {
        "type": "string",
        "description": "The unique identifier for the order.",
    }


def test_build_adapters_has_unique_names():
    names = [adapter.name for adapter in build_adapters()]
    assert sorted(names) == ["get_customer", "get_order", "update_customer", "update_order"]


@pytest.mark.anyio
async def test_update_customer_success_scenario(settings, make_transport):
    transport = make_transport(200, {"id": 42, "email": "a@b.com"})
    adapter = update_customer(settings=settings, transport=transport)

    result = await adapter.call(id="42", email="a@b.com", first_name="Ada", last_name="Lovelace")

    assert result == {"id": 42, "email": "a@b.com"}
    request = transport.last
    assert request.method == "PUT"
    assert request.url.path == "/wp-json/wc/v3/customers/42"
    assert request.url.params["email"] == "a@b.com"
    assert request.url.params["first_name"] == "Ada"
    assert "username" not in request.url.params


@pytest.mark.anyio
async def test_update_customer_not_found_scenario(settings, make_transport):
    transport = make_transport(404, {"code": "woocommerce_rest_invalid_id", "message": "Invalid ID."})
    adapter = update_customer(settings=settings, transport=transport)

    result = await adapter.call(id="42", email="a@b.com")

    assert result == {"error": "An error occurred while updating the customer."}


@pytest.mark.anyio
async def test_update_customer_password_not_logged(settings, make_transport, caplog):
    adapter = update_customer(settings=settings, transport=make_transport(400, {"message": "bad"}))

    with caplog.at_level("DEBUG", logger="tools.http"):
        await adapter.call(id="42", password="hunter2")

    assert "hunter2" not in caplog.text


@pytest.mark.anyio
async def test_get_order_requests_view_context(settings, make_transport):
    order = {"id": 727, "status": "processing", "line_items": []}
    transport = make_transport(200, order)
    adapter = get_order(settings=settings, transport=transport)

    assert await adapter.call(id="727") == order
    request = transport.last
    assert request.method == "GET"
    assert request.url.path == "/wp-json/wc/v3/orders/727"
    assert dict(request.url.params) == {"context": "view"}


@pytest.mark.anyio
async def test_get_order_connection_refused(settings, make_transport):
    import httpx

    adapter = get_order(settings=settings, transport=make_transport(exc=httpx.ConnectError))

    assert await adapter.call(id="727") == {"error": "An error occurred while retrieving the order."}


@pytest.mark.anyio
async def test_get_customer_error_message(settings, make_transport):
    adapter = get_customer(settings=settings, transport=make_transport(500, {}))

    assert await adapter.call(id="1") == {"error": "An error occurred while retrieving the customer."}


@pytest.mark.anyio
async def test_update_order_sends_body(settings, make_transport):
    transport = make_transport(200, {"id": 9, "status": "completed"})
    adapter = update_order(settings=settings, transport=transport)

    result = await adapter.call(
        id="9",
        status="completed",
        set_paid=True,
        meta_data=[{"key": "source", "value": "agent"}],
    )

    assert result == {"id": 9, "status": "completed"}
    assert transport.last.method == "PUT"
    assert transport.last.url.path == "/wp-json/wc/v3/orders/9"
    assert transport.last_body() == {
        "status": "completed",
        "set_paid": True,
        "meta_data": [{"key": "source", "value": "agent"}],
    }


@pytest.mark.anyio
async def test_update_order_rejects_wrong_types(settings, make_transport):
    transport = make_transport(200, {})
    adapter = update_order(settings=settings, transport=transport)

    result = await adapter.call(id="9", billing="not-an-object")

    assert result == {"error": "An error occurred while updating the order."}
    assert transport.requests == []
