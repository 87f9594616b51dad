import json

import httpx
import pytest

from conftest import make_draft

from console.client.remote import RemoteCollection
from console.core.errors import TransportFailure
from console.schemas.employee import Employee, EmployeeFilters, EmployeeStatus

EMPLOYEE_JSON = {
    "id": 5,
    "name": "Ana",
    "surname": "Lopez",
    "email": "ana@example.com",
    "phone": "",
    "department": "Sales",
    "role": "Rep",
    "salary": 2100,
    "hireDate": "2021-06-01",
    "status": "on-leave",
    "companyId": 1,
}


def collection(handler) -> RemoteCollection:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api.test")
    return RemoteCollection(http, "employees", Employee)


@pytest.mark.asyncio
async def test_list_sends_filters_as_camel_case_query():
    seen = {}

    def handler(request: httpx.Request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[EMPLOYEE_JSON])

    remote = collection(handler)
    rows = await remote.list(EmployeeFilters(department="Sales", company_id=1))

    assert seen["params"] == {"department": "Sales", "companyId": "1"}
    assert rows[0].status is EmployeeStatus.ON_LEAVE
    assert rows[0].company_id == 1


@pytest.mark.asyncio
async def test_list_failure_yields_empty_list(caplog):
    remote = collection(lambda request: httpx.Response(500, json={"detail": "down"}))
    assert await remote.list() == []
    assert "Error loading employees" in caplog.text


@pytest.mark.asyncio
async def test_list_with_unknown_status_is_rejected_to_empty():
    bad = dict(EMPLOYEE_JSON, status="retired")
    remote = collection(lambda request: httpx.Response(200, json=[bad]))
    assert await remote.list() == []


@pytest.mark.asyncio
async def test_list_network_error_yields_empty_list():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    assert await collection(handler).list() == []


@pytest.mark.asyncio
async def test_get_propagates_http_errors():
    remote = collection(lambda request: httpx.Response(404, json={"detail": "employees 9 not found"}))

    with pytest.raises(TransportFailure) as info:
        await remote.get(9)

    assert info.value.status_code == 404
    assert info.value.operation == "get"
    assert "not found" in str(info.value)


@pytest.mark.asyncio
async def test_create_posts_wire_body():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json=dict(EMPLOYEE_JSON, id=77))

    created = await collection(handler).create(make_draft())

    assert seen["method"] == "POST"
    assert seen["body"]["hireDate"] == "2024-03-01"
    assert seen["body"]["companyId"] == 1
    assert "id" not in seen["body"]
    assert created.id == 77


@pytest.mark.asyncio
async def test_update_sends_partial_patch():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=dict(EMPLOYEE_JSON, status="active"))

    updated = await collection(handler).update(5, {"status": EmployeeStatus.ACTIVE, "company_id": 2})

    assert seen == {
        "method": "PATCH",
        "path": "/employees/5",
        "body": {"status": "active", "companyId": 2},
    }
    assert updated.status is EmployeeStatus.ACTIVE


@pytest.mark.asyncio
async def test_delete_failure_raises_transport_failure():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(TransportFailure) as info:
        await collection(handler).delete(5)

    assert info.value.status_code is None
    assert info.value.operation == "delete"
