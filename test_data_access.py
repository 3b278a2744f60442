# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the backend client, envelope decoding and the resource accessors.
Run: pytest test_data_access.py -v
"""

import json
from typing import Any, Dict, List

import httpx
import pytest

from hrportal.models.domain import Client, Department, Employee
from hrportal.services.backend_client import (
    ApiError,
    BackendClient,
    DataAccessError,
    clean_params,
)
from hrportal.services.client_api import ClientApi
from hrportal.services.envelopes import EnvelopeDecodeError, decode, decode_page, unwrap
from hrportal.services.hr_api import HRApi


def backend_for(handler) -> BackendClient:
    http = httpx.AsyncClient(
        base_url="http://backend.test", transport=httpx.MockTransport(handler)
    )
    return BackendClient(http)


def reply(status: int = 200, **kwargs):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, **kwargs)
    return handler


# ============================================
# Envelope decoding
# ============================================
class TestEnvelopes:
    def test_status_envelope(self):
        payload = {"status": "success", "data": {"id": 1, "name": "HR"}, "message": "ok"}
        assert decode(payload, Department) == Department(id=1, name="HR")

    def test_success_flag_envelope(self):
        payload = {"success": True, "data": [{"id": 1, "name": "HR"}]}
        assert decode(payload, List[Department])[0].name == "HR"

    def test_data_envelope(self):
        assert decode({"data": {"total": 3}}, Dict[str, Any]) == {"total": 3}

    def test_bare_value(self):
        assert decode({"id": 2, "name": "Sales"}, Department).name == "Sales"

    def test_record_with_data_field_falls_back_to_bare(self):
        # a dict that merely contains "data" next to other keys is the value itself
        payload = {"data": {"x": 1}, "summary": {"total": 4}}
        assert unwrap(payload) == [("bare", payload)]
        assert decode(payload, Dict[str, Any]) == payload

    def test_first_validating_shape_wins(self):
        # the inner value does not fit the target, the whole payload does
        payload = {"data": "not-a-dict"}
        assert decode(payload, Dict[str, Any]) == payload

    def test_error_envelope_raises(self):
        with pytest.raises(ApiError) as exc_info:
            decode({"status": "error", "message": "Token expired"}, Dict[str, Any])
        assert exc_info.value.message == "Token expired"

    def test_nothing_validates(self):
        with pytest.raises(EnvelopeDecodeError) as exc_info:
            decode({"status": "success", "data": {"id": "x"}}, Department)
        assert len(exc_info.value.errors) == 2

    def test_page_from_bare_list(self):
        page = decode_page([{"id": 1, "name": "A"}, {"id": 2, "name": "B"}], Department)
        assert (page.total, page.page, page.total_pages) == (2, 1, 1)

    def test_page_from_resource_key(self):
        payload = {"departments": [{"id": 1, "name": "A"}], "total": 41, "limit": 20}
        page = decode_page(payload, Department, ("departments",))
        assert page.total_pages == 3

    def test_page_with_pagination_object(self):
        payload = {"success": True, "data": {
            "items": [{"id": 1, "name": "A"}],
            "pagination": {"total": 9, "page": 3, "limit": 4, "totalPages": 3},
        }}
        page = decode_page(payload, Department)
        assert (page.total, page.page, page.limit, page.total_pages) == (9, 3, 4, 3)

    def test_empty_page_has_one_page(self):
        page = decode_page({"employees": [], "total": 0}, Employee, ("employees",))
        assert page.items == []
        assert page.total_pages == 1

    def test_page_without_list(self):
        with pytest.raises(EnvelopeDecodeError):
            decode_page({"total": 3}, Department)

    def test_employee_ids_from_nested_objects(self):
        emp = decode({
            "id": 5, "firstName": "A", "lastName": "B",
            "department": {"id": 2, "name": "Sales"}, "role": {"id": 4, "name": "junior"},
        }, Employee)
        assert emp.department_id == 2
        assert emp.role_id == 4
        assert emp.role_name == "junior"

    def test_client_id_normalised_to_string(self):
        assert decode({"id": 12, "clientName": "Acme"}, Client).id == "12"


# ============================================
# Backend client
# ============================================
class TestCleanParams:
    def test_drops_unset_values(self):
        assert clean_params({"a": None, "b": "", "c": 0, "d": "x"}) == {"c": 0, "d": "x"}

    def test_booleans_rendered_lowercase(self):
        assert clean_params({"success": False}) == {"success": "false"}


class TestBackendClient:
    @pytest.mark.anyio
    async def test_json_body_returned(self):
        backend = backend_for(reply(json={"ok": True}))
        assert await backend.get("/x") == {"ok": True}

    @pytest.mark.anyio
    async def test_no_content(self):
        backend = backend_for(reply(204))
        assert await backend.delete("/x") is None

    @pytest.mark.anyio
    async def test_error_status_carries_backend_message(self):
        backend = backend_for(reply(403, json={"message": "Forbidden resource"}))
        with pytest.raises(ApiError) as exc_info:
            await backend.get("/x")
        assert exc_info.value.status == 403
        assert exc_info.value.message == "Forbidden resource"

    @pytest.mark.anyio
    async def test_error_without_body_uses_status_line(self):
        backend = backend_for(reply(500, text="oops"))
        with pytest.raises(ApiError) as exc_info:
            await backend.get("/x")
        assert exc_info.value.message == "HTTP 500: Internal Server Error"

    @pytest.mark.anyio
    async def test_invalid_json(self):
        backend = backend_for(reply(200, text="<html>"))
        with pytest.raises(ApiError) as exc_info:
            await backend.get("/x")
        assert exc_info.value.message == "Invalid JSON response"

    @pytest.mark.anyio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)
        backend = backend_for(handler)
        with pytest.raises(ApiError) as exc_info:
            await backend.get("/x")
        assert exc_info.value.status == 408
        assert exc_info.value.message == "Request timeout"

    @pytest.mark.anyio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        backend = backend_for(handler)
        with pytest.raises(ApiError) as exc_info:
            await backend.get("/x")
        assert exc_info.value.status == 0

    @pytest.mark.anyio
    async def test_single_attempt(self):
        calls = []

        def handler(request):
            calls.append(request.url.path)
            return httpx.Response(503, json={"message": "busy"})
        backend = backend_for(handler)
        with pytest.raises(ApiError):
            await backend.get("/x")
        assert calls == ["/x"]

    @pytest.mark.anyio
    async def test_query_params_cleaned(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[])
        backend = backend_for(handler)
        await backend.get("/x", params={"page": 2, "search": "", "active": True})
        assert seen == {"page": "2", "active": "true"}


# ============================================
# Accessors
# ============================================
class TestAccessors:
    @pytest.mark.anyio
    async def test_failure_message_names_the_action(self):
        api = HRApi(backend_for(reply(404, json={"message": "Employee not found"})))
        with pytest.raises(DataAccessError) as exc_info:
            await api.get_employee(3)
        assert exc_info.value.message == "Failed to fetch HR employee: Employee not found"
        assert exc_info.value.status == 404

    @pytest.mark.anyio
    async def test_unexpected_shape_is_bad_gateway(self):
        api = HRApi(backend_for(reply(json={"unexpected": True})))
        with pytest.raises(DataAccessError) as exc_info:
            await api.get_employee(3)
        assert exc_info.value.status == 502
        assert exc_info.value.message.startswith("Failed to fetch HR employee:")

    @pytest.mark.anyio
    async def test_terminate_sends_snake_case(self):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.read()))
            return httpx.Response(200, json={"message": "done"})
        api = HRApi(backend_for(handler))
        await api.terminate_employee(4, "2025-06-30")
        assert bodies == [{"employee_id": 4, "termination_date": "2025-06-30"}]

    @pytest.mark.anyio
    async def test_bulk_delete(self):
        paths = []

        def handler(request):
            paths.append((request.method, request.url.path))
            return httpx.Response(200, json={"success": True, "data": {"deleted": 2}})
        api = ClientApi(backend_for(handler))
        assert await api.bulk_delete(["1", "2"]) == {"deleted": 2}
        assert paths == [("POST", "/clients/bulk-delete")]
