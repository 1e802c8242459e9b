"""
tests.test_web_client
~~~~~~~~~~~~~~~~~~~~~
Tests for the web client services, using ``httpx.MockTransport`` in place
of a running Villa API.
"""
from __future__ import annotations

import dataclasses
import json

import httpx
import pytest

from web.models import APIRequest, APIResponse, ApiType, VillaCreateDTO, VillaDTO, VillaUpdateDTO
from web.services import BaseService, VillaService, as_villa, as_villa_list
from web.settings import ServiceUrls


BASE = "http://villa-api.test"
TOKEN = "eyJhbGciOi.opaque.token"

VILLA_JSON = {
    "id": 1,
    "name": "Royal Villa",
    "details": "Sea view.",
    "rate": 200.0,
    "occupancy": 4,
    "sqft": 550,
    "image_url": "",
    "amenity": "",
}


# ===========================================================================
# Fixtures
# ===========================================================================

class Recorder:
    """MockTransport handler that records requests and replays one reply."""

    def __init__(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_service(recorder: Recorder) -> VillaService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return VillaService(ServiceUrls(villa_api=BASE + "/"), client=client)


# ===========================================================================
# ServiceUrls
# ===========================================================================

class TestServiceUrls:

    def test_trailing_slash_stripped(self):
        assert ServiceUrls(villa_api="http://x/").villa_api == "http://x"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVICE_URLS_VILLA_API", "https://api.example.com/")
        monkeypatch.setenv("VILLA_CLIENT_TIMEOUT", "5")
        urls = ServiceUrls.from_env()
        assert urls.villa_api == "https://api.example.com"
        assert urls.timeout == 5.0

    def test_is_immutable(self):
        urls = ServiceUrls(villa_api="http://x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            urls.villa_api = "http://y"


# ===========================================================================
# VillaService
# ===========================================================================

class TestVillaService:

    @pytest.mark.asyncio
    async def test_get_all(self):
        recorder = Recorder(body=[VILLA_JSON])
        villas = await make_service(recorder).get_all(TOKEN, as_villa_list)
        assert recorder.last.method == "GET"
        assert str(recorder.last.url) == f"{BASE}/api/villaAPI"
        assert villas == [VillaDTO.from_dict(VILLA_JSON)]

    @pytest.mark.asyncio
    async def test_get_by_id(self):
        recorder = Recorder(body=VILLA_JSON)
        villa = await make_service(recorder).get(1, TOKEN, as_villa)
        assert str(recorder.last.url) == f"{BASE}/api/villaAPI/1"
        assert villa.name == "Royal Villa"

    @pytest.mark.asyncio
    async def test_bearer_token_passed_through_unmodified(self):
        recorder = Recorder(body=[])
        await make_service(recorder).get_all(TOKEN)
        assert recorder.last.headers["Authorization"] == f"Bearer {TOKEN}"
        assert recorder.last.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_no_token_no_authorization_header(self):
        recorder = Recorder(body=[])
        await make_service(recorder).get_all(None)
        assert "Authorization" not in recorder.last.headers

    @pytest.mark.asyncio
    async def test_create_posts_json_body(self):
        recorder = Recorder(status_code=201, body=VILLA_JSON)
        dto = VillaCreateDTO(name="Royal Villa", rate=200.0, occupancy=4, sqft=550)
        response = await make_service(recorder).create(dto, TOKEN)
        assert recorder.last.method == "POST"
        assert str(recorder.last.url) == f"{BASE}/api/villaAPI"
        assert json.loads(recorder.last.content) == {
            "name": "Royal Villa",
            "rate": 200.0,
            "details": "",
            "occupancy": 4,
            "sqft": 550,
            "image_url": "",
            "amenity": "",
        }
        assert response.status_code == 201
        assert response.is_success
        assert response.result == VILLA_JSON

    @pytest.mark.asyncio
    async def test_update_puts_to_dto_id(self):
        recorder = Recorder(status_code=204)
        dto = VillaUpdateDTO(
            id=7, name="Seven", rate=70.0, occupancy=1, sqft=70, image_url=""
        )
        response = await make_service(recorder).update(dto, TOKEN)
        assert recorder.last.method == "PUT"
        assert str(recorder.last.url) == f"{BASE}/api/villaAPI/7"
        assert json.loads(recorder.last.content)["id"] == 7
        assert response.is_success
        assert response.result is None

    @pytest.mark.asyncio
    async def test_delete(self):
        recorder = Recorder(status_code=204)
        response = await make_service(recorder).delete(9, TOKEN)
        assert recorder.last.method == "DELETE"
        assert str(recorder.last.url) == f"{BASE}/api/villaAPI/9"
        assert recorder.last.content == b""
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_custom_response_type_receives_envelope(self):
        recorder = Recorder(body=VILLA_JSON)
        seen = []
        result = await make_service(recorder).get(1, TOKEN, lambda r: seen.append(r) or "done")
        assert result == "done"
        assert isinstance(seen[0], APIResponse)

    @pytest.mark.asyncio
    async def test_model_state_errors_collected(self):
        recorder = Recorder(status_code=400, body={"CustomError": ["Villa already exists!"]})
        dto = VillaCreateDTO(name="Royal Villa", rate=1.0)
        response = await make_service(recorder).create(dto, TOKEN)
        assert not response.is_success
        assert response.error_messages == ["Villa already exists!"]

    @pytest.mark.asyncio
    async def test_not_found_detail_collected(self):
        recorder = Recorder(status_code=404, body={"code": "not_found", "detail": "Villa 5 not found."})
        villa = await make_service(recorder).get(5, TOKEN, as_villa)
        assert villa is None
        response = await make_service(recorder).get(5, TOKEN)
        assert response.error_messages == ["Villa 5 not found."]


# ===========================================================================
# BaseService
# ===========================================================================

class TestBaseService:

    @pytest.mark.asyncio
    async def test_transport_error_reported_not_raised(self):
        def boom(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = BaseService(httpx.AsyncClient(transport=httpx.MockTransport(boom)))
        response = await service.send(
            APIRequest(api_type=ApiType.GET, url=f"{BASE}/api/villaAPI", token=TOKEN)
        )
        assert response.status_code is None
        assert not response.is_success
        assert response.error_messages == ["connection refused"]

    @pytest.mark.asyncio
    async def test_non_json_body_kept_as_text(self):
        def plain(request):
            return httpx.Response(502, text="Bad Gateway")

        service = BaseService(httpx.AsyncClient(transport=httpx.MockTransport(plain)))
        response = await service.send(APIRequest(api_type=ApiType.GET, url=BASE))
        assert response.result == "Bad Gateway"
        assert response.error_messages == ["Bad Gateway"]

    def test_dict_data_sent_as_is(self):
        request = APIRequest(api_type=ApiType.POST, url=BASE, data={"a": 1})
        assert request.json_body() == {"a": 1}
