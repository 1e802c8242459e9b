"""
web.models
~~~~~~~~~~
Request/response envelopes and villa transfer objects used by the web
client.

Public API
----------
ApiType       – HTTP verb enum
APIRequest    – Outbound request description
APIResponse   – Normalised reply envelope
VillaDTO, VillaCreateDTO, VillaUpdateDTO – Client-side villa shapes
"""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from typing import Any

import httpx


class ApiType(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class APIRequest:
    """
    One outbound call.

    Attributes:
        api_type: HTTP verb.
        url: Absolute URL.
        data: Body to JSON-encode.  Dataclasses are converted with
            :func:`dataclasses.asdict`; ``None`` sends no body.
        token: Bearer token passed through unmodified.  Empty or ``None``
            sends no ``Authorization`` header.
    """

    api_type: ApiType
    url: str
    data: Any = None
    token: str | None = None

    def json_body(self) -> Any:
        if self.data is None:
            return None
        if is_dataclass(self.data):
            return asdict(self.data)
        return self.data


@dataclass
class APIResponse:
    """
    Normalised result of an API call.

    ``status_code`` is ``None`` when the request never got a reply.
    """

    status_code: int | None
    is_success: bool
    result: Any = None
    error_messages: list[str] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: httpx.Response) -> APIResponse:
        result = _decode_body(response)
        is_success = response.is_success
        return cls(
            status_code=response.status_code,
            is_success=is_success,
            result=result,
            error_messages=[] if is_success else _error_messages(result),
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_messages(body: Any) -> list[str]:
    """Flatten a model-state dict, ``{"code", "detail"}`` envelope or list."""
    if body is None:
        return []
    if isinstance(body, dict):
        if "detail" in body:
            return [str(body["detail"])]
        messages = []
        for value in body.values():
            messages.extend(_error_messages(value))
        return messages
    if isinstance(body, list):
        messages = []
        for item in body:
            messages.extend(_error_messages(item))
        return messages
    return [str(body)]


# ---------------------------------------------------------------------------
# Villa transfer objects
# ---------------------------------------------------------------------------

@dataclass
class VillaCreateDTO:
    name: str
    rate: float
    details: str = ""
    occupancy: int = 0
    sqft: int = 0
    image_url: str = ""
    amenity: str = ""


@dataclass
class VillaUpdateDTO:
    id: int
    name: str
    rate: float
    occupancy: int
    sqft: int
    image_url: str
    details: str = ""
    amenity: str = ""


@dataclass
class VillaDTO:
    id: int
    name: str
    rate: float
    details: str = ""
    occupancy: int = 0
    sqft: int = 0
    image_url: str = ""
    amenity: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> VillaDTO:
        """Build from an API payload, ignoring keys this client does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
