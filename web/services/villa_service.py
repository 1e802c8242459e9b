"""
web.services.villa_service
~~~~~~~~~~~~~~~~~~~~~~~~~~
Typed client for the Villa API (``/api/villaAPI``).
"""
from __future__ import annotations

from typing import Callable, TypeVar

import httpx

from web.models import (
    APIRequest,
    APIResponse,
    ApiType,
    VillaCreateDTO,
    VillaDTO,
    VillaUpdateDTO,
)
from web.settings import ServiceUrls
from .base_service import BaseService

T = TypeVar("T")

VILLA_ROUTE = "/api/villaAPI"


class VillaService(BaseService):
    """
    Issues the Villa API calls.  Every method takes the caller's bearer
    *token* and an optional *response_type* (see
    :meth:`BaseService.send`).
    """

    def __init__(
        self,
        service_urls: ServiceUrls,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(client, timeout=service_urls.timeout)
        self.villa_url = service_urls.villa_api + VILLA_ROUTE

    async def get_all(
        self,
        token: str | None,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """GET every villa."""
        return await self.send(
            APIRequest(api_type=ApiType.GET, url=self.villa_url, token=token),
            response_type,
        )

    async def get(
        self,
        villa_id: int,
        token: str | None,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """GET the villa *villa_id*."""
        return await self.send(
            APIRequest(
                api_type=ApiType.GET,
                url=f"{self.villa_url}/{villa_id}",
                token=token,
            ),
            response_type,
        )

    async def create(
        self,
        dto: VillaCreateDTO,
        token: str | None,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """POST *dto* as a new villa."""
        return await self.send(
            APIRequest(
                api_type=ApiType.POST,
                url=self.villa_url,
                data=dto,
                token=token,
            ),
            response_type,
        )

    async def update(
        self,
        dto: VillaUpdateDTO,
        token: str | None,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """PUT *dto* over the villa with the same id."""
        return await self.send(
            APIRequest(
                api_type=ApiType.PUT,
                url=f"{self.villa_url}/{dto.id}",
                data=dto,
                token=token,
            ),
            response_type,
        )

    async def delete(
        self,
        villa_id: int,
        token: str | None,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """DELETE the villa *villa_id*."""
        return await self.send(
            APIRequest(
                api_type=ApiType.DELETE,
                url=f"{self.villa_url}/{villa_id}",
                token=token,
            ),
            response_type,
        )


# ---------------------------------------------------------------------------
# Response converters for ``response_type``
# ---------------------------------------------------------------------------

def as_villa(response: APIResponse) -> VillaDTO | None:
    """Return the villa in a successful reply, else ``None``."""
    if not response.is_success or not isinstance(response.result, dict):
        return None
    return VillaDTO.from_dict(response.result)


def as_villa_list(response: APIResponse) -> list[VillaDTO]:
    """Return the villas in a successful reply, else an empty list."""
    if not response.is_success or not isinstance(response.result, list):
        return []
    return [VillaDTO.from_dict(item) for item in response.result]
