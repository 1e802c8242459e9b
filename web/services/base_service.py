"""
web.services.base_service
~~~~~~~~~~~~~~~~~~~~~~~~~
Shared request/response plumbing for the web client services.
"""
from __future__ import annotations

from typing import Callable, TypeVar

import httpx
import structlog

from web.models import APIRequest, APIResponse

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Sends :class:`~web.models.APIRequest` objects with httpx.

    Each call is a single round trip: no retries and no circuit breaking.
    Pass *client* to share a connection pool (the caller keeps ownership
    and closes it); otherwise a short-lived ``httpx.AsyncClient`` is opened
    per call with *timeout*.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def send(
        self,
        api_request: APIRequest,
        response_type: Callable[[APIResponse], T] | None = None,
    ) -> T | APIResponse:
        """
        Issue *api_request* and convert the reply.

        Args:
            api_request: What to send.
            response_type: Callable applied to the :class:`APIResponse`
                envelope.  When omitted the envelope itself is returned.

        Returns:
            ``response_type(envelope)``, or the envelope.  HTTP and
            transport failures are reported through the envelope
            (``is_success=False``), never raised.
        """
        headers = {"Accept": "application/json"}
        if api_request.token:
            headers["Authorization"] = f"Bearer {api_request.token}"

        method = api_request.api_type.value
        body = api_request.json_body()
        logger.debug("api_request", method=method, url=api_request.url)

        try:
            if self._client is not None:
                response = await self._client.request(
                    method, api_request.url, headers=headers, json=body
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.request(
                        method, api_request.url, headers=headers, json=body
                    )
        except httpx.HTTPError as exc:
            logger.error(
                "api_request_failed",
                method=method,
                url=api_request.url,
                error=str(exc) or exc.__class__.__name__,
            )
            envelope = APIResponse(
                status_code=None,
                is_success=False,
                error_messages=[str(exc) or exc.__class__.__name__],
            )
        else:
            envelope = APIResponse.from_response(response)
            log = logger.info if envelope.is_success else logger.warning
            log(
                "api_response",
                method=method,
                url=api_request.url,
                status_code=response.status_code,
            )

        if response_type is None:
            return envelope
        return response_type(envelope)
