"""HTTP client for the FeedHub API."""

import logging
from typing import Any

import httpx

from feedhub.config import get_settings
from feedhub.exceptions import RemoteRejection, TransportError

logger = logging.getLogger(__name__)


class ApiClient:
    """JSON client that turns failed calls into RemoteRejection or TransportError."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout or settings.request_timeout
        self.token = token
        self.transport = transport

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, data: dict[str, Any]) -> Any:
        return await self.request("POST", path, json=data)

    async def put(self, path: str, data: dict[str, Any]) -> Any:
        return await self.request("PUT", path, json=data)

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body."""
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"Could not reach {self.base_url}{path}") from e

        if response.is_error:
            raise rejection_from_response(response)
        if not response.content:
            return None
        return response.json()


def rejection_from_response(response: httpx.Response) -> RemoteRejection:
    """Unpack `{message, errors}` from an error response, tolerating other bodies."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return RemoteRejection(response.status_code)

    message = body.get("message")
    errors = body.get("errors")
    if isinstance(errors, dict) and errors:
        errors = {str(k): str(v) for k, v in errors.items()}
    else:
        errors = None
    return RemoteRejection(
        response.status_code,
        message=message if isinstance(message, str) else None,
        errors=errors,
    )
