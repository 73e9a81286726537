"""
API gateway client for the Developer Portal.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from shared.config import PortalConfig
from shared.errors import ExternalServiceError
from shared.logging import get_logger


@dataclass
class GatewayResponse:
    """Decoded gateway response."""
    data: Any
    status_code: int = 200


class GatewayClient:
    """Authenticated client for the portal's REST API behind the gateway."""

    def __init__(
        self,
        gateway_url: str,
        *,
        timeout: float = 10.0,
        api_token: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.gateway_url = gateway_url.rstrip('/')
        self.logger = get_logger("portal.gateway_client")

        headers = {"Accept": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        if api_key:
            headers["x-api-key"] = api_key

        self._client = httpx.AsyncClient(
            base_url=self.gateway_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        opts: Optional[Dict[str, Any]] = None,
    ) -> GatewayResponse:
        """Issue a GET request."""
        return await self._request("GET", path, params=query, headers=headers, opts=opts)

    async def put(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> GatewayResponse:
        """Issue a PUT request with a JSON body."""
        return await self._request("PUT", path, params=query, json=body if body is not None else {})

    async def delete(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        opts: Optional[Dict[str, Any]] = None,
    ) -> GatewayResponse:
        """Issue a DELETE request."""
        return await self._request("DELETE", path, params=query, opts=opts)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        opts: Optional[Dict[str, Any]] = None,
    ) -> GatewayResponse:
        """Execute a request and map failures to ExternalServiceError."""
        # opts carries per-request httpx settings such as timeout
        extra = dict(opts or {})
        try:
            response = await self._client.request(
                method,
                path,
                params=params or None,
                json=json,
                headers=headers or None,
                **extra,
            )
        except httpx.HTTPError as exc:
            self.logger.error("Gateway request failed", method=method, path=path, error=str(exc))
            raise ExternalServiceError(
                service="api_gateway",
                message=str(exc) or exc.__class__.__name__,
                details={"method": method, "path": path}
            ) from exc

        if response.is_success:
            data = response.json() if response.content else None
            self.logger.debug("Gateway request succeeded", method=method, path=path, status_code=response.status_code)
            return GatewayResponse(data=data, status_code=response.status_code)

        self.logger.error(
            "Gateway request returned error status",
            method=method,
            path=path,
            status_code=response.status_code,
            response=response.text
        )
        raise ExternalServiceError(
            service="api_gateway",
            message=f"Unexpected status {response.status_code}",
            details={"method": method, "path": path, "status_code": response.status_code, "body": response.text}
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()


class GatewayClientAccessor:
    """Async factory resolving the shared GatewayClient.

    The client is built on first use and returned on every later call.
    """

    def __init__(self, config: PortalConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport
        self._client: Optional[GatewayClient] = None

    async def __call__(self) -> GatewayClient:
        if self._client is None:
            self._client = GatewayClient(
                self.config.gateway_url,
                timeout=self.config.request_timeout,
                api_token=self.config.api_token,
                api_key=self.config.api_key_header_value,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
