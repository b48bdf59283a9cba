"""Shared aiohttp plumbing for the Cavos SDK clients."""

import asyncio
import json
import logging
from typing import Optional, Dict, Any, Type

import aiohttp
from aiohttp import ClientTimeout, ClientError
from pydantic import BaseModel

from .config import CavosConfig
from .exceptions import (
    CavosSDKError,
    TransportError,
    UpstreamError,
    UnknownError,
)

logger = logging.getLogger(__name__)

USER_AGENT = 'Cavos-Python-SDK/0.1.0'


def to_json(data: Any) -> str:
    """Compact JSON used when embedding payloads in error messages."""
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False, default=str)


def bearer(token: str) -> Dict[str, str]:
    """Authorization header for a bearer token."""
    return {'Authorization': f'Bearer {token}'}


class HttpClient:
    """Base class for async HTTP clients sharing one aiohttp session."""

    def __init__(self, config: CavosConfig, session: Optional[aiohttp.ClientSession] = None):
        """Initialize the client.

        Args:
            config: Cavos configuration
            session: Optional externally managed aiohttp session
        """
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self._closed = False

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{path}"

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=ClientTimeout(total=self.config.request_timeout),
                headers={
                    'Content-Type': 'application/json',
                    'User-Agent': USER_AGENT
                }
            )
            self._owns_session = True

    async def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
        self._closed = True

    async def _request(
        self,
        method: str,
        url: str,
        *,
        operation: Optional[str] = None,
        context: Optional[str] = None,
        error_cls: Type[UpstreamError] = UpstreamError,
        json_body: Optional[Dict[str, Any]] = None,
        body_model: Optional[Type[BaseModel]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform one HTTP request and decode its JSON body.

        When ``operation`` is given, every error message starts with
        ``"<operation> failed: "``; a ``context`` label is used as a plain
        ``"<context>: "`` prefix instead. Response headers are only embedded
        for named operations.

        Args:
            method: HTTP method
            url: Absolute URL
            operation: Operation name used to prefix error messages
            context: Step description used to prefix error messages
            error_cls: UpstreamError subclass raised for non-2xx responses
            json_body: JSON request body, or the fields of ``body_model``
            body_model: Model the body is built with (serialized by alias)
            params: Query string parameters
            headers: Extra request headers

        Returns:
            Decoded JSON payload, unchanged

        Raises:
            UpstreamError: Non-2xx response (or the given subclass)
            TransportError: No response was received
            UnknownError: Any other local failure
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        await self._ensure_session()

        if operation:
            prefix = f"{operation} failed: "
        elif context:
            prefix = f"{context}: "
        else:
            prefix = ""
        logger.debug(f"{method} {url}")

        try:
            if body_model is not None:
                json_body = body_model(**json_body).dict(by_alias=True)

            async with self.session.request(
                method,
                url,
                json=json_body,
                params=params,
                headers=headers
            ) as response:

                if not 200 <= response.status < 300:
                    try:
                        error_data = await response.json(content_type=None)
                    except Exception:
                        error_data = {}
                    if error_data is None:
                        error_data = {}
                    response_headers = dict(response.headers)
                    message = f"{prefix}{response.status} {to_json(error_data)}"
                    if operation:
                        message += f"\nHeaders: {to_json(response_headers)}"
                    raise error_cls(
                        message,
                        status_code=response.status,
                        response_data=error_data,
                        response_headers=response_headers
                    )

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise UnknownError(
                        f"{prefix}Failed to parse JSON response: {e}",
                        details={'status_code': response.status}
                    )

        except CavosSDKError:
            raise
        except (ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"No response from {method} {url}: {e!r}")
            raise TransportError(
                f"{prefix}No response received. Request: {method} {url}",
                method=method,
                url=url,
                details={'cause': repr(e)}
            )
        except Exception as e:
            raise UnknownError(f"{prefix}{e}")
