import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import httpx

from products_client.exceptions import TransportError

logger = logging.getLogger(__name__)


class TransportResponse:
    """Status code and raw body of an HTTP response."""

    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code: int = status_code
        self.content: bytes = content

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299


class Transport(ABC):
    """Sends one HTTP request and returns its status and body."""

    @abstractmethod
    async def send(self, method: str, url: str, *, params: Optional[List[Tuple[str, str]]] = None,
                   json: Any = None, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        """Send the request. Raise TransportError if no response was received."""
        pass


class HttpxTransport(Transport):
    """Transport backed by httpx.AsyncClient.

    When no client is given a short-lived one is opened for every request.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None) -> None:
        self.client: Optional[httpx.AsyncClient] = client
        self.timeout: Optional[float] = timeout

    async def send(self, method: str, url: str, *, params: Optional[List[Tuple[str, str]]] = None,
                   json: Any = None, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        kwargs: Dict[str, Any] = {"params": params, "headers": headers}
        if json is not None:
            kwargs["json"] = json
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        logger.debug("%s %s params=%s", method, url, params)
        try:
            if self.client is not None:
                response = await self.client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Transport error for %s %s: %s", method, url, e)
            raise TransportError(str(e) or e.__class__.__name__) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return TransportResponse(response.status_code, response.content)
