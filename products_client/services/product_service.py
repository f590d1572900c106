import json
import logging
from typing import Any, Optional

from products_client.config import Config
from products_client.exceptions import ErrorKind, ProductsApiError, TransportError
from products_client.models.product import Product, ProductQueryParams, ProductResponse
from products_client.services.transport import HttpxTransport, Transport, TransportResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}

GENERIC_ERROR_MESSAGE = 'An error occurred'
FETCH_ERROR_MESSAGE = 'Failed to fetch products'
DELETE_ERROR_MESSAGE = 'Failed to delete product'


class ProductService:
    """Client for the remote products resource."""

    def __init__(self, config: Config, transport: Optional[Transport] = None) -> None:
        self.config: Config = config
        self.transport: Transport = transport or HttpxTransport(timeout=config.request_timeout)

    async def fetch_products(self, params: Optional[ProductQueryParams] = None) -> ProductResponse:
        """Fetch a page of products matching the given filters."""
        params = params or ProductQueryParams()
        response = await self._send('GET', self.config.products_url, FETCH_ERROR_MESSAGE,
                                    params=params.to_query())
        data = self._handle_response(response, FETCH_ERROR_MESSAGE)
        if not isinstance(data, dict):
            logger.error("Expected a JSON object from the list endpoint, got %s", type(data).__name__)
            raise ProductsApiError('Unexpected product list response', ErrorKind.DECODE,
                                   status_code=response.status_code)
        return ProductResponse.from_dict(data)

    async def fetch_product(self, product_id: str) -> Product:
        """Fetch a single product by id."""
        response = await self._send('GET', self._product_url(product_id), FETCH_ERROR_MESSAGE)
        return self._handle_response(response, FETCH_ERROR_MESSAGE)

    async def create_product(self, data: Product) -> Product:
        """Create a product from a partial payload and return what the server stored."""
        response = await self._send('POST', self.config.products_url, FETCH_ERROR_MESSAGE,
                                    json=data, headers=JSON_HEADERS)
        return self._handle_response(response, FETCH_ERROR_MESSAGE)

    async def update_product(self, product_id: str, data: Product) -> Product:
        """Replace the given fields of a product and return the updated product."""
        response = await self._send('PUT', self._product_url(product_id), FETCH_ERROR_MESSAGE,
                                    json=data, headers=JSON_HEADERS)
        return self._handle_response(response, FETCH_ERROR_MESSAGE)

    async def delete_product(self, product_id: str) -> None:
        """Delete a product. The success body, if any, is ignored."""
        response = await self._send('DELETE', self._product_url(product_id), DELETE_ERROR_MESSAGE)
        if not response.ok:
            self._raise_for_status(response, DELETE_ERROR_MESSAGE)

    def _product_url(self, product_id: str) -> str:
        return f"{self.config.products_url}/{product_id}"

    async def _send(self, method: str, url: str, default_message: str, **kwargs: Any) -> TransportResponse:
        try:
            return await self.transport.send(method, url, **kwargs)
        except TransportError as e:
            raise ProductsApiError(default_message, ErrorKind.TRANSPORT) from e

    def _handle_response(self, response: TransportResponse, default_message: str) -> Any:
        if not response.ok:
            self._raise_for_status(response, default_message)
        try:
            return json.loads(response.content)
        except ValueError as e:
            logger.error("Invalid JSON in response with status %s: %s", response.status_code, e)
            raise ProductsApiError('Invalid JSON in response body', ErrorKind.DECODE,
                                   status_code=response.status_code) from e

    def _raise_for_status(self, response: TransportResponse, default_message: str) -> None:
        server_message = None
        try:
            error = json.loads(response.content)
        except ValueError:
            message = GENERIC_ERROR_MESSAGE
        else:
            if isinstance(error, dict) and error.get('message'):
                server_message = str(error['message'])
            message = server_message or default_message

        logger.error("Products API returned %s: %s", response.status_code, message)
        raise ProductsApiError(message, ErrorKind.STATUS, status_code=response.status_code,
                               server_message=server_message)
