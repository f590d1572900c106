from .config import Config
from .exceptions import ErrorKind, ProductsApiError, TransportError
from .models.product import ProductQueryParams, ProductResponse
from .services.product_service import ProductService
from .services.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "Config",
    "ErrorKind",
    "HttpxTransport",
    "ProductQueryParams",
    "ProductResponse",
    "ProductService",
    "ProductsApiError",
    "Transport",
    "TransportError",
    "TransportResponse",
]
