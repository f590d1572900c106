from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """What went wrong while talking to the products service."""

    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class TransportError(Exception):
    """Raised by a transport when the request could not be sent or answered."""


class ProductsApiError(Exception):
    """Error raised by every ProductService operation.

    ``str(error)`` is the best-effort human readable message. ``kind`` tells
    transport failures, non-success statuses and undecodable bodies apart.
    """

    def __init__(self, message: str, kind: ErrorKind, status_code: Optional[int] = None,
                 server_message: Optional[str] = None) -> None:
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.server_message = server_message
        super().__init__(message)

    def __repr__(self) -> str:
        return (f"ProductsApiError(message={self.message!r}, kind={self.kind.value!r}, "
                f"status_code={self.status_code!r})")
