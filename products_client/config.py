import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

class Config:
    """Configuration for the products API client."""

    def __init__(self, api_base_url: Optional[str] = None, request_timeout: Optional[float] = None) -> None:
        base_url = api_base_url or os.getenv("API_BASE_URL")
        if not base_url:
            raise EnvironmentError("Please set API_BASE_URL in the .env file.")
        self.api_base_url: str = base_url.rstrip("/")

        if request_timeout is None:
            raw_timeout = os.getenv("REQUEST_TIMEOUT")
            request_timeout = float(raw_timeout) if raw_timeout else None
        self.request_timeout: Optional[float] = request_timeout

    @property
    def products_url(self) -> str:
        return f"{self.api_base_url}/products"
