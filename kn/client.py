"""HTTP client for the Knative serving API."""

import logging
from typing import Any, Callable, Dict, Optional, Protocol
from urllib.parse import quote, urlparse

import requests
from pydantic import ValidationError

from .config import DEFAULT_TIMEOUT
from .errors import BackendError, ClientConstructionError
from .models import SERVING_API_VERSION, Service

logger = logging.getLogger(__name__)

# Resource name used in API paths and recorded actions
SERVICES_RESOURCE = "services"


class ServingInterface(Protocol):
    """The single capability commands need from a serving backend."""

    def get_service(self, namespace: str, name: str) -> Service:
        ...


# Zero-argument constructor for a serving client; raises on failure
ServingFactory = Callable[[], ServingInterface]


class ServingClient:
    """Client for the serving API."""

    def __init__(
        self,
        server: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.server = server.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        """Build request headers."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str) -> Dict[str, Any]:
        """Make HTTP request to API."""
        url = f"{self.server}/apis/{SERVING_API_VERSION}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = requests.request(
                method, url, headers=self._headers(), timeout=self.timeout
            )
        except requests.exceptions.ConnectionError:
            raise BackendError(0, f"Failed to connect to server: {self.server}")
        except requests.exceptions.Timeout:
            raise BackendError(0, "Request timeout")

        if response.status_code >= 400:
            try:
                error = response.json()
                message = error.get("message") or error.get("detail") or str(error)
            except ValueError:
                message = response.text or response.reason
            raise BackendError(response.status_code, message)

        try:
            return response.json()
        except ValueError:
            raise BackendError(
                response.status_code, f"Invalid JSON in response from {url}"
            )

    def get_service(self, namespace: str, name: str) -> Service:
        """Get a service by name."""
        data = self._request(
            "GET",
            f"/namespaces/{quote(namespace, safe='')}"
            f"/{SERVICES_RESOURCE}/{quote(name, safe='')}",
        )
        try:
            return Service.model_validate(data)
        except ValidationError as e:
            raise BackendError(0, f"Unexpected service object from server: {e}")


def new_serving_client(
    server: str, token: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT
) -> ServingClient:
    """Build a client for ``server``.

    Only validates the configuration; no request is made.
    """
    parsed = urlparse(server or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClientConstructionError(
            f"Invalid server URL: {server!r}. Expected http(s)://host[:port]"
        )
    if timeout <= 0:
        raise ClientConstructionError(f"Invalid timeout: {timeout}")
    logger.debug(f"Created serving client for {server}")
    return ServingClient(server, token=token, timeout=timeout)
