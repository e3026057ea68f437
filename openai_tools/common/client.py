"""
Shared HTTP plumbing for the endpoint clients.

``HttpClient`` wraps a ``requests.Session`` and turns every failure mode into
the library's exception hierarchy: connection problems become
TransportError, non-2xx responses become RemoteError. ``ApiResource`` is the
base class of every endpoint client and provides the common constructors.
"""

import logging
import time
from typing import Any, Dict, Optional

import requests

from openai_tools.common.auth import AuthProvider, AzureAuth
from openai_tools.common.errors import TransportError, error_from_response
from openai_tools.config.constants import LOGGER_NAME, USER_AGENT

logger = logging.getLogger(LOGGER_NAME)


class HttpClient:
    """
    Thin wrapper around ``requests.Session`` bound to one auth provider.

    Args:
        auth: Provider used for URLs and authentication headers
        timeout: Request timeout in seconds; None waits indefinitely
    """

    def __init__(self, auth: AuthProvider, timeout: Optional[float] = None):
        self.auth = auth
        self.timeout = timeout
        self.session = requests.Session()

    def _headers(self, json_body: bool) -> Dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if json_body:
            headers["Content-Type"] = "application/json"
        headers.update(self.auth.headers())
        return headers

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Any] = None,
        data: Optional[Any] = None,
        files: Optional[Any] = None,
    ) -> requests.Response:
        """
        Issue a request and return the successful response.

        Raises:
            TransportError: If the request could not be completed
            RemoteError: If the service answered with a non-2xx status
        """
        url = self.auth.endpoint(path)
        logger.debug(f"{method} {url}")
        start = time.time()
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(json_body=json is not None),
                json=json,
                params=params,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request to {path} failed: {e}")
            raise TransportError(f"Request to {path} failed: {e}") from e

        elapsed = time.time() - start
        logger.debug(f"{method} {path} -> {response.status_code} in {elapsed:.2f}s")

        if not 200 <= response.status_code < 300:
            error = error_from_response(response.status_code, response.text)
            logger.error(f"API error from {path}: {error}")
            raise error
        return response

    def get(self, path: str, params: Optional[Any] = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None, **kwargs) -> requests.Response:
        return self.request("POST", path, json=json, **kwargs)

    def delete(self, path: str) -> requests.Response:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.session.close()


class ApiResource:
    """
    Base class for endpoint clients.

    Args:
        auth: Authentication provider. When omitted the provider is read from
            the environment, preferring Azure when its credentials are set.
        timeout: Request timeout in seconds (default unbounded)
    """

    def __init__(self, auth: Optional[AuthProvider] = None, timeout: Optional[float] = None):
        self.auth = auth if auth is not None else AuthProvider.from_env()
        self.http = HttpClient(self.auth, timeout=timeout)

    @classmethod
    def azure(cls, timeout: Optional[float] = None):
        """Create a client from the AZURE_OPENAI_* environment variables."""
        return cls(AuthProvider.azure_from_env(), timeout=timeout)

    @classmethod
    def with_url(cls, base_url: str, api_key: str, timeout: Optional[float] = None):
        """Create a client for an explicit base URL and key."""
        return cls(AuthProvider.from_url(base_url, api_key=api_key), timeout=timeout)

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None):
        """Create a client for a base URL, reading the key from the environment."""
        return cls(AuthProvider.from_url(url), timeout=timeout)

    @property
    def timeout(self) -> Optional[float]:
        return self.http.timeout

    @timeout.setter
    def timeout(self, value: Optional[float]) -> None:
        self.http.timeout = value

    @property
    def is_azure(self) -> bool:
        return isinstance(self.auth, AzureAuth)


def page_params(limit: Optional[int] = None, after: Optional[str] = None,
                **extra: Any) -> Optional[Dict[str, Any]]:
    """Cursor pagination query parameters, skipping unset values."""
    params: Dict[str, Any] = {}
    if limit is not None:
        params["limit"] = limit
    if after is not None:
        params["after"] = after
    for name, value in extra.items():
        if value is not None:
            params[name] = value
    return params or None
