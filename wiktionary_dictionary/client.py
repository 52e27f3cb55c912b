"""
HTTP client for provider API requests.

Wraps httpx so that providers never see an exception from the transport:
every request returns a dict with an ``ok`` flag.

    {"ok": True, "data": {...}, "status": 200}
    {"ok": False, "error": "Request timeout", "details": "..."}
"""

import platform
from typing import Any, Dict, Optional

import httpx

from wiktionary_dictionary import __version__
from wiktionary_dictionary.config import HTTP_DEFAULTS, load_config
from wiktionary_dictionary.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = HTTP_DEFAULTS['timeout']
DEFAULT_HEADERS = {
    "User-Agent": f"WiktionaryDictionary/{__version__} (Python {platform.python_version()})",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def get_httpx_timeout(timeout_config: Any) -> httpx.Timeout:
    """
    Convert timeout configuration to httpx.Timeout object.

    Args:
        timeout_config: Either a number (applied to every phase) or a dict with
            connect, write, read, pool keys

    Returns:
        httpx.Timeout object
    """
    if isinstance(timeout_config, dict):
        return httpx.Timeout(
            connect=timeout_config.get('connect', DEFAULT_TIMEOUT),
            write=timeout_config.get('write', DEFAULT_TIMEOUT),
            read=timeout_config.get('read', DEFAULT_TIMEOUT),
            pool=timeout_config.get('pool', DEFAULT_TIMEOUT),
        )
    timeout_value = float(timeout_config) if timeout_config else float(DEFAULT_TIMEOUT)
    return httpx.Timeout(timeout_value)


class HttpClient:
    """Synchronous JSON HTTP client with default headers and error mapping."""

    def __init__(
        self,
        timeout: Any = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        # Injected clients are owned by the caller; others are created per request
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> 'HttpClient':
        """Build a client from the ``http`` section of the configuration."""
        if config is None:
            config = load_config()
        http_config = config.get('http', {})
        return cls(
            timeout=http_config.get('timeout', DEFAULT_TIMEOUT),
            headers=http_config.get('headers') or {},
        )

    def get_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make a GET request.

        Args:
            url: The URL to request
            params: Query parameters to append to the URL

        Returns:
            Response dict with ok, data/status or error/details keys
        """
        logger.debug(f"GET {url} params={params}")
        return self._request("GET", url, params=params or None)

    def post_request(self, url: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a POST request with a JSON body."""
        logger.debug(f"POST {url}")
        return self._request("POST", url, json=data or None)

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        try:
            if self._http_client is not None:
                response = self._http_client.request(method, url, headers=self.headers, **kwargs)
            else:
                with httpx.Client(timeout=get_httpx_timeout(self.timeout)) as client:
                    response = client.request(method, url, headers=self.headers, **kwargs)
            return self._parse_response(response)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out: {e}")
            return {"ok": False, "error": "Request timeout", "details": str(e)}
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            return {"ok": False, "error": "HTTP error", "details": str(e)}
        except Exception as e:
            logger.error(f"{method} {url} failed unexpectedly: {e}")
            return {"ok": False, "error": "Unexpected error", "details": str(e)}

    @staticmethod
    def _parse_response(response: httpx.Response) -> Dict[str, Any]:
        status = response.status_code

        if 200 <= status <= 299:
            if not response.content:
                return {"ok": True, "data": {}, "status": status}
            try:
                return {"ok": True, "data": response.json(), "status": status}
            except ValueError as e:
                return {
                    "ok": False,
                    "error": "Invalid JSON response",
                    "details": str(e),
                    "raw_body": response.text,
                }

        if 400 <= status <= 499:
            error = "Client error"
        elif 500 <= status <= 599:
            error = "Server error"
        else:
            error = "Unexpected response"

        return {"ok": False, "error": error, "status": status, "details": response.reason_phrase}
