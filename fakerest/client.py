# fakerest/client.py
"""
HTTP request client for the FakeRESTApi service.
"""

import logging
import time
from typing import Any, Dict, Optional

import requests

from .config import HarnessConfig
from .errors import TransportError
from .models import APIResult

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


class APIClient:
    """
    Issues one HTTP request per call and reports every outcome uniformly.

    HTTP error statuses are returned as results, never raised. Only failures
    to obtain a response at all surface as TransportError.
    """

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or HarnessConfig.from_env()
        self.session = session or requests.Session()
        self.session.headers.update(self.config.default_headers)
        self.logger = logging.getLogger(self.__class__.__name__)

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> APIResult:
        """
        Send a request to the configured API base URL.

        Args:
            method: GET, POST, PUT or DELETE (case-insensitive)
            path: Path appended to the API base URL, e.g. "/Books/1"
            body: JSON-serializable payload, sent only when not None
            options: Optional "headers" (merged over defaults) and "timeout" (seconds)

        Returns:
            APIResult with status, lower-cased headers, parsed body and duration in ms

        Raises:
            TransportError: if no HTTP response was obtained
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        options = options or {}
        url = f"{self.config.api_base_url}{path}"
        kwargs = {"timeout": options.get("timeout", self.config.timeout)}
        if options.get("headers"):
            kwargs["headers"] = options["headers"]
        if body is not None:
            kwargs["json"] = body

        self.logger.debug(f"{method} {url}")
        start_time = time.time()

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            self.logger.error(f"Timeout for {method} {url}: {e}")
            raise TransportError(method, url, f"timeout: {e}") from e
        except requests.exceptions.ConnectionError as e:
            self.logger.error(f"Connection failed for {method} {url}: {e}")
            raise TransportError(method, url, f"connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request failed for {method} {url}: {e}")
            raise TransportError(method, url, str(e)) from e

        duration = int((time.time() - start_time) * 1000)

        if response.status_code >= 400:
            self.logger.info(f"HTTP {response.status_code} for {method} {url}")

        return APIResult(
            method=method,
            url=url,
            status=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=self._parse_body(response),
            duration=duration,
        )

    def _parse_body(self, response) -> Any:
        """JSON when possible, raw text otherwise, None for an empty body"""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def cleanup_test_data(self, resource_type: str, record_id: Any) -> APIResult:
        """Delete a record created by a test"""
        return self.request("DELETE", f"/{resource_type}/{record_id}")

    def close(self) -> None:
        self.session.close()
