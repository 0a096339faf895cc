"""
zkWasm Hub Client

Queries the zkWasm hub image catalog over its REST interface.
"""

import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from pydantic import ValidationError

from .models import ImageQueryResponse, ImageRecord


logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://rpc.zkwasmhub.com:8090"
DEFAULT_TIMEOUT = 10.0


class HubError(Exception):
    """Failure talking to the zkWasm hub."""
    pass


class HubClient:
    """
    Minimal client for the zkWasm hub image catalog.

    Only the image lookup used by deployment checks is implemented.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        opener: Optional[Callable[..., Any]] = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: Hub base URL
            timeout: Request timeout in seconds
            opener: Callable compatible with ``urllib.request.urlopen``
        """
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self._opener = opener or urllib.request.urlopen

    def image_url(self, md5: str) -> str:
        """Build the image query URL for an MD5 digest."""
        query = urllib.parse.urlencode({"md5": md5})
        return f"{self.endpoint}/image?{query}"

    def query_image(self, md5: str) -> Optional[ImageRecord]:
        """
        Look up an image by MD5 digest.

        Args:
            md5: Uppercase hex MD5 of the WASM image

        Returns:
            First matching record, or None if the hub knows no such image

        Raises:
            HubError: On HTTP, network or response format errors
        """
        url = self.image_url(md5)
        req = urllib.request.Request(url, method="GET")
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")

        logger.debug("GET %s (timeout=%ss)", url, self.timeout)

        try:
            with self._opener(req, timeout=self.timeout) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise HubError(f"HTTP {status}: {getattr(resp, 'reason', '')}".rstrip(": "))
                body = resp.read()
        except HubError:
            raise
        except urllib.error.HTTPError as e:
            raise HubError(f"HTTP {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            raise HubError(f"Connection failed: {e.reason}")
        except (socket.timeout, TimeoutError):
            raise HubError(f"Request timed out after {self.timeout}s")
        except OSError as e:
            raise HubError(f"Connection failed: {e}")

        return self._parse_response(body)

    def _parse_response(self, body: bytes) -> Optional[ImageRecord]:
        """Parse the hub response and return the first record."""
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise HubError(f"Invalid response from hub: {e}")

        try:
            response = ImageQueryResponse.model_validate(payload)
            logger.debug("Hub returned %d image record(s)", len(response.result))
            return response.first()
        except ValidationError as e:
            raise HubError(f"Invalid response from hub: {e.error_count()} validation error(s)")
