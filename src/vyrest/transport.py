"""
Authenticated request execution against the device REST API.

Handles request construction, authentication, status checking and JSON
decoding into the pydantic models of ``vyrest.models``.
"""

import json
import posixpath
from typing import Optional, Sequence, TypeVar
from urllib.parse import quote, urlparse

import httpx
from pydantic import BaseModel, ValidationError

from vyrest.config import ClientConfig
from vyrest.errors import DecodeFailure, StatusFailure, TransportFailure
from vyrest.logger import get_logger
from vyrest.models import MessageResponse

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SPEC_VERSION_HEADER = "Vyatta-Specification-Version"


def encode_path(path: Sequence[str]) -> str:
    """
    Turn path segments into a URL suffix, one percent-encoded segment each.

    Spaces become ``%20`` and ``/`` inside a segment is escaped, so every
    segment maps to exactly one URL path component.

    >>> encode_path(["interfaces", "foo bar"])
    '/interfaces/foo%20bar'
    """
    return "".join("/" + quote(segment, safe="") for segment in path)


def location_id(response: httpx.Response) -> str:
    """Return the last component of the response's Location header."""
    location = response.headers.get("Location", "")
    resource = posixpath.basename(urlparse(location).path.rstrip("/"))
    if not resource:
        raise DecodeFailure(
            f"{response.request.method} {response.request.url.path} "
            "returned no Location header"
        )
    return resource


def status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


def _server_message(response: httpx.Response) -> Optional[str]:
    """Best-effort extraction of the server's message from an error body."""
    try:
        body = decode(response, MessageResponse)
    except DecodeFailure:
        return None
    return body.message or body.error or None


def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """
    Decode a JSON response body into ``model``.

    An empty body is not an error: it yields ``model()`` with every field
    at its default.

    Raises:
        DecodeFailure: The body is not JSON or does not fit ``model``.
    """
    raw = response.content
    if not raw.strip():
        return model()

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeFailure(f"Invalid JSON from {response.request.url.path}: {e}")

    if data is None:
        return model()

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeFailure(
            f"Unexpected response shape from {response.request.url.path}: {e}"
        )


class Transport:
    """
    Synchronous HTTP transport bound to one device and one set of credentials.

    Every request carries Basic authentication, ``Accept: application/json``
    and the protocol version header.

    :ivar config: The configuration this transport was built from.
    :ivar username: The authenticated user, used for ownership filtering.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self.username = config.username
        if not config.verify_tls:
            logger.debug(f"TLS certificate verification disabled for {config.host}")
        self._http = httpx.Client(
            base_url=config.base_url,
            auth=httpx.BasicAuth(config.username, config.password),
            headers={
                "Accept": "application/json",
                SPEC_VERSION_HEADER: config.protocol_version,
            },
            timeout=httpx.Timeout(config.timeout),
            verify=config.verify_tls,
            transport=http_transport,
        )

    def send(self, method: str, path: str) -> httpx.Response:
        """
        Execute one request without interpreting its status code.

        Raises:
            TransportFailure: No response was received.
        """
        method = method.upper()
        logger.debug(f"{method} {path}")
        try:
            response = self._http.request(method, path)
        except httpx.TimeoutException as e:
            raise TransportFailure(
                f"{method} {path} timed out after {self.config.timeout}s"
            ) from e
        except httpx.RequestError as e:
            raise TransportFailure(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def request(self, method: str, path: str) -> httpx.Response:
        """
        Execute one request; a status of 400 or above raises.

        Raises:
            TransportFailure: No response was received.
            StatusFailure: The server answered with an error status. The raw
                response is available as ``StatusFailure.response``.
        """
        response = self.send(method, path)
        if response.status_code >= 400:
            raise StatusFailure(
                response.status_code,
                status_text(response),
                message=_server_message(response),
                response=response,
            )
        return response

    def get_model(self, path: str, model: type[ModelT]) -> ModelT:
        return decode(self.request("GET", path), model)

    def message_request(self, method: str, path: str) -> str:
        """
        Execute a request whose body is ``{"message": ...}``.

        Returns:
            The server-supplied message.

        Raises:
            StatusFailure: Its text is the server message when the body has
                one, the HTTP status text otherwise.
        """
        return decode(self.request(method, path), MessageResponse).message

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
