"""HTTP client for the CUMTD developer API."""

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TypeVar

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .endpoints import (
    DEFAULT_BASE_URL,
    ApiRequest,
    build_calendar_dates_request,
    build_routes_request,
    build_shapes_request,
    build_stops_request,
)
from .exceptions import (
    ClientError,
    DecodeError,
    classify_requests_exception,
    error_for_transport_failure,
)
from .models import (
    CalendarDate,
    CalendarDatesResponse,
    Route,
    RoutesResponse,
    ShapePoint,
    ShapesResponse,
    Stop,
    StopsResponse,
)
from .normalize import (
    normalize_calendar_dates,
    normalize_routes,
    normalize_shapes,
    normalize_stops,
)
from .queries import CalendarDatesQuery, RoutesQuery, ShapesQuery, StopsQuery

logger = logging.getLogger(__name__)

USER_AGENT = "cumtd-transit/0.1.0"

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)
ItemT = TypeVar("ItemT")


class CumtdClient:
    """Client for stops, routes, shapes and calendar dates.

    Every query performs exactly one GET request. The underlying
    ``requests.Session`` holds no per-query state and may be shared.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Developer API key sent with every request
            base_url: Service base URL
            timeout: Request timeout in seconds
            session: Optional pre-configured session to reuse

        Raises:
            ClientError: If the API key, base URL or timeout is unusable
        """
        if not api_key or not api_key.strip():
            raise ClientError("Create HTTP client failed: API key cannot be empty")
        if not base_url or not base_url.strip():
            raise ClientError("Create HTTP client failed: base URL cannot be empty")
        if timeout <= 0:
            raise ClientError("Create HTTP client failed: timeout must be positive")

        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
        )

    def __enter__(self) -> "CumtdClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def query_stops(self, query: StopsQuery) -> list[Stop]:
        """Fetch stops, each tagged with its parent location.

        Args:
            query: One of ``StopsById``, ``AllStops`` or ``StopsByLatLon``

        Returns:
            Flat list of stops in response order

        Raises:
            ClientError: If the request cannot be set up
            RequestError: If the round trip fails
            DecodeError: If the response body is malformed
        """
        request = build_stops_request(self.api_key, query)
        return self._query(request, StopsResponse, normalize_stops)

    def query_routes(self, query: RoutesQuery) -> list[Route]:
        """Fetch routes matching the query."""
        request = build_routes_request(self.api_key, query)
        return self._query(request, RoutesResponse, normalize_routes)

    def query_shapes(self, query: ShapesQuery) -> list[ShapePoint]:
        """Fetch the points of a shape or of a section of it."""
        request = build_shapes_request(self.api_key, query)
        return self._query(request, ShapesResponse, normalize_shapes)

    def query_calendar_dates(self, query: CalendarDatesQuery) -> list[CalendarDate]:
        """Fetch calendar dates by date or by service.

        Raises:
            FormatError: If the query date cannot be formatted
            ClientError: If the request cannot be set up
            RequestError: If the round trip fails
            DecodeError: If the response body is malformed
        """
        request = build_calendar_dates_request(self.api_key, query)
        return self._query(request, CalendarDatesResponse, normalize_calendar_dates)

    def _query(
        self,
        request: ApiRequest,
        envelope_type: type[EnvelopeT],
        normalize: Callable[[EnvelopeT], list[ItemT]],
    ) -> list[ItemT]:
        body = self._send(request)
        envelope = self._decode(body, envelope_type)
        items = normalize(envelope)
        logger.debug(f"{request.endpoint} returned {len(items)} items")
        return items

    def _send(self, request: ApiRequest) -> bytes:
        """Perform the GET request.

        Raises:
            ClientError: If the request cannot be prepared
            RequestError: If the request fails or returns an error status
        """
        url = request.url(self.base_url)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(
                url, params=request.params, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            kind = classify_requests_exception(e)
            raise error_for_transport_failure(kind, self._describe(request, e)) from e
        return response.content

    def _describe(
        self, request: ApiRequest, exc: requests.exceptions.RequestException
    ) -> str:
        """Describe a transport failure without exposing the API key."""
        response = exc.response
        if response is not None:
            reason = f" {response.reason}" if response.reason else ""
            return f"{request.endpoint} returned HTTP {response.status_code}{reason}"
        return str(exc).replace(self.api_key, "***")

    @staticmethod
    def _decode(body: bytes, envelope_type: type[EnvelopeT]) -> EnvelopeT:
        """Decode a response body into its envelope model.

        Raises:
            DecodeError: If the body is not valid JSON of the expected shape
        """
        try:
            return envelope_type.model_validate_json(body)
        except PydanticValidationError as e:
            raise DecodeError(f"Deserializing response failed: {e}") from e


def stops_query_api(api_key: str, query: StopsQuery) -> list[Stop]:
    """Fetch stops with a one-off client."""
    with CumtdClient(api_key) as client:
        return client.query_stops(query)


def routes_query_api(api_key: str, query: RoutesQuery) -> list[Route]:
    """Fetch routes with a one-off client."""
    with CumtdClient(api_key) as client:
        return client.query_routes(query)


def shapes_query_api(api_key: str, query: ShapesQuery) -> list[ShapePoint]:
    """Fetch shape points with a one-off client."""
    with CumtdClient(api_key) as client:
        return client.query_shapes(query)


def dates_query_api(api_key: str, query: CalendarDatesQuery) -> list[CalendarDate]:
    """Fetch calendar dates with a one-off client."""
    with CumtdClient(api_key) as client:
        return client.query_calendar_dates(query)
