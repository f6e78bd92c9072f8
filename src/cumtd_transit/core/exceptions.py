"""Custom exceptions for the CUMTD transit client."""

from enum import Enum

import requests


class TransitApiError(Exception):
    """Base exception for transit API errors."""

    pass


class ClientError(TransitApiError):
    """Raised when the HTTP client cannot be constructed or configured."""

    pass


class RequestError(TransitApiError):
    """Raised when the request round trip fails."""

    pass


class DecodeError(TransitApiError):
    """Raised when a response body cannot be decoded into the expected shape."""

    pass


class FormatError(TransitApiError):
    """Raised when a local date value cannot be rendered for the wire."""

    pass


class ValidationError(TransitApiError):
    """Raised when query construction is incomplete."""

    pass


class TransportFailure(Enum):
    """Coarse classification of a transport-level failure."""

    CONNECTION_SETUP = "connection_setup"
    IN_FLIGHT = "in_flight"
    OTHER = "other"


def error_for_transport_failure(
    kind: TransportFailure, message: str
) -> TransitApiError:
    """Map a transport failure kind to the client error it surfaces as.

    Args:
        kind: Classified transport failure
        message: Human-readable failure description

    Returns:
        ClientError for setup failures, RequestError otherwise
    """
    if kind is TransportFailure.CONNECTION_SETUP:
        return ClientError(f"Create HTTP client failed: {message}")
    return RequestError(f"Request failed: {message}")


def classify_requests_exception(
    exc: requests.exceptions.RequestException,
) -> TransportFailure:
    """Classify a ``requests`` exception into a transport failure kind."""
    if isinstance(
        exc,
        (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
            requests.exceptions.InvalidHeader,
        ),
    ):
        return TransportFailure.CONNECTION_SETUP
    if isinstance(
        exc,
        (
            requests.exceptions.ConnectionError,
            requests.exceptions.Timeout,
            requests.exceptions.HTTPError,
        ),
    ):
        return TransportFailure.IN_FLIGHT
    return TransportFailure.OTHER
