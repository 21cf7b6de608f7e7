"""stripe-api: binding tipado y asíncrono de la API REST de Stripe."""

from stripe_api.adapters.credentials import SettingsCredentials, StaticCredentials
from stripe_api.adapters.http_client import HttpxTransport, build_async_client
from stripe_api.core.config import AppSettings
from stripe_api.core.domain.listing import ListObject
from stripe_api.core.errors import (
    ConfigError,
    DecodeError,
    FieldTypeMismatch,
    MalformedPayload,
    RemoteError,
    StripeAPIError,
    TransportFailure,
    UnexpectedShape,
)
from stripe_api.core.interfaces.request import HTTPMethod, StripeRequest
from stripe_api.core.services.client import StripeClient
from stripe_api.core.services.executor import RawResponse, execute, log_raw_response

__all__ = [
    "AppSettings",
    "ConfigError",
    "DecodeError",
    "FieldTypeMismatch",
    "HTTPMethod",
    "HttpxTransport",
    "ListObject",
    "MalformedPayload",
    "RawResponse",
    "RemoteError",
    "SettingsCredentials",
    "StaticCredentials",
    "StripeAPIError",
    "StripeClient",
    "StripeRequest",
    "TransportFailure",
    "UnexpectedShape",
    "build_async_client",
    "execute",
    "log_raw_response",
]
