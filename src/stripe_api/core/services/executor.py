"""Generic request executor.

One function runs any request that satisfies the request contract: it
encodes the parameters, derives the auth header from the credential
provider, hands the call to the transport and decodes the result. Endpoint
specific behaviour only enters through the contract hooks (path,
parameters, response decoding).
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from stripe_api.core.config import DEFAULT_API_BASE_URL
from stripe_api.core.encoding import encode_parameters
from stripe_api.core.errors import RemoteError
from stripe_api.core.interfaces.credentials import CredentialProvider
from stripe_api.core.interfaces.request import StripeRequest
from stripe_api.core.interfaces.transport import TransportExecutor

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


@dataclass(frozen=True)
class RawResponse:
    """What the raw-response hook receives for every completed call."""

    method: str
    path: str
    status: int
    body: bytes


RawResponseHook = Callable[[RawResponse], None]


def log_raw_response(response: RawResponse) -> None:
    """Stock hook: logs the raw body at DEBUG."""

    logger.debug(
        "%s %s -> %s: %s",
        response.method,
        response.path,
        response.status,
        response.body.decode("utf-8", errors="replace"),
    )


def build_auth_headers(credentials: CredentialProvider) -> dict[str, str]:
    """`authorization: Basic base64(secret_key + ":")`, computed on every call."""

    token = base64.b64encode(f"{credentials.current_secret_key()}:".encode("utf-8")).decode("ascii")
    return {"authorization": f"Basic {token}"}


async def execute(
    request: StripeRequest[ResponseT],
    *,
    transport: TransportExecutor,
    credentials: CredentialProvider,
    base_url: str = DEFAULT_API_BASE_URL,
    on_raw_response: RawResponseHook | None = None,
) -> ResponseT:
    """Run one request end to end.

    Raises:
        MalformedPayload: parameters cannot be encoded (no network call made).
        TransportFailure: raised by the transport, propagated untouched.
        RemoteError: non-2xx status.
        DecodeError: the body does not match the declared response shape.
    """

    method = request.method
    path = request.path
    encoded = encode_parameters(method, request.parameters)

    url = base_url.rstrip("/") + path
    if encoded.query:
        url = f"{url}?{encoded.query_string}"

    headers = build_auth_headers(credentials)
    if encoded.content_type:
        headers["content-type"] = encoded.content_type

    status, raw = await transport.execute(method.value, url, headers, encoded.body)
    logger.debug("%s %s -> %s (%d bytes)", method.value, path, status, len(raw))

    if on_raw_response is not None:
        _notify(on_raw_response, RawResponse(method=method.value, path=path, status=status, body=raw))

    if not 200 <= status < 300:
        error = RemoteError(method=method.value, path=path, status=status, body=raw)
        logger.info("Stripe API error: %s", error)
        raise error

    return request.decode_response(raw)


def _notify(hook: RawResponseHook, response: RawResponse) -> None:
    try:
        hook(response)
    except Exception:
        logger.warning("raw response hook failed", exc_info=True)
