#
#
#

"""Interpretation of deSEC API responses.

Maps status codes onto the exception taxonomy in `exceptions` and turns
successful bodies into typed values.
"""

import re
from typing import Callable, Optional, TypeVar

from requests import Response

from .exceptions import (
    DesecClientApiError,
    DesecClientForbidden,
    DesecClientInvalidResponse,
    DesecClientNotFound,
    DesecClientRateLimited,
    DesecClientUnauthorized,
    DesecClientUnexpectedStatus,
)

OK = 200
CREATED = 201
ACCEPTED = 202
NO_CONTENT = 204
BAD_REQUEST = 400
UNAUTHORIZED = 401
FORBIDDEN = 403
NOT_FOUND = 404
TOO_MANY_REQUESTS = 429

SUCCESS = frozenset((OK, CREATED, ACCEPTED, NO_CONTENT))

_SECONDS = re.compile(r'[0-9]+')

T = TypeVar('T')


def is_success(response: Response) -> bool:
    return response.status_code in SUCCESS


def is_throttled(response: Response) -> bool:
    return response.status_code == TOO_MANY_REQUESTS


def raise_for_status(response: Response) -> None:
    """Raise the exception matching a non-success, non-429 response."""
    status = response.status_code
    if status == UNAUTHORIZED:
        raise DesecClientUnauthorized(response.text)
    if status == FORBIDDEN:
        raise DesecClientForbidden()
    if status == NOT_FOUND:
        raise DesecClientNotFound()
    if status == BAD_REQUEST:
        raise DesecClientApiError(status, response.text)
    raise DesecClientUnexpectedStatus(status, response.text)


def retry_after(response: Response) -> int:
    """Seconds the server asked us to wait before retrying.

    Only the delay-seconds form of Retry-After is accepted, an HTTP-date or
    anything else raises DesecClientRateLimited without a wait value.
    """
    value: Optional[str] = response.headers.get('Retry-After')
    if value is None:
        raise DesecClientRateLimited(
            None, 'Request got throttled without retry-after header'
        )
    value = value.strip()
    if not _SECONDS.fullmatch(value):
        raise DesecClientRateLimited(
            None,
            f'Request got throttled and cannot parse retry-after {value!r}',
        )
    return int(value)


def expect(response: Response, *statuses: int) -> Response:
    """Return `response` if its status is one the endpoint documents."""
    if response.status_code not in statuses:
        raise DesecClientUnexpectedStatus(response.status_code, response.text)
    return response


def parse(response: Response, factory: Callable[[object], T]) -> T:
    """Decode the JSON body and build a typed value from it.

    Both decoding errors and bodies that don't have the expected shape are
    reported as DesecClientInvalidResponse carrying the raw body.
    """
    body = response.text
    try:
        return factory(response.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise DesecClientInvalidResponse(str(e), body) from e


def parse_list(response: Response, factory: Callable[[dict], T]) -> list:
    def build(data):
        if not isinstance(data, list):
            raise TypeError(f'expected a list, got {type(data).__name__}')
        return [factory(item) for item in data]

    return parse(response, build)
