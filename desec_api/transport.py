#
#
#

"""HTTP transport for the deSEC API.

A `Request` is an immutable value: the JSON body is serialized once when the
request is built and the same text is sent on every attempt, so a throttled
request can be re-executed as often as the retry loop needs.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from requests import RequestException, Response, Session

from .exceptions import (
    DesecClientConstructionFailure,
    DesecClientSerializationFailure,
    DesecClientTransportFailure,
)

JSON_CONTENT_TYPE = 'application/json'


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    body: Optional[str] = None

    @classmethod
    def new(cls, method: str, path: str, payload: Any = None) -> 'Request':
        """Build a request, serializing `payload` to JSON text.

        POST requests without a payload carry an empty body so the
        Content-Type header is still sent.
        """
        if payload is not None:
            try:
                body = json.dumps(payload)
            except (TypeError, ValueError) as e:
                raise DesecClientSerializationFailure(
                    f'Cannot serialize payload for {method} {path}: {e}'
                ) from e
        elif method == 'POST':
            body = ''
        else:
            body = None
        return cls(method, path, body)


class Transport(object):
    def __init__(
        self,
        base_url: str,
        user_agent: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.log = logging.getLogger('DesecTransport')
        self.log.debug(
            '__init__: base_url=%s, token=%s, timeout=%s',
            base_url,
            '***' if token else None,
            timeout,
        )
        if not base_url.startswith(('https://', 'http://')):
            raise DesecClientConstructionFailure(
                f'Invalid base url {base_url!r}, must be http(s)'
            )

        headers = {'User-Agent': user_agent}
        if token is not None:
            headers['Authorization'] = f'Token {token}'
        for name, value in headers.items():
            _check_header_value(name, value)

        session = Session()
        session.headers.update(headers)
        self._session = session
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.authenticated = token is not None

    def execute(self, request: Request) -> Response:
        url = f'{self.base_url}{request.path}'
        data = headers = None
        if request.body is not None:
            data = request.body.encode('utf-8')
            headers = {'Content-Type': JSON_CONTENT_TYPE}
        try:
            return self._session.request(
                request.method,
                url,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except RequestException as e:
            self.log.debug('execute: %s %s failed: %s', request.method, url, e)
            raise DesecClientTransportFailure(e) from e

    def close(self):
        self._session.close()


def _check_header_value(name, value):
    # header values go out as latin-1 on a single line
    if '\r' in value or '\n' in value:
        raise DesecClientConstructionFailure(
            f'{name} header value must not contain line breaks'
        )
    try:
        value.encode('latin-1')
    except UnicodeEncodeError as e:
        raise DesecClientConstructionFailure(
            f'{name} header value contains invalid characters'
        ) from e
