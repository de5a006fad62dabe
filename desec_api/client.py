#
#
#

import logging
from time import sleep
from typing import Any, Optional

from requests import Response

from . import API_URL, USER_AGENT
from .account import AccountClient
from .domain import DomainClient
from .exceptions import (
    DesecClientCannotLogout,
    DesecClientRateLimited,
    DesecClientRetriesExhausted,
)
from .responses import (
    NO_CONTENT,
    expect,
    is_success,
    is_throttled,
    raise_for_status,
    retry_after,
)
from .rrset import RrsetClient
from .token import TokenClient
from .transport import Request, Transport

DEFAULT_RETRY = True
DEFAULT_MAX_WAIT_RETRY = 60
DEFAULT_MAX_RETRIES = 3


class Client(object):
    """Client for the deSEC DNS API.

    Every call goes through `_process`, which retries requests throttled with
    HTTP 429 as long as retries are enabled, the server's Retry-After fits
    into `max_wait_retry` and no more than `max_retries` retries were made.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = API_URL,
        retry: bool = DEFAULT_RETRY,
        max_wait_retry: int = DEFAULT_MAX_WAIT_RETRY,
        max_retries: int = DEFAULT_MAX_RETRIES,
        timeout: Optional[float] = None,
        logged_in: bool = False,
    ):
        self.log = logging.getLogger('DesecClient')
        self.log.debug(
            '__init__: token=%s, base_url=%s, retry=%s, max_wait_retry=%s, '
            'max_retries=%s',
            '***' if token else None,
            base_url,
            retry,
            max_wait_retry,
            max_retries,
        )
        self.retry = retry
        self.max_wait_retry = max_wait_retry
        self.max_retries = max_retries
        self.logged_in = logged_in
        self._transport = Transport(
            base_url, USER_AGENT, token=token, timeout=timeout
        )

        self.account = AccountClient(self)
        self.domain = DomainClient(self)
        self.rrset = RrsetClient(self)
        self.token = TokenClient(self)

    @classmethod
    def from_credentials(cls, email: str, password: str, **kwargs):
        """Log in with email and password and return a client using the
        resulting token. Only such clients can `logout`."""
        with cls(**kwargs) as client:
            login = client.account.login(email, password)
        return cls(login.token, logged_in=True, **kwargs)

    @property
    def retry(self) -> bool:
        return self._retry

    @retry.setter
    def retry(self, value):
        self._retry = bool(value)

    @property
    def max_wait_retry(self) -> int:
        return self._max_wait_retry

    @max_wait_retry.setter
    def max_wait_retry(self, value):
        if value < 0:
            raise ValueError(f'max_wait_retry must be >= 0, got {value}')
        self._max_wait_retry = value

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @max_retries.setter
    def max_retries(self, value):
        if value < 0:
            raise ValueError(f'max_retries must be >= 0, got {value}')
        self._max_retries = value

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def authenticated(self) -> bool:
        return self._transport.authenticated

    def logout(self) -> None:
        if not self.logged_in:
            raise DesecClientCannotLogout()
        response = self._post('/auth/logout/')
        expect(response, NO_CONTENT)
        self.logged_in = False
        self._transport.close()

    def close(self) -> None:
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _process(self, request: Request) -> Response:
        # Configuration is read once per call
        should_retry = self.retry
        max_wait_retry = self.max_wait_retry
        max_retries = self.max_retries

        retries = 0
        while True:
            if retries > max_retries:
                self.log.warning(
                    '_process: %s %s giving up after %d retries',
                    request.method,
                    request.path,
                    max_retries,
                )
                raise DesecClientRetriesExhausted(max_retries)

            response = self._transport.execute(request)
            if is_success(response):
                return response
            if not is_throttled(response):
                raise_for_status(response)

            wait = retry_after(response)
            if not should_retry:
                self.log.debug(
                    '_process: throttled, but retries are disabled'
                )
                raise DesecClientRateLimited(
                    wait,
                    response.text
                    or 'Request has been throttled, but retries are disabled',
                )
            if wait > max_wait_retry:
                msg = (
                    f'Wait time for retry {wait} exceeds max accepted wait '
                    f'time per retry {max_wait_retry}'
                )
                self.log.debug('_process: %s', msg)
                raise DesecClientRateLimited(wait, msg)

            self.log.debug(
                '_process: %s %s throttled, waiting %d seconds (retry %d)',
                request.method,
                request.path,
                wait,
                retries + 1,
            )
            sleep(wait)
            retries += 1

    def _get(self, path: str) -> Response:
        return self._process(Request.new('GET', path))

    def _post(self, path: str, payload: Any = None) -> Response:
        return self._process(Request.new('POST', path, payload))

    def _patch(self, path: str, payload: Any) -> Response:
        return self._process(Request.new('PATCH', path, payload))

    def _delete(self, path: str) -> Response:
        return self._process(Request.new('DELETE', path))
