#
#
#

"""Account management: captcha, registration, login, account settings.

Endpoints that work without a token (captcha, registration, login and
password reset) are also available as module level functions which run on
a fresh unauthenticated client.
"""

import logging

from .models import Account, Captcha, Token
from .payload import Payload
from .responses import ACCEPTED, CREATED, OK, expect, parse


def _captcha(captcha_id, solution):
    return {'id': captcha_id, 'solution': solution}


def _login_token(data):
    token = Token.from_dict(data)
    if not token.token:
        raise KeyError('token')
    return token


class AccountClient(object):
    def __init__(self, client):
        self.log = logging.getLogger('DesecAccountClient')
        self._client = client

    def get_captcha(self) -> Captcha:
        self.log.debug('get_captcha:')
        response = expect(self._client._post('/captcha/'), CREATED)
        return parse(response, Captcha.from_dict)

    def register(
        self,
        email,
        password,
        captcha_id,
        captcha_solution,
        domain=None,
        outreach_preference=None,
    ) -> None:
        """Register a new account.

        The account is only activated once the link sent to `email` has been
        followed. With `domain` set, the domain is created on activation.
        """
        self.log.debug('register: email=%s, domain=%s', email, domain)
        payload = (
            Payload()
            .set('email', email)
            .set('password', password)
            .set('captcha', _captcha(captcha_id, captcha_solution))
            .set('domain', domain)
            .set('outreach_preference', outreach_preference)
        )
        expect(self._client._post('/auth/', payload), ACCEPTED)

    def login(self, email, password) -> Token:
        """Exchange credentials for a token, `Token.token` holds the secret."""
        self.log.debug('login: email=%s, password=***', email)
        payload = {'email': email, 'password': password}
        response = expect(self._client._post('/auth/login/', payload), OK)
        return parse(response, _login_token)

    def get_account_info(self) -> Account:
        self.log.debug('get_account_info:')
        response = expect(self._client._get('/auth/account/'), OK)
        return parse(response, Account.from_dict)

    def update_account(self, outreach_preference) -> Account:
        # outreach_preference is the only field the API allows to change
        self.log.debug(
            'update_account: outreach_preference=%s', outreach_preference
        )
        payload = {'outreach_preference': bool(outreach_preference)}
        response = expect(self._client._patch('/auth/account/', payload), OK)
        return parse(response, Account.from_dict)

    def request_password_reset(
        self, email, captcha_id, captcha_solution
    ) -> None:
        self.log.debug('request_password_reset: email=%s', email)
        payload = {
            'email': email,
            'captcha': _captcha(captcha_id, captcha_solution),
        }
        response = self._client._post(
            '/auth/account/reset-password/', payload
        )
        expect(response, ACCEPTED)

    def confirm_password_reset(self, code, new_password) -> None:
        """Set a new password using the code from the reset email."""
        self.log.debug('confirm_password_reset: code=***')
        payload = {'new_password': new_password}
        response = self._client._post(
            f'/auth/account/reset-password/{code}', payload
        )
        expect(response, OK)

    def change_email(self, email, password, new_email) -> None:
        self.log.debug(
            'change_email: email=%s, new_email=%s', email, new_email
        )
        payload = {'email': email, 'password': password, 'new_email': new_email}
        response = self._client._post('/auth/account/change-email/', payload)
        expect(response, ACCEPTED)

    def delete_account(self, email, password) -> None:
        """Request account deletion, confirmed through a link sent by email."""
        self.log.debug('delete_account: email=%s', email)
        payload = {'email': email, 'password': password}
        response = self._client._post('/auth/account/delete/', payload)
        expect(response, ACCEPTED)


def _unauthenticated(**kwargs):
    from .client import Client

    return Client(**kwargs)


def get_captcha(**kwargs) -> Captcha:
    with _unauthenticated(**kwargs) as client:
        return client.account.get_captcha()


def register(
    email,
    password,
    captcha_id,
    captcha_solution,
    domain=None,
    outreach_preference=None,
    **kwargs,
) -> None:
    with _unauthenticated(**kwargs) as client:
        client.account.register(
            email,
            password,
            captcha_id,
            captcha_solution,
            domain=domain,
            outreach_preference=outreach_preference,
        )


def login(email, password, **kwargs) -> Token:
    with _unauthenticated(**kwargs) as client:
        return client.account.login(email, password)


def request_password_reset(
    email, captcha_id, captcha_solution, **kwargs
) -> None:
    with _unauthenticated(**kwargs) as client:
        client.account.request_password_reset(
            email, captcha_id, captcha_solution
        )


def confirm_password_reset(code, new_password, **kwargs) -> None:
    with _unauthenticated(**kwargs) as client:
        client.account.confirm_password_reset(code, new_password)
