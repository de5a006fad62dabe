#
# Tests for request construction and default headers
#

from unittest import TestCase
from unittest.mock import Mock

from requests import Response

from desec_api import (
    USER_AGENT,
    Client,
    DesecClientConstructionFailure,
    DesecClientSerializationFailure,
)
from desec_api.transport import Request, Transport


def _ok():
    response = Response()
    response.status_code = 204
    response._content = b''
    return response


class TestRequest(TestCase):
    def test_body_serialized_once(self):
        request = Request.new('PATCH', '/auth/account/', {'a': 1, 'b': None})
        self.assertEqual('{"a": 1, "b": null}', request.body)
        self.assertEqual('PATCH', request.method)
        self.assertEqual('/auth/account/', request.path)

    def test_empty_post_body(self):
        self.assertEqual('', Request.new('POST', '/auth/logout/').body)
        self.assertIsNone(Request.new('GET', '/domains/').body)
        self.assertIsNone(Request.new('DELETE', '/domains/a.test/').body)

    def test_immutable(self):
        request = Request.new('GET', '/domains/')
        with self.assertRaises(AttributeError):
            request.path = '/other/'

    def test_unserializable_payload(self):
        with self.assertRaises(DesecClientSerializationFailure) as ctx:
            Request.new('POST', '/domains/', {'name': object()})
        self.assertIn('POST /domains/', str(ctx.exception))


class TestTransport(TestCase):
    def test_authenticated_headers(self):
        transport = Transport('https://desec.io/api/v1', 'ua/1.0', token='t0k')
        headers = transport._session.headers
        self.assertEqual('Token t0k', headers['Authorization'])
        self.assertEqual('ua/1.0', headers['User-Agent'])
        self.assertTrue(transport.authenticated)

    def test_unauthenticated_omits_authorization(self):
        transport = Transport('https://desec.io/api/v1', 'ua/1.0')
        self.assertNotIn('Authorization', transport._session.headers)
        self.assertFalse(transport.authenticated)

    def test_execute_with_body(self):
        transport = Transport('http://localhost:8000/api/v1/', 'ua', 'tok')
        transport._session.request = Mock(return_value=_ok())
        transport.execute(Request.new('POST', '/domains/', {'name': 'a.test'}))
        transport._session.request.assert_called_once_with(
            'POST',
            'http://localhost:8000/api/v1/domains/',
            data=b'{"name": "a.test"}',
            headers={'Content-Type': 'application/json'},
            timeout=None,
        )

    def test_execute_without_body(self):
        transport = Transport('https://desec.io/api/v1', 'ua', timeout=5)
        transport._session.request = Mock(return_value=_ok())
        transport.execute(Request.new('GET', '/domains/'))
        transport._session.request.assert_called_once_with(
            'GET',
            'https://desec.io/api/v1/domains/',
            data=None,
            headers=None,
            timeout=5,
        )

    def test_empty_post_sends_content_type(self):
        transport = Transport('https://desec.io/api/v1', 'ua', 'tok')
        transport._session.request = Mock(return_value=_ok())
        transport.execute(Request.new('POST', '/auth/logout/'))
        _, kwargs = transport._session.request.call_args
        self.assertEqual(b'', kwargs['data'])
        self.assertEqual(
            {'Content-Type': 'application/json'}, kwargs['headers']
        )

    def test_invalid_token(self):
        for token in ('abc\r\nX-Injected: 1', 'tök€n'):
            with self.assertRaises(DesecClientConstructionFailure):
                Transport('https://desec.io/api/v1', 'ua', token=token)

    def test_invalid_base_url(self):
        with self.assertRaises(DesecClientConstructionFailure):
            Transport('desec.io/api/v1', 'ua')


class TestClientTransport(TestCase):
    def test_client_uses_base_url_and_user_agent(self):
        client = Client('tok', base_url='http://127.0.0.1:9999/api/v1')
        self.assertEqual('http://127.0.0.1:9999/api/v1', client.base_url)
        headers = client._transport._session.headers
        self.assertEqual(USER_AGENT, headers['User-Agent'])
        self.assertTrue(USER_AGENT.startswith('desec-api/'))
        self.assertEqual('Token tok', headers['Authorization'])

    def test_unauthenticated_client(self):
        client = Client()
        self.assertFalse(client.authenticated)
        self.assertNotIn('Authorization', client._transport._session.headers)
