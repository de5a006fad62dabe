#
#
#

"""Client for the deSEC DNS API (https://desec.io).

Usage with an existing token::

    from desec_api import Client

    client = Client('i-T3b1h_OI-H9ab8tRS98stGtURe')
    rrsets = client.rrset.get_rrsets('example.com')

or with credentials, which also allows logging out again::

    client = Client.from_credentials('info@example.com', 'mysecret')
    client.logout()

All expected failures are raised as subclasses of DesecClientException.
"""

import requests

__version__ = '0.3.3'

API_URL = 'https://desec.io/api/v1'
USER_AGENT = (
    f'desec-api/{__version__} python-requests/{requests.__version__} '
    '(unofficial deSEC API client)'
)

from .client import Client  # noqa: E402
from .exceptions import (  # noqa: E402
    DesecClientApiError,
    DesecClientCannotLogout,
    DesecClientConstructionFailure,
    DesecClientException,
    DesecClientForbidden,
    DesecClientInvalidResponse,
    DesecClientNotFound,
    DesecClientRateLimited,
    DesecClientRetriesExhausted,
    DesecClientSerializationFailure,
    DesecClientTransportFailure,
    DesecClientUnauthorized,
    DesecClientUnexpectedStatus,
)
from .models import (  # noqa: E402
    Account,
    Captcha,
    DNSSECKey,
    Domain,
    ResourceRecordSet,
    Token,
    TokenPolicy,
)

__all__ = [
    'API_URL',
    'USER_AGENT',
    'Account',
    'Captcha',
    'Client',
    'DNSSECKey',
    'DesecClientApiError',
    'DesecClientCannotLogout',
    'DesecClientConstructionFailure',
    'DesecClientException',
    'DesecClientForbidden',
    'DesecClientInvalidResponse',
    'DesecClientNotFound',
    'DesecClientRateLimited',
    'DesecClientRetriesExhausted',
    'DesecClientSerializationFailure',
    'DesecClientTransportFailure',
    'DesecClientUnauthorized',
    'DesecClientUnexpectedStatus',
    'Domain',
    'ResourceRecordSet',
    'Token',
    'TokenPolicy',
]
