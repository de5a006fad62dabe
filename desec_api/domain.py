#
#
#

import logging
from typing import List, Optional
from urllib.parse import urlencode

from .models import Domain
from .responses import CREATED, NO_CONTENT, OK, expect, parse, parse_list


class DomainClient(object):
    def __init__(self, client):
        self.log = logging.getLogger('DesecDomainClient')
        self._client = client

    def create_domain(self, name) -> Domain:
        """Create a domain.

        Raises DesecClientApiError when the name is invalid or conflicts with
        a zone of another user.
        """
        self.log.debug('create_domain: name=%s', name)
        response = self._client._post('/domains/', {'name': name})
        return parse(expect(response, CREATED), Domain.from_dict)

    def get_domains(self) -> List[Domain]:
        self.log.debug('get_domains:')
        response = self._client._get('/domains/')
        return parse_list(expect(response, OK), Domain.from_dict)

    def get_domain(self, name) -> Domain:
        self.log.debug('get_domain: name=%s', name)
        response = self._client._get(f'/domains/{name}/')
        return parse(expect(response, OK), Domain.from_dict)

    def delete_domain(self, name) -> None:
        self.log.debug('delete_domain: name=%s', name)
        expect(self._client._delete(f'/domains/{name}/'), NO_CONTENT)

    def get_owning_domain(self, qname) -> Optional[Domain]:
        """Return the domain of the account responsible for `qname`.

        E.g. with example.net and dev.example.net in the account,
        _acme-challenge.www.dev.example.net is owned by dev.example.net.
        Returns None when no domain of the account is responsible.
        """
        self.log.debug('get_owning_domain: qname=%s', qname)
        query = urlencode({'owns_qname': qname})
        response = self._client._get(f'/domains/?{query}')
        domains = parse_list(expect(response, OK), Domain.from_dict)
        return domains[0] if domains else None

    def get_zonefile(self, name) -> str:
        self.log.debug('get_zonefile: name=%s', name)
        response = self._client._get(f'/domains/{name}/zonefile/')
        return expect(response, OK).text
