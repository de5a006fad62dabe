#
#
#

import logging
from typing import List

from .models import Token, TokenPolicy, policy_payload, token_payload
from .responses import CREATED, NO_CONTENT, OK, expect, parse, parse_list


class TokenClient(object):
    """Tokens of the account and their RRset policies.

    Managing tokens requires a token with `perm_manage_tokens`. Listing
    returns at most one page (500 items) of results.
    """

    def __init__(self, client):
        self.log = logging.getLogger('DesecTokenClient')
        self._client = client

    def create(
        self,
        name=None,
        allowed_subnets=None,
        perm_manage_tokens=None,
        max_age=None,
        max_unused_period=None,
    ) -> Token:
        """Create a token. The secret is only returned here, in `token`."""
        self.log.debug(
            'create: name=%s, perm_manage_tokens=%s', name, perm_manage_tokens
        )
        payload = token_payload(
            name, allowed_subnets, perm_manage_tokens, max_age, max_unused_period
        )
        response = self._client._post('/auth/tokens/', payload)
        return parse(expect(response, CREATED), Token.from_dict)

    def list(self) -> List[Token]:
        self.log.debug('list:')
        response = self._client._get('/auth/tokens/')
        return parse_list(expect(response, OK), Token.from_dict)

    def get(self, token_id) -> Token:
        self.log.debug('get: token_id=%s', token_id)
        response = self._client._get(f'/auth/tokens/{token_id}/')
        return parse(expect(response, OK), Token.from_dict)

    def patch(
        self,
        token_id,
        name=None,
        allowed_subnets=None,
        perm_manage_tokens=None,
        max_age=None,
        max_unused_period=None,
    ) -> Token:
        self.log.debug('patch: token_id=%s', token_id)
        payload = token_payload(
            name, allowed_subnets, perm_manage_tokens, max_age, max_unused_period
        )
        response = self._client._patch(f'/auth/tokens/{token_id}/', payload)
        return parse(expect(response, OK), Token.from_dict)

    def delete(self, token_id) -> None:
        self.log.debug('delete: token_id=%s', token_id)
        expect(self._client._delete(f'/auth/tokens/{token_id}/'), NO_CONTENT)

    # Policies

    def _policies(self, token_id):
        return f'/auth/tokens/{token_id}/policies/rrsets/'

    def create_policy(
        self, token_id, domain=None, subname=None, type=None, perm_write=False
    ) -> TokenPolicy:
        """Create a policy, one with domain, subname and type all None is the
        token's default policy and has to exist before any other."""
        self.log.debug(
            'create_policy: token_id=%s, domain=%s, subname=%s, type=%s, '
            'perm_write=%s',
            token_id,
            domain,
            subname,
            type,
            perm_write,
        )
        payload = policy_payload(domain, subname, type, perm_write)
        response = self._client._post(self._policies(token_id), payload)
        return parse(expect(response, CREATED), TokenPolicy.from_dict)

    def list_policies(self, token_id) -> List[TokenPolicy]:
        self.log.debug('list_policies: token_id=%s', token_id)
        response = self._client._get(self._policies(token_id))
        return parse_list(expect(response, OK), TokenPolicy.from_dict)

    def get_policy(self, token_id, policy_id) -> TokenPolicy:
        self.log.debug(
            'get_policy: token_id=%s, policy_id=%s', token_id, policy_id
        )
        response = self._client._get(f'{self._policies(token_id)}{policy_id}/')
        return parse(expect(response, OK), TokenPolicy.from_dict)

    def patch_policy(
        self,
        token_id,
        policy_id,
        domain=None,
        subname=None,
        type=None,
        perm_write=False,
    ) -> TokenPolicy:
        self.log.debug(
            'patch_policy: token_id=%s, policy_id=%s', token_id, policy_id
        )
        payload = policy_payload(domain, subname, type, perm_write)
        response = self._client._patch(
            f'{self._policies(token_id)}{policy_id}/', payload
        )
        return parse(expect(response, OK), TokenPolicy.from_dict)

    def delete_policy(self, token_id, policy_id) -> None:
        self.log.debug(
            'delete_policy: token_id=%s, policy_id=%s', token_id, policy_id
        )
        response = self._client._delete(
            f'{self._policies(token_id)}{policy_id}/'
        )
        expect(response, NO_CONTENT)
