#
#
#

import logging
from typing import List, Optional
from urllib.parse import urlencode

from .models import ResourceRecordSet, apex_or_subname
from .payload import Payload
from .responses import CREATED, NO_CONTENT, OK, expect, parse, parse_list


class RrsetClient(object):
    """RRsets of a domain, identified by (subname, type).

    An empty or missing subname addresses the zone apex, which the API
    expects as `@` in paths.
    """

    def __init__(self, client):
        self.log = logging.getLogger('DesecRrsetClient')
        self._client = client

    def _path(self, domain, subname, _type):
        return f'/domains/{domain}/rrsets/{apex_or_subname(subname)}/{_type}/'

    def create_rrset(
        self, domain, subname, type, ttl, records
    ) -> ResourceRecordSet:
        """Create an RRset.

        Raises DesecClientApiError when an RRset with the same subname and
        type exists or the records are invalid.
        """
        self.log.debug(
            'create_rrset: domain=%s, subname=%s, type=%s, ttl=%s',
            domain,
            subname,
            type,
            ttl,
        )
        payload = (
            Payload()
            .set_always('subname', apex_or_subname(subname))
            .set_always('type', type)
            .set_always('ttl', ttl)
            .set_always('records', list(records))
        )
        response = self._client._post(f'/domains/{domain}/rrsets/', payload)
        return parse(expect(response, CREATED), ResourceRecordSet.from_dict)

    def _list(self, domain, **filters) -> List[ResourceRecordSet]:
        path = f'/domains/{domain}/rrsets/'
        if filters:
            path = f'{path}?{urlencode(filters)}'
        response = self._client._get(path)
        return parse_list(expect(response, OK), ResourceRecordSet.from_dict)

    def get_rrsets(self, domain) -> List[ResourceRecordSet]:
        self.log.debug('get_rrsets: domain=%s', domain)
        return self._list(domain)

    def get_rrsets_by_type(self, domain, type) -> List[ResourceRecordSet]:
        self.log.debug('get_rrsets_by_type: domain=%s, type=%s', domain, type)
        return self._list(domain, type=type)

    def get_rrsets_by_subname(
        self, domain, subname
    ) -> List[ResourceRecordSet]:
        # the filter takes an empty value for the apex, not @
        self.log.debug(
            'get_rrsets_by_subname: domain=%s, subname=%s', domain, subname
        )
        return self._list(domain, subname=subname or '')

    def get_rrset(self, domain, subname, type) -> ResourceRecordSet:
        """Raises DesecClientNotFound when the RRset does not exist."""
        self.log.debug(
            'get_rrset: domain=%s, subname=%s, type=%s', domain, subname, type
        )
        response = self._client._get(self._path(domain, subname, type))
        return parse(expect(response, OK), ResourceRecordSet.from_dict)

    def patch_rrset(
        self, domain, subname, type, records=None, ttl=None
    ) -> Optional[ResourceRecordSet]:
        """Change the records and/or ttl of an RRset.

        Returns the updated RRset, or None if the API deleted it because
        `records` was empty.
        """
        self.log.debug(
            'patch_rrset: domain=%s, subname=%s, type=%s, ttl=%s',
            domain,
            subname,
            type,
            ttl,
        )
        payload = (
            Payload()
            .set('records', list(records) if records is not None else None)
            .set('ttl', ttl)
        )
        response = self._client._patch(
            self._path(domain, subname, type), payload
        )
        if expect(response, OK, NO_CONTENT).status_code == NO_CONTENT:
            self.log.info(
                'patch_rrset: %s/%s deleted, no records left', subname, type
            )
            return None
        return parse(response, ResourceRecordSet.from_dict)

    def patch_rrset_from(
        self, rrset: ResourceRecordSet
    ) -> Optional[ResourceRecordSet]:
        return self.patch_rrset(
            rrset.domain,
            rrset.subname,
            rrset.type,
            records=rrset.records,
            ttl=rrset.ttl,
        )

    def delete_rrset(self, domain, subname, type) -> None:
        """Delete an RRset, succeeds as well when it did not exist."""
        self.log.debug(
            'delete_rrset: domain=%s, subname=%s, type=%s',
            domain,
            subname,
            type,
        )
        response = self._client._delete(self._path(domain, subname, type))
        expect(response, NO_CONTENT)
