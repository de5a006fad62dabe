#
#
#

"""Typed representations of deSEC API objects.

Field names mirror the JSON returned by the API. `from_dict` raises
KeyError/TypeError for bodies missing required fields, which the response
classifier reports as an invalid response.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .payload import Payload

# https://desec.readthedocs.io/en/latest/dns/rrsets.html#accessing-the-zone-apex
APEX = '@'


def apex_or_subname(subname):
    return subname or APEX


@dataclass
class Account:
    created: str
    email: str
    id: str
    limit_domains: int
    outreach_preference: bool

    @classmethod
    def from_dict(cls, data):
        return cls(
            created=data['created'],
            email=data['email'],
            id=data['id'],
            limit_domains=data['limit_domains'],
            outreach_preference=data['outreach_preference'],
        )


@dataclass
class Captcha:
    id: str
    challenge: str
    kind: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'], challenge=data['challenge'], kind=data['kind']
        )


@dataclass
class DNSSECKey:
    dnskey: str
    ds: List[str]
    flags: int
    keytype: str
    managed: bool

    @classmethod
    def from_dict(cls, data):
        return cls(
            dnskey=data['dnskey'],
            ds=list(data['ds']),
            flags=data['flags'],
            keytype=data['keytype'],
            managed=data['managed'],
        )


@dataclass
class Domain:
    created: str
    minimum_ttl: int
    name: str
    touched: str
    keys: Optional[List[DNSSECKey]] = None
    published: Optional[str] = None
    zonefile: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        keys = data.get('keys')
        if keys is not None:
            keys = [DNSSECKey.from_dict(k) for k in keys]
        return cls(
            created=data['created'],
            minimum_ttl=data['minimum_ttl'],
            name=data['name'],
            touched=data['touched'],
            keys=keys,
            published=data.get('published'),
            zonefile=data.get('zonefile'),
        )


@dataclass
class ResourceRecordSet:
    domain: str
    subname: str
    type: str
    records: List[str] = field(default_factory=list)
    ttl: Optional[int] = None
    name: Optional[str] = None
    created: Optional[str] = None
    touched: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            domain=data['domain'],
            subname=data['subname'],
            type=data['type'],
            records=list(data['records']),
            ttl=data.get('ttl'),
            name=data.get('name'),
            created=data.get('created'),
            touched=data.get('touched'),
        )


@dataclass
class Token:
    id: str
    created: str
    name: str
    perm_manage_tokens: bool
    allowed_subnets: List[str] = field(default_factory=list)
    last_used: Optional[str] = None
    max_age: Optional[str] = None
    max_unused_period: Optional[str] = None
    is_valid: Optional[bool] = None
    # Only present in the response to token creation and login
    token: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            created=data['created'],
            name=data['name'],
            perm_manage_tokens=data['perm_manage_tokens'],
            allowed_subnets=list(data.get('allowed_subnets') or []),
            last_used=data.get('last_used'),
            max_age=data.get('max_age'),
            max_unused_period=data.get('max_unused_period'),
            is_valid=data.get('is_valid'),
            token=data.get('token'),
        )


@dataclass
class TokenPolicy:
    id: str
    perm_write: bool
    domain: Optional[str] = None
    subname: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            perm_write=data['perm_write'],
            domain=data.get('domain'),
            subname=data.get('subname'),
            type=data.get('type'),
        )


def token_payload(
    name=None,
    allowed_subnets=None,
    perm_manage_tokens=None,
    max_age=None,
    max_unused_period=None,
):
    return (
        Payload()
        .set('name', name)
        .set(
            'allowed_subnets',
            list(allowed_subnets) if allowed_subnets is not None else None,
        )
        .set('perm_manage_tokens', perm_manage_tokens)
        .set('max_age', max_age)
        .set('max_unused_period', max_unused_period)
    )


def policy_payload(domain=None, subname=None, _type=None, perm_write=False):
    # null domain/subname/type selects the token's default policy
    return (
        Payload()
        .set_always('domain', domain)
        .set_always('subname', subname)
        .set_always('type', _type)
        .set_always('perm_write', bool(perm_write))
    )
