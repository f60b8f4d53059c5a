""" String format predicates.

All of them test the textual form of the value:

```python
from formschema.predicates import library

library['isEmail']('user@example.com')  #-> True
library['isNumeric'](123)  #-> True
```
"""

import re
import json
import ipaddress
from collections.abc import Mapping

from .base import predicate


def regex(key, pattern, flags=0):
    """ Register a predicate which matches the whole string against a regular expression """
    rex = re.compile(pattern, flags)

    @predicate(key)
    def matcher(v):
        return rex.match(v) is not None
    return matcher


isAlpha = regex('isAlpha', r'^[A-Za-z]+$')
isAlphanumeric = regex('isAlphanumeric', r'^[A-Za-z0-9]+$')
isNumeric = regex('isNumeric', r'^[-+]?[0-9]+$')
isAscii = regex('isAscii', r'^[\x00-\x7F]+$')
isHexadecimal = regex('isHexadecimal', r'^[0-9A-Fa-f]+$')
isHexColor = regex('isHexColor', r'^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$')


@predicate('isLowercase')
def isLowercase(v):
    """ The string has no uppercase characters """
    return v == v.lower()


@predicate('isUppercase')
def isUppercase(v):
    """ The string has no lowercase characters """
    return v == v.upper()


_label_rex = re.compile(r'^[a-z0-9\u00a1-\uffff](?:[a-z0-9\u00a1-\uffff-]*[a-z0-9\u00a1-\uffff])?$', re.IGNORECASE)
_tld_rex = re.compile(r'^(?:[a-z\u00a1-\uffff]{2,}|xn--[a-z0-9-]+)$', re.IGNORECASE)


@predicate('isFQDN')
def isFQDN(v, options=None):
    """ Fully qualified domain name.

    :param options: `{'require_tld': True}`
    """
    require_tld = options.get('require_tld', True) if isinstance(options, Mapping) else True

    # Trailing dot is allowed
    if v.endswith('.'):
        v = v[:-1]
    parts = v.split('.')
    if require_tld:
        if len(parts) < 2 or not _tld_rex.match(parts[-1]):
            return False
    return all(len(part) <= 63 and _label_rex.match(part) for part in parts)


@predicate('isIP')
def isIP(v, options=None):
    """ IP address.

    :param options: IP version: 4 or 6. Any version when not provided
    """
    try:
        address = ipaddress.ip_address(v)
    except ValueError:
        return False
    if options is None:
        return True
    return str(address.version) == str(options)


_email_user_rex = re.compile(r"^[a-z0-9.!#$%&'*+/=?^_`{|}~-]+$", re.IGNORECASE)


@predicate('isEmail')
def isEmail(v):
    """ E-mail address: user@domain, where the domain is an FQDN """
    user, at, domain = v.rpartition('@')
    if not at or not user or len(user) > 64:
        return False
    if user.startswith('.') or user.endswith('.') or '..' in user:
        return False
    return _email_user_rex.match(user) is not None and isFQDN(domain)


_url_rex = re.compile(
    r'^'
    r'(?:' r'(?P<scheme>[a-z][a-z0-9+.-]*)' r'://)?'
    r'(?:' r'(?P<auth>[^@/\s]+(?::[^@/\s]*)?)' r'@)?'
    r'(?P<host>\[[0-9a-f:.]+\]|[^/@:\s?#]+)'
    r'(?:' r':(?P<port>\d{1,5})' r')?'
    r'(?P<path>[/?#]\S*)?'
    r'$',
    re.IGNORECASE
)


@predicate('isURL')
def isURL(v, options=None):
    """ Validate a URL.

    The protocol is optional, but when given, should be one of the allowed ones.
    The host should be a domain name or an IP address.

    :param options: `{'protocols': ('http', 'https', 'ftp'), 'require_protocol': False}`
    """
    options = options if isinstance(options, Mapping) else {}
    protocols = tuple(p.lower() for p in options.get('protocols', ('http', 'https', 'ftp')))

    match = _url_rex.match(v)
    if not match or len(v) > 2083:
        return False
    parts = match.groupdict()

    # Protocol
    if parts['scheme'] is None:
        if options.get('require_protocol', False):
            return False
    elif parts['scheme'].lower() not in protocols:
        return False

    # Port
    if parts['port'] is not None and not 0 < int(parts['port']) <= 65535:
        return False

    # Host
    host = parts['host']
    if host.startswith('['):
        return isIP(host[1:-1], 6)
    return isIP(host) or isFQDN(host)


_uuid_rex = {
    '3': re.compile(r'^[0-9A-F]{8}-[0-9A-F]{4}-3[0-9A-F]{3}-[0-9A-F]{4}-[0-9A-F]{12}$', re.IGNORECASE),
    '4': re.compile(r'^[0-9A-F]{8}-[0-9A-F]{4}-4[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$', re.IGNORECASE),
    '5': re.compile(r'^[0-9A-F]{8}-[0-9A-F]{4}-5[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$', re.IGNORECASE),
    'all': re.compile(r'^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$', re.IGNORECASE),
}


@predicate('isUUID')
def isUUID(v, options=None):
    """ UUID string.

    :param options: UUID version: 3, 4, 5. Any version when not provided
    """
    rex = _uuid_rex.get('all' if options is None else str(options))
    return rex is not None and rex.match(v) is not None


_base64_rex = re.compile(r'^[A-Za-z0-9+/]+={0,2}$')


@predicate('isBase64')
def isBase64(v):
    """ Base64-encoded string """
    return len(v) % 4 == 0 and _base64_rex.match(v) is not None


@predicate('isCreditCard')
def isCreditCard(v):
    """ Credit card number: 13-19 digits (spaces and dashes are ignored) with a valid Luhn checksum """
    digits = re.sub(r'[\s-]', '', v)
    if not re.match(r'^\d{13,19}$', digits):
        return False

    # Luhn
    total = 0
    for i, d in enumerate(reversed(digits)):
        n = int(d)
        if i % 2:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


@predicate('isJSON')
def isJSON(v):
    """ JSON object or array """
    try:
        return isinstance(json.loads(v), (dict, list))
    except ValueError:
        return False


@predicate('isMatches')
def isMatches(v, options=None):
    """ Search the string for a regular expression.

    :param options: Pattern (string or compiled), or a mapping: `{'pattern': ..., 'flags': re.I}`
    """
    if isinstance(options, Mapping):
        pattern, flags = options.get('pattern'), options.get('flags', 0)
    else:
        pattern, flags = options, 0

    # No usable pattern
    if not isinstance(pattern, (str, re.Pattern)):
        return False
    rex = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
    return rex.search(v) is not None


@predicate('isContains')
def isContains(v, options=None):
    """ The string contains the seed given in options """
    if options is None:
        return False
    return str(options) in v


@predicate('isEquals')
def isEquals(v, options=None):
    """ The string equals the comparison given in options """
    if options is None:
        return False
    return v == str(options)


__all__ = ('isAlpha', 'isAlphanumeric', 'isNumeric', 'isAscii', 'isHexadecimal', 'isHexColor',
           'isLowercase', 'isUppercase', 'isFQDN', 'isIP', 'isEmail', 'isURL', 'isUUID', 'isBase64',
           'isCreditCard', 'isJSON', 'isMatches', 'isContains', 'isEquals')
