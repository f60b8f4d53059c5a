""" Date predicates.

Form values come in as strings most of the time, so dates are parsed with a list of known formats.
Python `date` and `datetime` objects are accepted as well.

Notes on timezones: *naive* datetimes are treated as local time, and *aware* datetimes are converted to local
time before comparing, so these can be compared freely.
"""

import re
from datetime import date, datetime

from .base import predicate

#: Supported formats, tried in order after ISO 8601
DATE_FORMATS = (
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M',
    '%Y/%m/%d %H:%M:%S',
    '%m/%d/%Y',
    '%m/%d/%Y %H:%M',
    '%m/%d/%Y %H:%M:%S',
    '%d %B %Y',
    '%d %b %Y',
    '%B %d, %Y',
    '%b %d, %Y',
    '%a %b %d %Y',
    '%a %b %d %Y %H:%M:%S',
    '%a %b %d %Y %H:%M:%S GMT%z',  # as formatted by browsers: 'Fri Apr 24 1987 00:00:00 GMT+1000 (AEST)'
    '%a, %d %b %Y %H:%M:%S %Z',
    '%a, %d %b %Y %H:%M:%S %z',
)

# Browsers append a timezone name in parentheses
_tzname_rex = re.compile(r'\s*\([^)]*\)$')


def localize(dt):
    """ Convert an *aware* datetime into a *naive* local time. *Naive* datetimes are returned as is. """
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def parse_date(v):
    """ Parse the value into a *naive* local `datetime`.

    :param v: `datetime`, `date`, or a string in any of the supported formats
    :return: The parsed datetime, or `None` if the value is not a date
    :rtype: datetime|None
    """
    # Input types
    if isinstance(v, datetime):
        return localize(v)
    if isinstance(v, date):
        return datetime.combine(v, datetime.min.time())
    if not isinstance(v, str):
        return None

    # ISO 8601
    v = _tzname_rex.sub('', v.strip())
    try:
        return localize(datetime.fromisoformat(v))
    except ValueError:
        pass

    # Try all formats
    for format in DATE_FORMATS:
        try:
            dt = datetime.strptime(v, format)
        except ValueError:
            continue
        else:
            return localize(dt)

    # Nothing worked
    return None


@predicate('isDate', text=False)
def isDate(v):
    """ Validate that the input is a date """
    return parse_date(v) is not None


def _compare(v, options):
    dt = parse_date(v)
    if dt is None:
        return None, None
    other = datetime.now() if options is None else parse_date(options)
    return dt, other


@predicate('isBefore', text=False)
def isBefore(v, options=None):
    """ Validate that the input is a date before the given one.

    ```python
    isBefore('1987/04/24', '2000-01-01')  #-> True
    isBefore('1987/04/24')  # compared to the current time
    ```

    :param options: The date to compare against, `None` for the current time
    """
    dt, other = _compare(v, options)
    return dt is not None and other is not None and dt < other


@predicate('isAfter', text=False)
def isAfter(v, options=None):
    """ Validate that the input is a date after the given one.

    :param options: The date to compare against, `None` for the current time
    """
    dt, other = _compare(v, options)
    return dt is not None and other is not None and dt > other


__all__ = ('isDate', 'isBefore', 'isAfter', 'parse_date')
