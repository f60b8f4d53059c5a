from collections.abc import Mapping

from .base import predicate, get_number
from ..schema.util import get_text, is_collection


@predicate('isIn')
def isIn(v, options=None):
    """ Validate that a value is in a collection.

    This is a plain `value in container` check, made on the textual forms:

    ```python
    isIn('red', ['red', 'green', 'blue'])  #-> True
    isIn(1, [1, 2, 3])  #-> True
    isIn('pink', ['red', 'green', 'blue'])  #-> False
    ```

    A mapping is tested against its keys, and a string is tested with a substring check.

    :param options: Collection of allowed values
    :type options: collections.abc.Container
    """
    if isinstance(options, Mapping):
        return v in map(get_text, options.keys())
    if isinstance(options, str):
        return v in options
    if is_collection(options):
        return v in map(get_text, options)
    return False


def _check_length(length, min, max):
    lo = get_number(min)
    hi = get_number(max)
    if lo is not None and length < lo:
        return False
    if hi is not None and length > hi:
        return False
    return True


@predicate('isLength')
def isLength(v, min=0, max=None):
    """ Validate that the string length is in a certain range, inclusive.

    Note that the bounds are given as two arguments: rule options `{'min': 1, 'max': 10}` are unpacked by
    `call_predicate()`.

    :param min: Minimal allowed length, or `None` to impose no limits.
    :type min: int|None
    :param max: Maximal allowed length, or `None` to impose no limits.
    :type max: int|None
    """
    return _check_length(len(v), min, max)


@predicate('isByteLength')
def isByteLength(v, min=0, max=None):
    """ Validate that the UTF-8 encoded string length is in a certain range, inclusive.

    Bounds are given just like for `isLength()`.
    """
    return _check_length(len(v.encode('utf8')), min, max)


@predicate('isBoolean')
def isBoolean(v):
    """ Boolean: 'true', 'false', '1', '0' """
    return v in ('true', 'false', '1', '0')


@predicate('isNull')
def isNull(v):
    """ Empty string """
    return len(v) == 0


__all__ = ('isIn', 'isLength', 'isByteLength', 'isBoolean', 'isNull')
