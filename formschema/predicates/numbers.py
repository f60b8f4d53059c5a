import re

from .base import predicate, get_number, in_range

_int_rex = re.compile(r'^[-+]?(?:0|[1-9][0-9]*)$')
_float_rex = re.compile(r'^[-+]?(?:[0-9]+)?(?:\.[0-9]*)?(?:[eE][-+]?[0-9]+)?$')
_decimal_rex = re.compile(r'^[-+]?(?:[0-9]+|[0-9]*\.[0-9]+)$')


def is_int_text(v):
    """ Test whether the string is an integer literal: '0', '-12', '+3'. Leading zeros are not allowed. """
    return _int_rex.match(v) is not None


@predicate('isInt')
def isInt(v, options=None):
    """ Integer number, optionally within bounds.

    ```python
    isInt('10', {'min': 0, 'max': 100})  #-> True
    isInt('101', {'min': 0, 'max': 100})  #-> False
    isInt('1.5')  #-> False
    ```

    :param options: `{'min': ..., 'max': ...}`, inclusive
    """
    return is_int_text(v) and in_range(int(v), options)


@predicate('isFloat')
def isFloat(v, options=None):
    """ Floating-point number, optionally within bounds.

    :param options: `{'min': ..., 'max': ...}`, inclusive
    """
    if v in ('', '.', '+', '-') or not _float_rex.match(v):
        return False
    try:
        n = float(v)
    except ValueError:  # e.g. 'e5'
        return False
    return in_range(n, options)


@predicate('isDecimal')
def isDecimal(v):
    """ Decimal number: digits with an optional fractional part """
    return _decimal_rex.match(v) is not None


@predicate('isDivisibleBy')
def isDivisibleBy(v, options=None):
    """ Number divisible by the number given in options """
    divisor = get_number(options)
    if not divisor or not isFloat(v):
        return False
    return float(v) % divisor == 0


__all__ = ('isInt', 'isFloat', 'isDecimal', 'isDivisibleBy')
