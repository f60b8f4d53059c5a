import inspect
from collections.abc import Mapping
from functools import wraps

from .registry import library
from ..schema.util import get_text, const


def accepted_arguments(func):
    """ Count the positional arguments a function accepts.

    :return: The number of arguments, or `None` when there's no limit (`*args`)
    :rtype: int|None
    """
    count = 0
    for p in inspect.signature(func).parameters.values():
        if p.kind == p.VAR_POSITIONAL:
            return None
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def predicate(key, text=True):
    """ Predicate factory: registers the function in the default library.

    Form values can be of any type, but most predicates only care about their textual form:
    with `text=True`, the value is converted with `get_text()` before the predicate sees it.

    Every rule may carry options, even when the predicate has no use for them: `{'numeric': True}`.
    Arguments the function does not accept are dropped.

    :param key: Registry key, e.g. 'isEmail'
    :type key: str
    :param text: Convert the value to text?
    :type text: bool
    """
    def decorator(func):
        nargs = accepted_arguments(func)

        @wraps(func)
        def wrapper(v, *args):
            if text:
                v = get_text(v)
            if nargs is not None:
                args = args[:max(nargs - 1, 0)]
            return func(v, *args)
        wrapper.name = key
        return library.register(key, wrapper)
    return decorator


def get_number(v):
    """ Convert an option value to a number, if possible.

    Used for bounds, like `{'min': 0, 'max': '100'}`: unusable bounds are treated as not set.

    :rtype: float|None
    """
    if v is None or v is const.UNDEFINED or isinstance(v, bool):
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def in_range(n, options):
    """ Test that the number is within the `min` and `max` bounds given in options, inclusive.

    :type n: float
    :param options: Bounds mapping or None
    :rtype: bool
    """
    if not isinstance(options, Mapping):
        return True
    lo = get_number(options.get('min'))
    hi = get_number(options.get('max'))
    if lo is not None and n < lo:
        return False
    if hi is not None and n > hi:
        return False
    return True
