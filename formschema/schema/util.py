""" Misc utilities """

import gettext
from collections.abc import Iterable, Mapping

#: Message translation function.
#: Applications install a catalog for the 'formschema' domain to translate the messages.
_ = gettext.translation('formschema', fallback=True).gettext


class Undefined(object):
    """ Special singleton object to represent the case when no value was provided.

    This value is never equal to anything and always returns False for any attempts to typecheck it:
    this makes sure it will never match any condition.
    """

    _instance = None

    def __new__(cls):
        # Singleton
        if cls._instance is None:
            cls._instance = super(Undefined, cls).__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return False

    def __hash__(self):
        return id(self)

    def __bool__(self):
        return False

    def __repr__(self):
        return '<Undefined>'


class const:
    """ Misc constants """

    #: Undefined singleton
    UNDEFINED = Undefined()

    #: Textual form of booleans, as submitted by HTML forms
    bool_text = {True: 'true', False: 'false'}


def get_text(v):
    """ Get the textual form of a submitted value.

    This is what all predicates operate on, and what decides whether a value is present:

    ```python
    get_text('abc')  #-> 'abc'
    get_text(0)  #-> '0'
    get_text(78.0)  #-> '78'
    get_text(False)  #-> 'false'
    get_text(None)  #-> ''
    ```

    :param v: Value
    :type v: *
    :rtype: str
    """
    if v is None or v is const.UNDEFINED:
        return ''
    if isinstance(v, bool):
        return const.bool_text[v]
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def is_present(v):
    """ Test whether a value was actually provided.

    A value is present when its textual form is not empty.
    Note that this is not a truthiness check: `0`, `False` and `'0'` are all present values.

    :param v: Value
    :type v: *
    :rtype: bool
    """
    return len(get_text(v)) > 0


def get_literal_name(v):
    """ Get a human-friendly name for the given literal.

    :param v: Value
    :type v: *
    :rtype: str
    """
    return str(v)


def is_collection(v):
    """ Test whether the value is a collection of values (but not a string or a mapping).

    :rtype: bool
    """
    return isinstance(v, Iterable) and not isinstance(v, (str, bytes, Mapping))


def commajoin_as_strings(iterable):
    """ Join the given iterable with ', ' """
    return _(', ').join(map(get_literal_name, iterable))


def get_option(options, key):
    """ Get a named option from a rule options value.

    Options which are not a mapping have no named options at all.

    :param options: Rule options
    :type options: *
    :param key: Option name
    :type key: str
    :return: Option value, or `const.UNDEFINED`
    """
    if isinstance(options, Mapping):
        return options.get(key, const.UNDEFINED)
    return const.UNDEFINED
