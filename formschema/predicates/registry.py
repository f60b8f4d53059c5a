""" Predicate registry """

from collections.abc import Mapping


def predicate_key(rule_id):
    """ Get the registry key for a rule id.

    Predicates are registered under the 'is' prefix followed by the capitalized rule id:

    ```python
    predicate_key('email')  #-> 'isEmail'
    predicate_key('creditCard')  #-> 'isCreditCard'
    predicate_key('URL')  #-> 'isURL'
    ```

    :type rule_id: str
    :rtype: str
    """
    return 'is' + rule_id[:1].upper() + rule_id[1:]


class PredicateLibrary(Mapping):
    """ A collection of named boolean predicates.

    Each predicate is a callable `predicate(value, options)` that returns `True` when the value is valid.
    Predicates which accept no options are called with the value alone.

    The library is a read-only mapping of registry keys to predicates; use `register()` to add predicates:

    ```python
    from formschema import build, predicates

    library = predicates.library.copy()

    @library.predicate('isEven')
    def is_even(v, options=None):
        return int(v) % 2 == 0

    form = build({'n': {'label': 'N', 'validate': {'even': True}}}, predicates=library)
    ```

    :param predicates: Initial predicates, given as a mapping of registry keys to callables
    :type predicates: Mapping|None
    """

    def __init__(self, predicates=None):
        self._predicates = dict(predicates or {})
        self._lower = {k.lower(): k for k in self._predicates}

    def __getitem__(self, key):
        return self._predicates[key]

    def __iter__(self):
        return iter(self._predicates)

    def __len__(self):
        return len(self._predicates)

    def __repr__(self):
        return '{cls}({keys})'.format(cls=type(self).__name__, keys=', '.join(self._predicates))

    def register(self, key, func):
        """ Register a predicate.

        :param key: Registry key, e.g. 'isEmail'
        :type key: str
        :param func: The predicate
        :type func: callable
        :return: The predicate
        """
        assert callable(func), 'Predicate must be callable'
        self._predicates[key] = func
        self._lower[key.lower()] = key
        return func

    def predicate(self, key):
        """ Decorator that registers a predicate under the given key """
        def decorator(func):
            return self.register(key, func)
        return decorator

    def lookup(self, rule_id):
        """ Find the predicate for a rule id.

        The key is derived with `predicate_key()`; if there's no such key, a case-insensitive match is tried,
        so both 'url' and 'URL' find 'isURL'.

        :param rule_id: Rule id, e.g. 'email'
        :type rule_id: str
        :return: The predicate, or `None` if the library does not have it
        :rtype: callable|None
        """
        key = predicate_key(rule_id)
        try:
            return self._predicates[key]
        except KeyError:
            key = self._lower.get(key.lower())
            return self._predicates[key] if key is not None else None

    def copy(self):
        """ Get an independent copy of this library

        :rtype: PredicateLibrary
        """
        return type(self)(self._predicates)


#: Predicates whose options are unpacked into positional (min, max) arguments. Lowercase registry keys.
RANGE_ARGUMENTS = frozenset(('islength', 'isbytelength'))


def call_predicate(func, rule_id, value, options=None):
    """ Call a predicate with the value and rule options.

    `length` and `byteLength` are special: they accept `min` and `max` as two positional arguments,
    so their options mapping `{'min': 1, 'max': 10}` is unpacked.
    Rule ids are matched case-insensitively, just like `PredicateLibrary.lookup()` does.

    :param func: The predicate
    :type func: callable
    :param rule_id: Rule id the predicate was found for
    :type rule_id: str
    :param value: The value to test
    :param options: Rule options, if any
    :rtype: bool
    """
    if predicate_key(rule_id).lower() in RANGE_ARGUMENTS:
        options = options if isinstance(options, Mapping) else {}
        return bool(func(value, options.get('min'), options.get('max')))
    if options is None:
        return bool(func(value))
    return bool(func(value, options))


#: The default library. Populated by the `formschema.predicates` modules.
library = PredicateLibrary()
