""" Compiled validation rules.

A rule is either:

* [`Named`](#named): a rule id resolved to a predicate from the library, called with the rule options;
* [`Custom`](#custom): a callable given right in the schema, which decides on its own.

The distinction is made once, when the form is built.
"""

from ..predicates import call_predicate


class Rule(object):
    """ Base for compiled rules

    :param rule_id: Rule id: the key in the `validate` mapping, or the field `type`
    :type rule_id: str
    :param options: Rule options
    """

    def __init__(self, rule_id, options=None):
        self.rule_id = rule_id
        self.options = options

    def __call__(self, values, v):
        """ Test the value

        :param values: The whole submission
        :type values: Mapping
        :param v: Field value
        :return: Validity: `True`, `False`, or `None` if the rule cannot be evaluated
        :rtype: bool|None
        """
        raise NotImplementedError

    def __repr__(self):
        return '{cls}({0.rule_id!r}, {0.options!r})'.format(self, cls=type(self).__name__)


class Named(Rule):
    """ Rule backed by a predicate from the library.

    :param predicate: The predicate, or `None` if the library has no predicate for the rule id
    :type predicate: callable|None
    """

    def __init__(self, rule_id, options=None, predicate=None):
        super(Named, self).__init__(rule_id, options)
        self.predicate = predicate

    def __call__(self, values, v):
        if self.predicate is None:
            return None
        return call_predicate(self.predicate, self.rule_id, v, self.options)


class Custom(Rule):
    """ Rule backed by a custom callable: `func(values, v)`.

    The truthiness of the returned value is the result.
    Errors are not caught: they propagate to the caller.

    :param func: The callable
    :type func: callable
    """

    def __init__(self, rule_id, func):
        super(Custom, self).__init__(rule_id)
        self.func = func

    def __call__(self, values, v):
        return bool(self.func(values, v))
