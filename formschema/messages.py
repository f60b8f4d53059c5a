""" Human-readable error messages for failed rules.

Every message starts with the field label:

```python
from formschema import synthesize

synthesize('required', 'Name')  #-> 'Name is Required'
synthesize('int', 'Age', {'min': 18, 'max': 65})  #-> 'Age should be between 18 and 65'
synthesize('in', 'Color', ['red', 'green', 'blue'])  #-> 'Color should be one of red, green, blue'
synthesize('whatever', 'Name')  #-> 'Name is Invalid'
```

Messages are translatable: install a gettext catalog for the 'formschema' domain.
"""

from .predicates.numbers import is_int_text
from .schema.util import _, get_text, get_literal_name, get_option, is_collection, commajoin_as_strings


def _bounds(options):
    """ Get (min, max) from options: bounds that are not integers are `None` """
    bounds = []
    for key in ('min', 'max'):
        v = get_option(options, key)
        bounds.append(v if is_int_text(get_text(v)) else None)
    return tuple(bounds)


def _in(label, rule_id, options):
    if not is_collection(options):
        return _default(label, rule_id, options)
    return _('{label} should be one of {values}').format(label=label, values=commajoin_as_strings(options))


def _int(label, rule_id, options):
    min, max = _bounds(options)
    if min is not None and max is not None:
        return _('{label} should be between {min} and {max}').format(label=label, min=min, max=max)
    if min is not None:
        return _('{label} should be at least {min}').format(label=label, min=min)
    if max is not None:
        return _('{label} should be at most {max}').format(label=label, max=max)
    return _('{label} should be an Number').format(label=label)


def _when(label, rule_id, options):
    if options:
        return _('{label} should be {rule} {date}').format(label=label, rule=rule_id, date=get_literal_name(options))
    return _('{label} should be {rule} Current Time').format(label=label, rule=rule_id)


def _length(label, rule_id, options):
    min, max = _bounds(options)
    if min is not None and max is not None:
        return _('{label} should be a minimum of {min} and a maximum of {max} characters').format(
            label=label, min=min, max=max)
    if min is not None:
        return _('{label} should be a minimum of {min} characters').format(label=label, min=min)
    if max is not None:
        return _('{label} should be a maximum of {max} characters').format(label=label, max=max)
    return _('{label} is an Invalid length').format(label=label)


def _default(label, rule_id, options):
    return _('{label} is Invalid').format(label=label)


def _simple(message):
    """ Message factory for rules which don't care about options """
    def formatter(label, rule_id, options):
        return _(message).format(label=label)
    return formatter


#: Message formatters: rule id -> formatter(label, rule_id, options)
formatters = {
    'required': _simple('{label} is Required'),
    'email':    _simple('{label} should be a valid Email Address'),
    'in':       _in,
    'numeric':  _simple('{label} should only contain numbers'),
    'int':      _int,
    'date':     _simple('{label} should be a Date'),
    'before':   _when,
    'after':    _when,
    'length':   _length,
    'URL':      _simple('{label} should be a valid URL'),
}


def synthesize(rule_id, label, options=None):
    """ Generate the error message for a failed rule.

    This function never fails: unknown rules, as well as unusable options, get a generic message.

    :param rule_id: Rule id, e.g. 'email', 'length'
    :type rule_id: str
    :param label: Field label
    :type label: str
    :param options: Rule options, if any
    :rtype: str
    """
    return formatters.get(rule_id, _default)(label, rule_id, options)


__all__ = ('synthesize',)
