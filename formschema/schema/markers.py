""" A *Marker* decides whether a field is required for a particular submission.

Normally, you don't have to use markers directly: the `required` key of a field definition is converted
to a marker when the form is built:

```python
from formschema import build

form = build({
    'name': {'label': 'Name', 'required': True},  # Always
    'nickname': {'label': 'Nickname'},  # Never
    'city': {
        'label': 'City',
        # Conditional: only required when a street address was entered
        'required': lambda values: values.get('street-address'),
    },
})
```

Markers can be used explicitly as well: `{'required': Conditional(has_address)}`.
"""

from .util import is_present, get_literal_name


class Marker(object):
    """ Requiredness marker.

    Once created, the marker is immutable and can be shared between forms and threads.
    """

    #: Human-readable marker representation
    name = None

    def is_active(self, values):
        """ Test whether the field is required for the given submission.

        :param values: The whole submission
        :type values: Mapping
        :rtype: bool
        """
        raise NotImplementedError

    def __repr__(self):
        return self.name


class _Always(Marker):
    """ The field is required in every submission """

    name = 'Always'

    def is_active(self, values):
        return True


class _Never(Marker):
    """ The field is never required """

    name = 'Never'

    def is_active(self, values):
        return False


class Conditional(Marker):
    """ The field is required when the callable says so.

    The callable receives the whole submission and should return a value:
    the field is required when the returned value is present and is not `False`.
    This way, a condition can simply return another field's value:

    ```python
    Conditional(lambda values: values.get('longitude'))
    ```

    Note that, just like submitted values, `0` is a present value: the field will be required.

    :param condition: Condition callable: `condition(values)`
    :type condition: callable
    """

    def __init__(self, condition):
        assert callable(condition), 'Conditional() requires a callable'
        self.condition = condition
        self.name = 'Conditional({})'.format(getattr(condition, '__name__', get_literal_name(condition)))

    def is_active(self, values):
        result = self.condition(values)
        return result is not False and is_present(result)


#: Marker singletons
Always = _Always()
Never = _Never()


def get_marker(required):
    """ Convert the `required` key of a field definition into a Marker.

    :param required: `True`, `False`, `None`, a callable, or a Marker
    :rtype: Marker|None
    :return: The marker, or `None` if the value is not supported
    """
    if isinstance(required, Marker):
        return required
    if required is True:
        return Always
    if required is None or required is False:
        return Never
    if callable(required):
        return Conditional(required)
    return None


__all__ = ('Marker', 'Always', 'Never', 'Conditional')
