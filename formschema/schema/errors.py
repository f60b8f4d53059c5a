"""
Source: [formschema/schema/errors.py](formschema/schema/errors.py)

Validating a submission never raises: [`Form.validate()`](#formvalidate) returns a mapping of errors instead.
Exceptions are only used for two cases:

* The schema definition itself is malformed: [`SchemaError`](#schemaerror) is raised when the form is built.
* The application prefers exceptions: [`Form.check()`](#formcheck) raises [`Invalid`](#invalid).

All errors are available right at the top-level:

```python
from formschema import SchemaError, Invalid
```
"""


class BaseError(Exception):
    """ Base validation exception """


class SchemaError(BaseError):
    """ Schema error (e.g. malformed)

    :param message: Error message
    :type message: str
    :param path: Path to the offending definition, e.g. ['email', 'validate']
    :type path: list
    """

    def __init__(self, message, path=None):
        super(SchemaError, self).__init__(message, path)
        self.message = message
        self.path = path or []

    def __str__(self):
        if not self.path:
            return self.message
        return '{message} @ {path}'.format(
            message=self.message,
            path=''.join('[{!r}]'.format(p) for p in self.path)
        )


class Invalid(BaseError):
    """ Validation error for a whole submission.

    This exception is guaranteed to contain text messages which are meaningful for the user.

    Iterating over it yields `(field, message)` pairs, in the order the fields were validated:

    ```python
    try:
        form.check(values)
    except Invalid as e:
        for field, message in e:
            print(field, message)
    ```

    :param errors: Error map: field name mapped to the list of messages
    :type errors: dict[str, list[str]]
    """

    def __init__(self, errors):
        assert errors, 'Errors map is empty'
        super(Invalid, self).__init__(errors)
        self.errors = errors

    def __iter__(self):
        for field, messages in self.errors.items():
            for message in messages:
                yield field, message

    def __repr__(self):
        return '{cls}({0.errors!r})'.format(self, cls=type(self).__name__)

    def __str__(self):
        return '; '.join('{}: {}'.format(field, message) for field, message in self)
