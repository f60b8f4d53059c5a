from .compiler import CompiledForm
from .const import UNKNOWN
from .errors import Invalid
from ..predicates import library


class Form(object):
    """ Validation form.

    A form is defined by a schema: a mapping of field names to field definitions.
    Each definition describes how the field is validated:

    ```python
    from formschema import Form

    form = Form({
        'name': {
            'label': 'Name',
            'required': True,
            'validate': {'length': {'min': 0, 'max': 20}},
        },
        'email': {
            'label': 'Email',
            'type': 'email',
            'error': 'You must enter an email address for your account',
        },
    })

    form.fields  #-> ['name', 'email']
    form.validate({'name': 'Alex', 'email': 'alex@example.com'})  #-> {}
    form.validate({'email': 'example.com'})
    #-> {'name': ['Name is Required'], 'email': ['You must enter an email address for your account']}
    ```

    The following keys are supported in a field definition:

    1. **`label`**: field name for the user. It starts every generated message.
        Defaults to the field name.

    2. **`required`**: whether the field must have a value.

        * `True`: always required;
        * `False` (default): never required;
        * a callable: required when `callable(values)` returns a present value.
            This allows conditional requirements based on other values in the form:

            ```python
            {'required': lambda values: values.get('street-address')}
            ```

        A value is missing when it was not provided, is `None`, or is an empty string.
        Note that `0`, `'0'` and `False` are valid values!

    3. **`type`**: id of a predicate the value should satisfy, e.g. 'email', 'numeric', 'date'.

    4. **`validate`**: mapping of additional rules, checked in order. Keys are predicate ids, values are their options:

        ```python
        {'validate': {
            'int': {'min': 0, 'max': 100},  # bounds
            'in': ['red', 'green', 'blue'],  # allowed values
            'before': '2000-01-01',  # a date to compare with
            'validCity': lambda values, v: v in CITIES,  # custom predicate
        }}
        ```

        A callable is a custom predicate: it receives the whole submission and the field value,
        and its result decides on its own.

    5. **`error`**: custom error message. When given, it replaces every generated message for the field.

    Empty values are only checked for requirement: `type` and `validate` are skipped.

    A field can report multiple errors: requirement, type, and every failed rule, in this order.

    ## Predicates

    Rule ids are resolved against a [`PredicateLibrary`](#predicatelibrary): 'email' uses `isEmail`,
    'creditCard' uses `isCreditCard`, and so on. Use the `predicates` argument to provide your own library.

    A rule id that has no predicate cannot be evaluated: a warning is logged, and the behavior depends on
    `unknown_rules`. An unknown `type` always fails the field.
    """

    compiled_form_cls = CompiledForm

    def __init__(self, schema, predicates=None, unknown_rules=UNKNOWN.PASS):
        """ Creates a compiled `Form` object from the given schema definition.

        :param schema: Schema definition: a mapping of field names to field definitions
        :type schema: Mapping
        :param predicates: Predicate library to resolve rule ids with.

            Defaults to the built-in library: `formschema.predicates.library`

        :type predicates: formschema.predicates.PredicateLibrary|None
        :param unknown_rules: Behavior for `validate` rules that have no predicate in the library:

            * `UNKNOWN.PASS` (default): the rule is skipped
            * `UNKNOWN.FAIL`: the field is reported as invalid

        :type unknown_rules: int
        :raises SchemaError: Schema compilation error
        """
        self.compiled = self.compiled_form_cls(
            schema,
            library if predicates is None else predicates,
            unknown_rules)
        self.fields = self.compiled.fields

    def __repr__(self):
        return repr(self.compiled)

    def validate(self, values):
        """ Having a [`Form`](#form), user input can be validated by calling `validate()` on the input values.

        The input is never modified. If there's no input at all (`None`), there are no errors.

        :param values: Field values
        :type values: Mapping|None
        :return: Error map: field names mapped to lists of messages. Only invalid fields are included.
        :rtype: dict[str, list[str]]
        """
        return self.compiled(values)

    __call__ = validate

    def check(self, values):
        """ Validate the input and raise errors.

        :param values: Field values
        :type values: Mapping|None
        :return: The same values
        :raises formschema.Invalid: Validation errors. See [`Invalid`](#invalid).
        """
        errors = self.compiled(values)
        if errors:
            raise Invalid(errors)
        return values


def build(schema, **kwargs):
    """ Build a [`Form`](#form) from the schema.

    ```python
    from formschema import build

    form = build(schema)
    form.fields  # Field names, for the UI
    form.validate  # Validation function: values -> errors
    ```

    :param schema: Schema definition
    :type schema: Mapping
    :param kwargs: Form options: `predicates`, `unknown_rules`
    :rtype: Form
    :raises SchemaError: Schema compilation error
    """
    return Form(schema, **kwargs)
