import logging
from collections.abc import Mapping

from . import markers
from .const import UNKNOWN, FIELD_KEYS
from .errors import SchemaError
from .rules import Named, Custom
from .util import _, const, is_present
from ..messages import synthesize

logger = logging.getLogger(__name__)


class CompiledField(object):
    """ A single compiled field.

    Converts a field definition into a callable which reports error messages for the field value.

    :param name: Field name
    :type name: str
    :param definition: Field definition
    :type definition: Mapping
    :param predicates: Predicate library to resolve rules with
    :type predicates: formschema.predicates.PredicateLibrary
    :param unknown_rules: Behavior for `validate` rules with no predicate: `UNKNOWN.*`
    :type unknown_rules: int
    :raises SchemaError: Malformed field definition
    """

    def __init__(self, name, definition, predicates, unknown_rules=UNKNOWN.PASS):
        self.name = name
        self.path = [name]
        self.predicates = predicates
        self.unknown_rules = unknown_rules

        # Compile
        self.definition = self.check_definition(definition)
        self.label = definition.get('label') or name
        self.error = definition.get('error')
        self.required = self.compile_required(definition.get('required'))
        self.type = self.compile_type(definition.get('type'))
        self.rules = self.compile_rules(definition.get('validate'))

    def __repr__(self):
        return '{cls}({0.name!r}, ' \
               'required={0.required!r}, ' \
               'type={0.type!r}, ' \
               'rules={0.rules!r})' \
            .format(self, cls=type(self).__name__)

    #region Compilation Procedure

    def SchemaError(self, message, *path):
        """ Helper for SchemaError with the path to this field """
        return SchemaError(message, self.path + list(path))

    def check_definition(self, definition):
        """ Make sure the field definition is sane """
        if not isinstance(definition, Mapping):
            raise self.SchemaError(_('Field definition must be a mapping, got {type}').format(
                type=type(definition).__name__))

        extra_keys = set(definition) - FIELD_KEYS
        if extra_keys:
            raise self.SchemaError(_('Unsupported field definition keys: {keys}').format(
                keys=', '.join(sorted(map(str, extra_keys)))))

        for key in ('label', 'error'):
            if definition.get(key) is not None and not isinstance(definition[key], str):
                raise self.SchemaError(_('Must be a string'), key)

        return definition

    def compile_required(self, required):
        """ Compile `required` into a Marker

        :rtype: formschema.schema.markers.Marker
        """
        marker = markers.get_marker(required)
        if marker is None:
            raise self.SchemaError(_('Must be a boolean or a callable'), 'required')
        return marker

    def compile_type(self, type_id):
        """ Compile `type` into a Named rule with no options

        :rtype: Named|None
        """
        if type_id is None:
            return None
        if not isinstance(type_id, str):
            raise self.SchemaError(_('Must be a rule id string'), 'type')
        return Named(type_id, None, self.predicates.lookup(type_id))

    def compile_rules(self, validate):
        """ Compile `validate` into a list of rules, in the declared order

        :rtype: list[Named|Custom]
        """
        if validate is None:
            return []
        if not isinstance(validate, Mapping):
            raise self.SchemaError(_('Must be a mapping of rule ids to options'), 'validate')

        rules = []
        for rule_id, options in validate.items():
            if not isinstance(rule_id, str):
                raise self.SchemaError(_('Rule id must be a string'), 'validate', rule_id)
            if callable(options):
                rules.append(Custom(rule_id, options))
            else:
                rules.append(Named(rule_id, options, self.predicates.lookup(rule_id)))
        return rules

    #endregion

    def message(self, rule_id, options=None):
        """ Get the error message: custom `error`, or a generated one """
        return self.error or synthesize(rule_id, self.label, options)

    def __call__(self, values):
        """ Validate the field value within the submission

        :param values: The whole submission
        :type values: Mapping
        :return: List of error messages, possibly empty
        :rtype: list[str]
        """
        errors = []
        v = values.get(self.name, const.UNDEFINED)
        present = is_present(v)

        # Required
        if not present and self.required.is_active(values):
            errors.append(self.message('required'))

        # Nothing else to check on an empty value
        if not present:
            return errors

        # Type
        if self.type is not None:
            valid = self.type(values, v)
            if valid is None:
                logger.warning('Missing predicate for type %r (field %r)', self.type.rule_id, self.name)
            if not valid:
                errors.append(self.message(self.type.rule_id))

        # Rules
        for rule in self.rules:
            valid = rule(values, v)
            if valid is None:
                logger.warning('Missing predicate for rule %r (field %r)', rule.rule_id, self.name)
                valid = self.unknown_rules == UNKNOWN.PASS
            if not valid:
                errors.append(self.message(rule.rule_id, rule.options))

        return errors


class CompiledForm(object):
    """ Form compiler.

    Compiles every field of the schema, and validates submissions with them.

    :param schema: Form schema: a mapping of field names to field definitions
    :type schema: Mapping
    :param predicates: Predicate library to resolve rules with
    :type predicates: formschema.predicates.PredicateLibrary
    :param unknown_rules: Behavior for `validate` rules with no predicate: `UNKNOWN.*`
    :type unknown_rules: int
    :raises SchemaError: Schema compilation error
    """

    compiled_field_cls = CompiledField

    def __init__(self, schema, predicates, unknown_rules=UNKNOWN.PASS):
        if not isinstance(schema, Mapping):
            raise SchemaError(_('Schema must be a mapping, got {type}').format(type=type(schema).__name__))
        assert unknown_rules in (UNKNOWN.PASS, UNKNOWN.FAIL), '`unknown_rules` must be an UNKNOWN constant'

        self.schema = schema
        self.compiled = [self.compiled_field_cls(name, definition, predicates, unknown_rules)
                         for name, definition in schema.items()]

    def __repr__(self):
        return '{cls}({fields})'.format(
            cls=type(self).__name__,
            fields=', '.join(repr(f) for f in self.compiled))

    @property
    def fields(self):
        """ Field names, in the schema order

        :rtype: list[str]
        """
        return [field.name for field in self.compiled]

    def __call__(self, values):
        """ Validate a submission

        :param values: Field values, or `None`
        :type values: Mapping|None
        :return: Error map: field names mapped to lists of messages. Valid fields are not included.
        :rtype: dict[str, list[str]]
        """
        errors = {}
        if values is None:
            return errors

        for field in self.compiled:
            messages = field(values)
            if messages:
                errors[field.name] = messages
        return errors
