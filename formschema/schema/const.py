
class UNKNOWN:
    """ Behavior constants for validation rules that have no predicate in the library """

    #: The rule cannot be evaluated: let the value pass
    PASS = 0

    #: The rule cannot be evaluated: report the field as invalid
    FAIL = 1


#: Keys supported in a field definition
FIELD_KEYS = frozenset(('label', 'required', 'type', 'validate', 'error'))
