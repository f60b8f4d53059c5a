""" The predicate library: named boolean checks the form calls by rule id.

Rule ids map to predicates by name: 'email' uses `isEmail`, 'creditCard' uses `isCreditCard`.
See [`PredicateLibrary`](#predicatelibrary) to add your own.
"""

from .registry import PredicateLibrary, predicate_key, call_predicate, library

# Populate the default library
from .strings import *
from .numbers import *
from .values import *
from .dates import *
