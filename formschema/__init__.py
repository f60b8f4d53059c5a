""" Declarative form validation.

Core features:

* Forms are defined with plain dictionaries
* Conditional requirements based on other values
* Multiple validation rules per field, custom rules with plain functions
* User-friendly error messages, with per-field overrides
* Internationalization!
* A pure function from values to errors: easy to plug into any form handling

```python
from formschema import build

form = build({
    'score': {
        'label': 'Score',
        'type': 'numeric',
        'validate': {'int': {'min': 0, 'max': 100}},
    },
})

form.validate({'score': '101'})  #-> {'score': ['Score should be between 0 and 100']}
```
"""
# Core

from .schema.errors import SchemaError, Invalid
from .schema.const import UNKNOWN

from .schema import Form, build

from .schema import markers
from .schema.markers import *

# Messages
from .messages import synthesize

# Predicates
from . import predicates
from .predicates import PredicateLibrary
