"""
cover.rules
-----------

Expresses constraint intents in a CP-SAT model, by importing from:

- `hard`: Clique, star and odd cycle constraints that must hold.
- `soft`: Special star constraints that add weighted penalty terms.

Allows unified access to all rule definitions via wildcard imports.
"""
from .hard import *
from .soft import *
