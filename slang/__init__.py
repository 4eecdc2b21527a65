# Core type aliases for Slang's data model.
# Expressions are plain Python values wherever possible: numbers are floats,
# text literals are str, nil is the Nil singleton, variable references are
# Symbols and special forms are SpecialForm members. Only applications need
# their own node type.
#
# Naming guidance:
# - SExpression: any AST node, parsed or reduced. Reduction maps trees to trees,
#   so there is no separate runtime value alias.

from typing import Any, Callable

SExpression = Any

# Evaluator function type, passed to special-form handlers
EvaluatorFn = Callable[..., SExpression]
