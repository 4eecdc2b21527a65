"""Free-variable replacement.

`replace_free` is a pure rewrite: it never mutates its input and shares
unchanged subtrees, which is safe because nodes are immutable. It stops at
Def, Lambda and External forms that bind the same name.
"""

from __future__ import annotations

from slang import SExpression
from slang.types.application import Application
from slang.types.special_form import BINDERS, SpecialForm
from slang.types.symbol import Symbol


def replace_free(name: Symbol, value: SExpression, expr: SExpression) -> SExpression:
    match expr:
        case Symbol() if expr == name:
            return value

        case Application(operator=Symbol() as operator, operands=operands) if operator == name:
            return Application(value, _replace_all(name, value, operands))

        case Application(operator=operator, operands=(Symbol() as bound, *_)) if (
            isinstance(operator, SpecialForm) and operator in BINDERS and bound == name
        ):
            # shadowed by the binder
            return expr

        case Application(operator=operator, operands=operands):
            return Application(operator, _replace_all(name, value, operands))

    return expr


def _replace_all(name: Symbol, value: SExpression, operands: tuple) -> tuple:
    return tuple(replace_free(name, value, operand) for operand in operands)
