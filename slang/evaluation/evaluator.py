"""Core evaluator for the Slang interpreter.

Reduces an expression until it reaches a value, dispatching on the node's
shape in a fixed priority order:

1. variable reference   resolve through the frame stack, then reduce the value
2. literal              returned as is
3. special-form head    handed to the form's handler
4. application head     curry-flattened and reduced again
5. variable head        the head is reduced and the application rebuilt

Substitution can reintroduce nested operators that the parser already
flattened away, which is why rule 4 exists.
"""

from __future__ import annotations

import logging

from slang import SExpression
from slang.errors import SlangTypeError
from slang.evaluation.special_forms import SPECIAL_FORMS
from slang.printer import render
from slang.types.application import Application
from slang.types.frame import FrameStack
from slang.types.nil import NilType
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, stack: FrameStack | None = None) -> SExpression:
    """Reduce `expr` to a value using (and restoring) `stack`."""
    if stack is None:
        stack = FrameStack()

    match expr:
        case Symbol():
            return evaluate(stack.lookup(expr), stack)

        case float() | int() | str() | NilType():
            return expr

        case Application(operator=SpecialForm() as form, operands=operands):
            logger.debug("special form %s with %d operand(s)", form, len(operands))
            return SPECIAL_FORMS[form](operands, stack, evaluate)

        case Application(operator=Application()):
            return evaluate(expr.flattened(), stack)

        case Application(operator=Symbol() as operator, operands=operands):
            head = evaluate(operator, stack)
            if isinstance(head, Application):
                return evaluate(Application(head.operator, head.operands + operands), stack)
            return evaluate(Application(head, operands), stack)

        case Application(operator=operator):
            raise SlangTypeError(f"Cannot apply '{render(operator)}': it is not a function")

        case SpecialForm():
            # a special form only means something at the head of an application
            raise SlangTypeError(f"Cannot evaluate special form '{expr}' outside an application")

    raise SlangTypeError(f"Cannot evaluate {expr!r}")
