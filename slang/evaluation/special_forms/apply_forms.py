from slang import EvaluatorFn
from slang import SExpression
from slang.types.application import Application
from slang.types.frame import FrameStack
from slang.types.nil import Nil
from slang.types.special_form import SpecialForm


def _apply(
    operator_expr: SExpression,
    operands: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    operator = evaluate_fn(operator_expr, stack)
    return evaluate_fn(Application(operator, operands), stack)


def id_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """
    (ι)        itself
    (ι x)      x
    (ι f a ..) f applied to a ...
    """
    if not tail:
        return Application(SpecialForm.ID)
    if len(tail) == 1:
        return evaluate_fn(tail[0], stack)
    return _apply(tail[0], tail[1:], stack, evaluate_fn)


def ignore_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """
    (_)          the placeholder itself
    (_ x), (_ x y)  Nil
    (_ x f a ..) f applied to a ..., x is never evaluated
    """
    if not tail:
        return SpecialForm.IGNORE
    if len(tail) <= 2:
        return Nil
    return _apply(tail[1], tail[2:], stack, evaluate_fn)


def nil_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    return Nil
