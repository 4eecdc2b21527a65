from contextlib import contextmanager
from typing import Callable, Iterator

from slang import EvaluatorFn
from slang import SExpression
from slang.errors import SlangArityError, SlangPatternError, SlangTypeError
from slang.evaluation.substitution import replace_free
from slang.printer import render
from slang.types.application import Application
from slang.types.frame import FrameStack
from slang.types.nil import NilType
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol


def is_literal(expr: SExpression) -> bool:
    return isinstance(expr, (float, int, str, NilType)) and not isinstance(expr, bool)


def _same_literal(expected: SExpression, actual: SExpression) -> bool:
    # exact float equality; a number never matches text
    if isinstance(expected, str) or isinstance(actual, str):
        return isinstance(expected, str) and isinstance(actual, str) and expected == actual
    return is_literal(actual) and expected == actual


@contextmanager
def bound_parameter(
    param: SExpression,
    arg: SExpression,
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> Iterator[Callable[[SExpression], SExpression]]:
    """Bind one lambda parameter to its argument for the duration of the block.

    Yields a function that prepares the body for reduction. A Symbol parameter
    is bound in a fresh frame and substituted into the body; a literal
    parameter is a guard the argument must equal; `_` discards the argument.
    """
    match param:
        case Symbol():
            value = evaluate_fn(arg, stack)
            with stack.scope(param, value):
                yield lambda body: replace_free(param, value, body)
        case SpecialForm.IGNORE:
            evaluate_fn(arg, stack)
            yield lambda body: body
        case _ if is_literal(param):
            actual = evaluate_fn(arg, stack)
            if not _same_literal(param, actual):
                raise SlangPatternError(
                    f"lambda (λ) expected '{render(param)}' but received '{render(actual)}'",
                    expected=param,
                    actual=actual,
                )
            yield lambda body: body
        case _:
            raise SlangTypeError(f"Invalid lambda (λ) argument: '{render(param)}'")


def lambda_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """
    (λ param body)            a function value, returned as is
    (λ param body arg)        application
    (λ param body arg a b ..) apply, then apply the result to a b ...
    """
    if len(tail) < 2:
        raise SlangArityError(
            f"lambda (λ): 2 or more arguments expected, {len(tail)} provided. Example usage: (λ x x 5)"
        )

    if len(tail) == 2:
        return Application(SpecialForm.LAMBDA, tail)

    param, body, arg, *rest = tail

    with bound_parameter(param, arg, stack, evaluate_fn) as prepare:
        result = evaluate_fn(prepare(body), stack)

    if not rest:
        return result

    # The parameter is out of scope again before the remaining arguments are seen
    return evaluate_fn(Application(result, tuple(rest)), stack)
