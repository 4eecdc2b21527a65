from slang import EvaluatorFn
from slang import SExpression
from slang.errors import SlangArityError, SlangTypeError
from slang.evaluation.substitution import replace_free
from slang.printer import render
from slang.types.application import Application
from slang.types.frame import FrameStack
from slang.types.symbol import Symbol


def def_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """
    (δ name value body)
    (δ name value f a b ...)  binds name while reducing (f a b ...)
    """
    if len(tail) < 3:
        raise SlangArityError(
            f"def (δ): 3 arguments expected, {len(tail)} provided. Example usage: (δ x 5 (ι x))"
        )

    name = tail[0]
    if not isinstance(name, Symbol):
        raise SlangTypeError(f"def (δ): invalid variable name '{render(name)}'")

    value = evaluate_fn(tail[1], stack)

    if len(tail) == 3:
        with stack.scope(name, value):
            return evaluate_fn(replace_free(name, value, tail[2]), stack)

    # Curried: the binding joins the innermost frame, released when the call returns
    call = Application(
        replace_free(name, value, tail[2]),
        tuple(replace_free(name, value, operand) for operand in tail[3:]),
    )
    with stack.merged(name, value):
        return evaluate_fn(call, stack)
