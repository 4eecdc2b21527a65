from slang import EvaluatorFn
from slang import SExpression
from slang.errors import SlangNotImplementedError
from slang.types.frame import FrameStack


def arrow_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    # reserved for type annotations
    raise SlangNotImplementedError("arrow (->) is reserved and not implemented yet")


def external_form(
    tail: tuple[SExpression, ...],
    stack: FrameStack,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    # reserved for foreign bindings
    raise SlangNotImplementedError("external (ε) is reserved and not implemented yet")
