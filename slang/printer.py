"""Render expressions back to Slang source text."""

from __future__ import annotations

import math

from slang import SExpression
from slang.types.application import Application
from slang.types.nil import NilType
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol


def render_number(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render(expr: SExpression) -> str:
    match expr:
        case Application(operator=operator, operands=operands):
            parts = [render(operator), *(render(operand) for operand in operands)]
            return "(" + " ".join(parts) + ")"
        case Symbol():
            return expr.name
        case SpecialForm():
            return expr.value
        case NilType():
            return "Φ"
        case bool():
            raise TypeError(f"Cannot render {expr!r}")
        case float() | int():
            return render_number(float(expr))
        case str():
            # escapes are stored verbatim, so the text re-reads as written
            return f'"{expr}"'
    raise TypeError(f"Cannot render {expr!r}")
