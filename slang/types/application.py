from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from slang import SExpression


@dataclass(frozen=True)
class Application:
    """An operator applied to an ordered tuple of operands.

    Nodes are immutable: rewriting always builds a new Application.
    """
    operator: SExpression
    operands: tuple[SExpression, ...] = ()

    @classmethod
    def of(cls, operator: SExpression, operands: Iterable[SExpression]) -> Application:
        return cls(operator, tuple(operands))

    def flattened(self) -> Application:
        """Splice a nested operator's operands in front of ours.

        ((f a) b) becomes (f a b). Applied repeatedly until the operator is
        no longer an application.
        """
        node = self
        while isinstance(node.operator, Application):
            inner = node.operator
            node = Application(inner.operator, inner.operands + node.operands)
        return node

    def __str__(self) -> str:
        from slang.printer import render
        return render(self)
