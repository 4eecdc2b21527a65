"""
  Slang parser

Recursive descent over the token stream with an explicit cursor. Grammar:

    atom       := special-form | literal | identifier
    expression := '(' operator operand* ')'
    operator   := identifier | special-form | expression

- When the first token after '(' cannot start an operator (a literal, or ')'),
  the contents are read as plain operands and headed by ι, so `(1 2)` reads
  as `(ι 1 2)`.
- Curry flattening: an operator that is itself an application donates its
  operator and operands, so `((f a) b)` reads exactly like `(f a b)`.
- An empty token stream reads as Nil.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from slang import SExpression
from slang.errors import SlangSyntaxError
from slang.reader.lexer import Token, lex
from slang.types.application import Application
from slang.types.nil import Nil
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol

logger = logging.getLogger(__name__)

Source = Union[str, Iterable[Token]]


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.cursor = 0

    def peek(self) -> Optional[Token]:
        if self.cursor < len(self.tokens):
            return self.tokens[self.cursor]
        return None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise SlangSyntaxError("Unexpected end of input")
        self.cursor += 1
        return token

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        token = self.peek()
        if token is None:
            raise SlangSyntaxError("Unexpected end of input")

        match token.kind:
            case "keyword" | "literal":
                self.advance()
                return token.value
            case "identifier":
                self.advance()
                return Symbol(token.value)
            case "lparen":
                return self.parse_expression()

        raise SlangSyntaxError(f"Unexpected token '{token}' at {token.position}")

    def parse_expression(self) -> SExpression:
        opening = self.advance()
        token = self.peek()
        if token is None:
            raise SlangSyntaxError(f"Unexpected end of input after '(' at {opening.position}")

        match token.kind:
            case "identifier":
                self.advance()
                operator = Symbol(token.value)
            case "keyword":
                self.advance()
                operator = token.value
            case "lparen":
                operator = self.parse_expression()
            case _:
                # No operator: bare juxtaposition headed by ι
                operands = self.parse_list(opening)
                if not operands:
                    raise SlangSyntaxError(f"Cannot parse an operator from '{token}' at {token.position}")
                return Application.of(SpecialForm.ID, operands)

        node = Application.of(operator, self.parse_list(opening))
        return node.flattened()

    def parse_list(self, opening: Token) -> list[SExpression]:
        """Parse operands up to and including the closing ')'."""
        items = []
        while True:
            token = self.peek()
            if token is None:
                raise SlangSyntaxError(
                    f"Unexpected end of input: '(' at {opening.position} is never closed"
                )
            if token.kind == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def _tokens(source: Source) -> list[Token]:
    return list(lex(source)) if isinstance(source, str) else list(source)


def parse(source: Source) -> SExpression:
    """Parse exactly one expression. An empty source reads as Nil."""
    stream = TokenStream(_tokens(source))
    if stream.at_end():
        return Nil
    expr = stream.parse_expr()
    trailing = stream.peek()
    if trailing is not None:
        raise SlangSyntaxError(
            f"Unexpected token '{trailing}' at {trailing.position} after the end of the expression"
        )
    logger.debug("parsed: %s", expr)
    return expr


def parse_all(source: Source) -> Iterator[SExpression]:
    """Parse every top-level expression in order."""
    yield from TokenStream(_tokens(source)).parse_all()
