from __future__ import annotations

import logging
from pathlib import Path

from slang import SExpression
from slang.config import get_load_roots
from slang.errors import SlangLoadError
from slang.evaluation.evaluator import evaluate
from slang.reader.lexer import lex
from slang.reader.parser import TokenStream
from slang.types.frame import FrameStack
from slang.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Slang source text.
    Keeps one frame stack across calls.
    """

    def __init__(self):
        self.stack = FrameStack()

    def reset(self) -> None:
        """Drop every frame, e.g. after an evaluation was cut short."""
        self.stack = FrameStack()

    def eval_expr(self, expr: SExpression) -> SExpression:
        """Evaluate one parsed expression."""
        result = evaluate(expr, self.stack)
        logger.debug("evaluated: %s", result)
        return result

    def eval(self, code: str) -> SExpression:
        """Evaluate every expression in `code`, returning the last result.

        Empty input evaluates to Nil.
        """
        stream = TokenStream(lex(code))
        result: SExpression = Nil
        for expr in stream.parse_all():
            logger.debug("parsed: %s", expr)
            result = self.eval_expr(expr)
        return result

    def load(self, path: str | Path) -> SExpression:
        """Evaluate the contents of a source file."""
        resolved = resolve_path(path)
        logger.debug("loading %s", resolved)
        return self.eval(resolved.read_text(encoding="utf-8"))


def resolve_path(path: str | Path) -> Path:
    """Resolve `path` against the current directory, then SLANG_PATH."""
    path = Path(path).expanduser()
    if path.is_absolute():
        candidates = [path]
    else:
        candidates = [root / path for root in get_load_roots()]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise SlangLoadError(f"Cannot load '{path}': no such file")
