"""
  Slang tokenizer and literal classifier

- Scans one character at a time into a buffer
- Whitespace and parentheses flush the buffer, except that whitespace inside a
  double-quoted run is kept
- A flushed buffer is classified, in order, as:

    - special form  -> ("keyword", SpecialForm)
    - number        -> ("literal", float)
    - string        -> ("literal", str)   quotes stripped, escapes kept verbatim
    - nil           -> ("literal", Nil)   spelled Φ or nil
    - identifier    -> ("identifier", str)

- Every token carries the Position of its first character
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from slang import SExpression
from slang.errors import SlangLexError
from slang.types.nil import Nil
from slang.types.position import Position
from slang.types.special_form import SpecialForm

NIL_SPELLINGS = frozenset({"Φ", "nil"})


class Token(NamedTuple):
    kind: str
    value: SExpression
    position: Position

    def __str__(self) -> str:
        if self.kind == "literal":
            from slang.printer import render
            return render(self.value)
        return str(self.value)


def read_number(text: str) -> Optional[float]:
    # float() would also take digit separators and non-ASCII digits
    if not text.isascii() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def read_string(text: str) -> Optional[str]:
    """Return the interior of a double-quoted literal, or None.

    Backslash escapes are allowed anywhere inside, but no unescaped interior
    quote and no backslash escaping the closing quote.
    """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return None
    last = len(text) - 1
    i = 1
    while i < last:
        c = text[i]
        if c == '"':
            return None
        if c == "\\":
            if i + 1 >= last:
                return None
            i += 2
            continue
        i += 1
    return text[1:-1]


def classify(text: str, position: Position) -> Optional[Token]:
    """Classify a flushed buffer. Empty buffers yield no token."""
    if not text:
        return None

    form = SpecialForm.from_spelling(text)
    if form is not None:
        return Token("keyword", form, position)

    number = read_number(text)
    if number is not None:
        return Token("literal", number, position)

    string = read_string(text)
    if string is not None:
        return Token("literal", string, position)

    if text in NIL_SPELLINGS:
        return Token("literal", Nil, position)

    if '"' not in text:
        return Token("identifier", text, position)

    raise SlangLexError(f"Cannot tokenize '{text}' at {position}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens in source order."""
    buffer: list[str] = []
    start = Position()
    position = Position()
    in_string = False
    escaped = False

    def flush() -> Optional[Token]:
        nonlocal in_string, escaped
        token = classify("".join(buffer), start)
        buffer.clear()
        in_string = escaped = False
        return token

    for c in source:
        if c.isspace() and not in_string:
            if (token := flush()) is not None:
                yield token
        elif c in "()":
            if (token := flush()) is not None:
                yield token
            yield Token("lparen" if c == "(" else "rparen", c, position)
        else:
            if c == '"' and not escaped:
                in_string = not in_string
            escaped = in_string and c == "\\" and not escaped
            if not buffer:
                start = position
            buffer.append(c)

        position = position.next_row() if c == "\n" else position.next_col()

    if (token := flush()) is not None:
        yield token
