"""The closed set of special forms and their surface spellings."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class SpecialForm(Enum):
    # value is the canonical symbolic spelling
    DEF = "δ"
    LAMBDA = "λ"
    ARROW = "->"
    EXTERNAL = "ε"
    ID = "ι"
    IGNORE = "_"
    NIL = "Ω"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_spelling(cls, text: str) -> Optional[SpecialForm]:
        return SPELLINGS.get(text)


# ASCII aliases; Arrow and Ignore have none
ALIASES: dict[str, SpecialForm] = {
    "def": SpecialForm.DEF,
    "external": SpecialForm.EXTERNAL,
    "lambda": SpecialForm.LAMBDA,
    "id": SpecialForm.ID,
    "nih": SpecialForm.NIL,
}

SPELLINGS: dict[str, SpecialForm] = {
    **{form.value: form for form in SpecialForm},
    **ALIASES,
}

# Forms whose first operand binds a name; substitution never crosses them
BINDERS = frozenset({SpecialForm.DEF, SpecialForm.LAMBDA, SpecialForm.EXTERNAL})
