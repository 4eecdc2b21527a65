"""Variable references.

A Symbol is the AST leaf for a free-form identifier. It is the key type of
every binding Frame and the name `replace_free` rewrites, so equality and
hashing go through the interned name only.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        # interned, so identity of the names is enough
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo) -> Symbol:
        return self

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
