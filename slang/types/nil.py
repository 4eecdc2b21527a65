from __future__ import annotations


class NilType:
    """The Nil literal. Equal only to itself."""
    __slots__ = ()

    def __repr__(self): return "Φ"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Nil = NilType()
