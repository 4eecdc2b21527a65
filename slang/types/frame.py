"""Binding frames and the frame stack.

The frame stack is the evaluator's only mutable state. Each frame maps names
to already-reduced values; the last frame is the innermost scope. Lookup
resolves to the innermost frame that binds the name.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from slang import SExpression
from slang.errors import SlangUnboundSymbol
from slang.types.symbol import Symbol

_MISSING = object()


class Frame:
    """One scope's mapping from Symbols to values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[Symbol, SExpression]] = None):
        self.vars: dict[Symbol, SExpression] = dict(bindings or {})

    def define(self, name: Symbol, value: SExpression) -> None:
        """Bind `name` to `value`, overwriting an existing binding."""
        self.vars[name] = value

    def lookup(self, name: Symbol, default: SExpression = None) -> SExpression:
        return self.vars.get(name, default)

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Frame {self}>"


class FrameStack:
    """Ordered frames, innermost last."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[Frame] = []

    def __len__(self) -> int:
        return len(self.frames)

    def push(self, frame: Frame) -> None:
        self.frames.append(frame)

    def pop(self) -> Frame:
        return self.frames.pop()

    def find(self, name: Symbol) -> Optional[Frame]:
        """Find the innermost frame that binds `name`."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame
        return None

    def lookup(self, name: Symbol) -> SExpression:
        """Look up the value bound to `name`.

        Raises SlangUnboundSymbol if no frame binds it.
        """
        frame = self.find(name)
        if frame is None:
            raise SlangUnboundSymbol(f"Variable '{name}' is not defined")
        return frame.vars[name]

    @contextmanager
    def scope(self, name: Symbol, value: SExpression) -> Iterator[Frame]:
        """Push a fresh frame binding `name` for the duration of the block."""
        frame = Frame({name: value})
        self.push(frame)
        try:
            yield frame
        finally:
            self.pop()

    @contextmanager
    def merged(self, name: Symbol, value: SExpression) -> Iterator[Frame]:
        """Bind `name` in the innermost frame for the duration of the block.

        A frame is created if the stack is empty. On exit the innermost frame
        is restored: a shadowed value comes back, a new key is removed, and a
        frame created here is popped.
        """
        created = not self.frames
        if created:
            self.push(Frame())
        frame = self.frames[-1]
        previous = frame.vars.get(name, _MISSING)
        frame.define(name, value)
        try:
            yield frame
        finally:
            if created:
                self.pop()
            elif previous is _MISSING:
                frame.vars.pop(name, None)
            else:
                frame.vars[name] = previous

    def __str__(self) -> str:
        return " -> ".join(str(frame) for frame in self.frames) or "{}"

    def __repr__(self) -> str:
        return f"<FrameStack {self}>"
