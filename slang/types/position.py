from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """1-based row/column of a token's first character."""
    row: int = 1
    col: int = 1

    def next_col(self) -> Position:
        return Position(self.row, self.col + 1)

    def next_row(self) -> Position:
        return Position(self.row + 1, 1)

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"
