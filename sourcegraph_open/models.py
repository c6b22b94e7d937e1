"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Settings read once per invocation and passed explicitly."""

    base_url: str
    git_executable: str = "git"


@dataclass(frozen=True)
class Region:
    """A selection as 0-based line and column numbers."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def __post_init__(self) -> None:
        if min(self.start_line, self.start_col, self.end_line, self.end_col) < 0:
            raise ValueError("Region coordinates must be non-negative.")
        if self.start_line > self.end_line:
            raise ValueError("Region start line must not be after its end line.")

    @classmethod
    def point(cls, line: int, col: int) -> "Region":
        return cls(line, col, line, col)
