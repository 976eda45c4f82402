# filmgraph/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class FilmgraphError(Exception):
    """Base for every failure the core reports to its callers."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FilmgraphError, LookupError):
    kind = "not_found"


class DuplicateConflictError(FilmgraphError):
    kind = "duplicate"


class InvalidArgumentError(FilmgraphError, ValueError):
    kind = "invalid_argument"

    def __init__(self, message: str, violations: Optional[Iterable[Violation]] = None) -> None:
        super().__init__(message)
        self.violations: List[Violation] = list(violations or [])

    @classmethod
    def from_violations(cls, violations: Iterable[Violation]) -> "InvalidArgumentError":
        items = list(violations)
        return cls("; ".join(str(v) for v in items) or "invalid argument", items)
