from __future__ import annotations

from dataclasses import dataclass, field


class DNAMatrixError(Exception):
    """Base exception for DNA Matrix errors."""


class ValidationError(DNAMatrixError):
    """Raised when an uploaded match export cannot be accepted."""


@dataclass
class MissingHeadersError(ValidationError):
    """Raised when required columns are absent from the header line.

    Lists every missing column, in canonical column order.
    """

    missing: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Missing required headers: {', '.join(self.missing)}"


class SelectionError(DNAMatrixError):
    """Raised when a match selection or comparison request is invalid."""
