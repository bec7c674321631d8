"""
Domain entities for the in-memory knowledge base.
Frozen dataclasses; vectors are validated through the vector_math service.
"""

from dataclasses import dataclass, field
from typing import Sequence

from src.domain.errors import InvalidInputError
from src.domain.services.vector_math import as_vector


@dataclass(frozen=True)
class Document:
    """A passage of text paired with its precomputed embedding."""

    text: str
    vector: Sequence[float]

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise InvalidInputError("Document text must be a non-empty string")
        vector = tuple(float(x) for x in as_vector(self.vector))
        if not vector:
            raise InvalidInputError("Document vector must not be empty")
        object.__setattr__(self, "vector", vector)

    @property
    def dimension(self) -> int:
        return len(self.vector)


@dataclass(frozen=True)
class ScoredDocument:
    document: Document
    score: float


@dataclass(frozen=True)
class RagAnswer:
    summary: str
    references: list[str] = field(default_factory=list)
