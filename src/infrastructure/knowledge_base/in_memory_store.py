"""
Infrastructure adapter: Python list held in memory -> IKnowledgeStore.

Documents are supplied once at construction (by a loader, a fixture, or a
hardcoded demo list) and never mutated, so concurrent retrievals only read.
"""

import logging
from typing import Iterable, Optional, Sequence

from src.domain.entities.document import Document
from src.domain.errors import InvalidInputError
from src.domain.ports.knowledge_store_port import IKnowledgeStore

logger = logging.getLogger(__name__)


class InMemoryKnowledgeStore(IKnowledgeStore):
    """Ordered, read-only collection of documents sharing one embedding space."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents = tuple(documents)
        self._dimension = self._check_dimensions(self._documents)
        logger.info("Knowledge base loaded with %d documents", len(self._documents))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Sequence[float]]]) -> "InMemoryKnowledgeStore":
        """Build a store from ``(text, vector)`` pairs."""
        return cls(Document(text=text, vector=vector) for text, vector in pairs)

    # ------------------------------------------------------------------
    # IKnowledgeStore interface
    # ------------------------------------------------------------------

    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    def __len__(self) -> int:
        return len(self._documents)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_dimensions(documents: tuple[Document, ...]) -> Optional[int]:
        if not documents:
            return None
        expected = documents[0].dimension
        for position, doc in enumerate(documents):
            if doc.dimension != expected:
                raise InvalidInputError(
                    f"Document {position} has {doc.dimension} dimensions, expected {expected}"
                )
        return expected
