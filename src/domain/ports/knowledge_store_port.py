"""
Port (interface) for knowledge stores.
Infrastructure adapters (e.g. InMemoryKnowledgeStore) must implement this interface.
A store is populated once at construction and is read-only afterwards.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.document import Document


class IKnowledgeStore(ABC):
    @abstractmethod
    def documents(self) -> tuple[Document, ...]:
        """Return every stored document in insertion order."""
        ...

    @property
    @abstractmethod
    def dimension(self) -> Optional[int]:
        """Dimensionality shared by all stored vectors, or None when empty."""
        ...

    def __len__(self) -> int:
        return len(self.documents())
