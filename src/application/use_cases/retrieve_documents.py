"""
Use-case: rank the knowledge store against a query vector.
Depends only on Domain ports, entities and services, no infrastructure imports.
"""

import logging
from typing import Sequence

from src.domain.entities.document import Document, ScoredDocument
from src.domain.errors import InvalidInputError
from src.domain.ports.knowledge_store_port import IKnowledgeStore
from src.domain.services.vector_math import as_vector, cosine_similarity

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 2


class RetrieveDocumentsUseCase:
    def __init__(self, knowledge_store: IKnowledgeStore) -> None:
        self._knowledge_store = knowledge_store

    def execute(self, query_vector: Sequence[float], top_k: int = DEFAULT_TOP_K) -> list[Document]:
        """Return the *top_k* documents most similar to *query_vector*.

        Args:
            query_vector: Embedding of the user's question, same dimensionality
                          as the stored vectors.
            top_k:        Maximum number of documents to return.

        Returns:
            At most min(top_k, store size) documents, best match first. Ties keep
            store order. Empty for an empty store or top_k == 0.

        Raises:
            InvalidInputError: on a negative top_k, a non-finite query component
                               or a dimensionality mismatch.
        """
        return [scored.document for scored in self.score(query_vector, top_k)]

    def score(self, query_vector: Sequence[float], top_k: int = DEFAULT_TOP_K) -> list[ScoredDocument]:
        """Same ranking as execute(), keeping the similarity of each document."""
        self._validate(query_vector, top_k)
        documents = self._knowledge_store.documents()
        logger.info(
            "Searching for the top %d most relevant documents among %d",
            top_k,
            len(documents),
        )
        if top_k == 0 or not documents:
            return []

        scored = [
            (index, ScoredDocument(doc, cosine_similarity(query_vector, doc.vector)))
            for index, doc in enumerate(documents)
        ]
        scored.sort(key=lambda item: (-item[1].score, item[0]))
        ranked = [item[1] for item in scored[:top_k]]

        for entry in ranked:
            logger.debug("  - %r (similarity: %.4f)", entry.document.text, entry.score)
        return ranked

    def _validate(self, query_vector: Sequence[float], top_k: int) -> None:
        if isinstance(top_k, bool) or not isinstance(top_k, int):
            raise InvalidInputError(f"top_k must be an integer, got {top_k!r}")
        if top_k < 0:
            raise InvalidInputError(f"top_k must be >= 0, got {top_k}")
        as_vector(query_vector)
        dimension = self._knowledge_store.dimension
        if dimension is not None and len(query_vector) != dimension:
            raise InvalidInputError(
                f"Query vector has {len(query_vector)} dimensions, "
                f"knowledge store expects {dimension}"
            )
