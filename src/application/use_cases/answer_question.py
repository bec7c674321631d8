"""
Use-case: answer a user question with retrieval-augmented generation.
Depends only on Domain ports and the application layer, no infrastructure imports.

Flow: retrieve -> build prompt -> generate. The generation call is the only
await point; retrieval errors propagate, generation errors become a message.
"""

import logging
from typing import Sequence

from src.application.prompts.rag_prompt import build_prompt
from src.application.use_cases.retrieve_documents import DEFAULT_TOP_K, RetrieveDocumentsUseCase
from src.domain.entities.document import RagAnswer
from src.domain.ports.generation_port import IGenerationClient

logger = logging.getLogger(__name__)

GENERATION_ERROR_PREFIX = "Error generating content: "


class AnswerQuestionUseCase:
    def __init__(
        self,
        retriever: RetrieveDocumentsUseCase,
        generation_client: IGenerationClient,
    ) -> None:
        """
        Args:
            retriever:         Ranks the knowledge store for the query vector.
            generation_client: IGenerationClient implementation (e.g. Bedrock adapter).
        """
        self._retriever = retriever
        self._generation_client = generation_client

    async def execute(
        self,
        original_query: str,
        query_vector: Sequence[float],
        top_k: int = DEFAULT_TOP_K,
    ) -> str:
        """Return the generated answer text, or a readable error message.

        Raises:
            InvalidInputError: if retrieval rejects *query_vector* or *top_k*.
        """
        result = await self.answer(original_query, query_vector, top_k)
        return result.summary

    async def answer(
        self,
        original_query: str,
        query_vector: Sequence[float],
        top_k: int = DEFAULT_TOP_K,
    ) -> RagAnswer:
        """Like execute(), also returning the texts used as context."""
        docs = self._retriever.execute(query_vector, top_k)
        prompt = build_prompt(original_query, docs)
        logger.debug("Prompt sent to generation backend:\n%s", prompt)

        try:
            answer_text = await self._generation_client.generate(prompt)
        except Exception as exc:
            logger.exception("Answer generation failed")
            answer_text = f"{GENERATION_ERROR_PREFIX}{str(exc) or type(exc).__name__}"

        return RagAnswer(summary=answer_text, references=[doc.text for doc in docs])
