"""
CLI demo: answer one health question against the demo knowledge base.

Requires AWS credentials with Bedrock access:

    export AWS_PROFILE=<your-profile>
    export AWS_DEFAULT_REGION=us-east-1
    python -m src.infrastructure.entrypoints.demo
"""

import asyncio
import logging
import os
from typing import Optional

from src.application.use_cases.answer_question import AnswerQuestionUseCase
from src.application.use_cases.retrieve_documents import RetrieveDocumentsUseCase
from src.domain.ports.generation_port import IGenerationClient
from src.infrastructure.knowledge_base.demo_documents import (
    DEMO_DOCUMENTS,
    DEMO_QUERY,
    DEMO_QUERY_VECTOR,
)
from src.infrastructure.knowledge_base.in_memory_store import InMemoryKnowledgeStore
from src.infrastructure.llm.bedrock_generation_client import BedrockGenerationClient


async def run(generation_client: Optional[IGenerationClient] = None) -> str:
    """Answer DEMO_QUERY; defaults to the Bedrock backend."""
    if generation_client is None:
        generation_client = BedrockGenerationClient()
    retriever = RetrieveDocumentsUseCase(InMemoryKnowledgeStore(DEMO_DOCUMENTS))
    use_case = AnswerQuestionUseCase(retriever, generation_client)

    print(f'User query: "{DEMO_QUERY}"')
    print(f"  (query vector: {DEMO_QUERY_VECTOR})\n")
    return await use_case.execute(DEMO_QUERY, DEMO_QUERY_VECTOR, top_k=2)


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    answer = asyncio.run(run())
    print("\nFinal generated answer:")
    print(answer)


if __name__ == "__main__":
    main()
