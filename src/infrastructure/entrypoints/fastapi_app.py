"""
FastAPI entry point: local development server.

This module is the Composition Root for HTTP runs: it wires the demo knowledge
base, the Bedrock generation client and optional Langfuse tracing, then hands
the use cases to create_app().

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

from src.application.use_cases.answer_question import AnswerQuestionUseCase  # noqa: E402
from src.application.use_cases.retrieve_documents import DEFAULT_TOP_K, RetrieveDocumentsUseCase  # noqa: E402
from src.infrastructure.entrypoints.http_api import create_app  # noqa: E402
from src.infrastructure.knowledge_base.demo_documents import DEMO_DOCUMENTS  # noqa: E402
from src.infrastructure.knowledge_base.in_memory_store import InMemoryKnowledgeStore  # noqa: E402
from src.infrastructure.llm.bedrock_generation_client import BedrockGenerationClient  # noqa: E402
from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler  # noqa: E402

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_knowledge_store = InMemoryKnowledgeStore(DEMO_DOCUMENTS)
_observability = LangfuseObservabilityHandler.from_env()
_generation_client = BedrockGenerationClient(observability=_observability)
_retrieve_use_case = RetrieveDocumentsUseCase(_knowledge_store)
_answer_use_case = AnswerQuestionUseCase(_retrieve_use_case, _generation_client)

app = create_app(
    answer_use_case=_answer_use_case,
    retrieve_use_case=_retrieve_use_case,
    default_top_k=int(os.environ.get("RAG_TOP_K", DEFAULT_TOP_K)),
    on_shutdown=_observability.flush if _observability is not None else None,
)
