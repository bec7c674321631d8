"""
FastAPI application factory.

create_app() receives already-wired use cases so the HTTP layer never builds
infrastructure adapters itself; fastapi_app.py is the composition root that
calls it. Tests call it with fakes.
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from src.application.use_cases.answer_question import AnswerQuestionUseCase
from src.application.use_cases.retrieve_documents import DEFAULT_TOP_K, RetrieveDocumentsUseCase
from src.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)


class RetrieveRequest(BaseModel):
    query_vector: list[float]
    top_k: int = Field(default=DEFAULT_TOP_K, ge=0)


class AnswerRequest(RetrieveRequest):
    query: str


class AnswerResponse(BaseModel):
    answer: str
    references: list[str]


class ScoredDocumentOut(BaseModel):
    text: str
    score: float


class RetrieveResponse(BaseModel):
    documents: list[ScoredDocumentOut]


def create_app(
    answer_use_case: AnswerQuestionUseCase,
    retrieve_use_case: RetrieveDocumentsUseCase,
    default_top_k: int = DEFAULT_TOP_K,
    on_shutdown: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """Build the HTTP API around the given use cases.

    Args:
        answer_use_case:   Full retrieve -> prompt -> generate pipeline.
        retrieve_use_case: Ranking only, exposed for inspection.
        default_top_k:     top_k applied when a request omits it.
        on_shutdown:       Optional hook run when the app stops (e.g. trace flush).
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        if on_shutdown is not None:
            on_shutdown()

    app = FastAPI(title="Vector RAG Pipeline API", lifespan=lifespan)

    def _top_k(body: RetrieveRequest) -> int:
        return body.top_k if "top_k" in body.model_fields_set else default_top_k

    @app.post("/answer", response_model=AnswerResponse)
    async def answer(body: AnswerRequest):
        """Answer *query* using the documents closest to *query_vector*."""
        try:
            result = await answer_use_case.answer(body.query, body.query_vector, _top_k(body))
        except InvalidInputError as exc:
            logger.warning("Rejected answer request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return AnswerResponse(answer=result.summary, references=result.references)

    @app.post("/retrieve", response_model=RetrieveResponse)
    async def retrieve(body: RetrieveRequest):
        try:
            ranked = retrieve_use_case.score(body.query_vector, _top_k(body))
        except InvalidInputError as exc:
            logger.warning("Rejected retrieve request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return RetrieveResponse(
            documents=[
                ScoredDocumentOut(text=entry.document.text, score=entry.score)
                for entry in ranked
            ]
        )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
