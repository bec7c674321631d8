"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) -> IGenerationClient.

All ChatBedrock / langchain_aws details are confined here. The completion is
streamed with astream() and accumulated chunk by chunk; any backend error is
logged and re-raised as GenerationFailureError.
"""

import logging
import os
from typing import Any, Optional

from langchain_aws import ChatBedrock

from src.domain.errors import GenerationFailureError
from src.domain.ports.generation_port import IGenerationClient
from src.domain.ports.observability_port import IObservabilityHandler

logger = logging.getLogger(__name__)


class BedrockGenerationClient(IGenerationClient):
    """Streams a single-turn completion from a Bedrock chat model."""

    MODEL_ID = "us.amazon.nova-lite-v1:0"
    TEMPERATURE = 0.2
    MAX_TOKENS = 512

    def __init__(
        self,
        observability: Optional[IObservabilityHandler] = None,
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            observability: Optional tracing handler whose callbacks are attached
                           to every generation run.
            _runnable:     Optional pre-configured Runnable exposing astream(),
                           used instead of constructing ChatBedrock.
        """
        self._observability = observability
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatBedrock(
                model=os.environ.get("BEDROCK_MODEL_ID", self.MODEL_ID),
                temperature=self.TEMPERATURE,
                max_tokens=int(os.environ.get("BEDROCK_MAX_TOKENS", self.MAX_TOKENS)),
                region_name=os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
            )

    async def generate(self, prompt: str) -> str:
        config = None
        if self._observability is not None:
            config = {"callbacks": self._observability.callbacks()}

        parts: list[str] = []
        logger.debug("Starting generation stream (%d prompt chars)", len(prompt))
        try:
            async for chunk in self._llm.astream(prompt, config=config):
                parts.append(self._chunk_text(chunk))
        except Exception as exc:
            logger.exception("Error generating content")
            raise GenerationFailureError(str(exc) or type(exc).__name__) from exc

        answer = "".join(parts)
        if not answer.strip():
            raise GenerationFailureError("the model returned an empty response")
        logger.debug("Generation finished (%d chars)", len(answer))
        return answer

    @staticmethod
    def _chunk_text(chunk: Any) -> str:
        """Extract the text of one streamed chunk.

        Chunk content is either a string or a list of content blocks, depending
        on the model provider.
        """
        content = getattr(chunk, "content", chunk)
        if isinstance(content, str):
            return content
        texts = []
        for block in content or []:
            if isinstance(block, str):
                texts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                texts.append(block.get("text", ""))
        return "".join(texts)
