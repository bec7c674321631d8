"""
Infrastructure adapter: Langfuse -> IObservabilityHandler.

The langfuse SDK is imported inside methods, so importing this module never
requires Langfuse credentials. from_env() yields a handler only when both
LANGFUSE_PUBLIC_KEY and LANGFUSE_SECRET_KEY are set.
"""

import logging
import os
from typing import Any, Optional

from src.domain.ports.observability_port import IObservabilityHandler

logger = logging.getLogger(__name__)

REQUIRED_ENV_VARS = ("LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY")


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Attaches a Langfuse LangChain callback to every generation run."""

    def __init__(self, callback_handler: Any = None) -> None:
        if callback_handler is None:
            from langfuse.langchain import CallbackHandler
            callback_handler = CallbackHandler()
        self._callback_handler = callback_handler

    @classmethod
    def from_env(cls) -> Optional["LangfuseObservabilityHandler"]:
        missing = [name for name in REQUIRED_ENV_VARS if not os.environ.get(name)]
        if missing:
            logger.info("Langfuse tracing disabled (unset: %s)", ", ".join(missing))
            return None
        return cls()

    def callbacks(self) -> list[Any]:
        return [self._callback_handler]

    def flush(self) -> None:
        from langfuse import get_client
        get_client().flush()
