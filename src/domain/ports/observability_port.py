"""
Port (interface) for tracing of generation calls.
Adapters (e.g. LangfuseObservabilityHandler) hand framework callbacks to the
generation client and flush buffered traces on shutdown.
"""

from abc import ABC, abstractmethod
from typing import Any


class IObservabilityHandler(ABC):
    @abstractmethod
    def callbacks(self) -> list[Any]:
        """Callbacks to attach to each generation run (LangChain callback handlers)."""
        ...

    @abstractmethod
    def flush(self) -> None: ...
