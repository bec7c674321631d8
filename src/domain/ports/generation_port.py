"""
Port (interface) for text-generation backends.
Infrastructure adapters (e.g. BedrockGenerationClient) must implement this interface.
"""

from abc import ABC, abstractmethod


class IGenerationClient(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate an answer for a fully rendered *prompt*.

        Implementations raise (e.g. GenerationFailureError) instead of
        returning an empty string when the backend fails.
        """
        ...
