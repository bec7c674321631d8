import pytest

from src.domain.entities.document import Document
from src.domain.ports.generation_port import IGenerationClient
from src.infrastructure.knowledge_base.in_memory_store import InMemoryKnowledgeStore

HEALTH_PAIRS = [
    ("water intake text", [0.1, 0.8, 0.2]),
    ("exercise text", [0.9, 0.1, 0.1]),
    ("diet text", [0.2, 0.2, 0.9]),
    ("cardio text", [0.8, 0.2, 0.1]),
]

HEART_QUERY_VECTOR = [0.85, 0.15, 0.05]


class FakeGenerationClient(IGenerationClient):
    """Records prompts and replies with a canned answer or raises a canned error."""

    def __init__(self, reply: str = "Exercise regularly.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def health_store():
    return InMemoryKnowledgeStore.from_pairs(HEALTH_PAIRS)


@pytest.fixture
def empty_store():
    return InMemoryKnowledgeStore([])


@pytest.fixture
def twin_store():
    """Two documents with identical vectors plus one unrelated document."""
    return InMemoryKnowledgeStore(
        [
            Document("first twin", [0.5, 0.5]),
            Document("other", [0.0, 1.0]),
            Document("second twin", [0.5, 0.5]),
        ]
    )
