"""
Prompt template for retrieval-augmented answering.
Rendering is a pure string transformation: no escaping, no validation.
Downstream consumers depend on the exact layout below.
"""

from typing import Sequence

from src.domain.entities.document import Document

CONTEXT_SEPARATOR = "\n- "

RAG_PROMPT_TEMPLATE = """Use the following context to answer the user's question.

Context:
- {context}

User Question: {question}

Answer:"""


def build_prompt(original_query: str, context_docs: Sequence[Document]) -> str:
    """Render the prompt for *original_query* grounded on *context_docs*.

    Document texts are listed in the given order, one "- " bullet each. With no
    documents the context block is a single empty bullet.
    """
    context = CONTEXT_SEPARATOR.join(doc.text for doc in context_docs)
    return RAG_PROMPT_TEMPLATE.format(context=context, question=original_query)
