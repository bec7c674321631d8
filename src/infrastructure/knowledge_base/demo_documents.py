"""
Hardcoded demo knowledge base.

The vectors are hand-picked, not produced by an embedding model: the first
component tracks exercise, the second hydration, the third diet. A real
deployment would replace this module with its own loader.
"""

from src.domain.entities.document import Document

DEMO_DOCUMENTS = [
    Document(
        "The recommended daily water intake for adults is around 8 glasses.",
        [0.1, 0.8, 0.2],
    ),
    Document(
        "Regular exercise is crucial for cardiovascular health.",
        [0.9, 0.1, 0.1],
    ),
    Document(
        "A balanced diet should include fruits, vegetables, and proteins.",
        [0.2, 0.2, 0.9],
    ),
    Document(
        "Cardio workouts like running or swimming help strengthen the heart.",
        [0.8, 0.2, 0.1],  # close to the exercise vector
    ),
]

DEMO_QUERY = "How can I improve my heart health?"

# Stand-in for embedding DEMO_QUERY; dominated by the exercise component.
DEMO_QUERY_VECTOR = [0.85, 0.15, 0.05]
