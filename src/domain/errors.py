"""
Domain errors for the retrieval pipeline.
Zero external dependencies.
"""


class InvalidInputError(ValueError):
    """A request the core refuses to process.

    Raised for a query/document dimensionality mismatch, a negative or
    non-integer top_k, or a malformed Document.
    """


class GenerationFailureError(RuntimeError):
    """The external generation backend failed to produce an answer."""
