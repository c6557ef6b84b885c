"""Exception types raised by the document store"""


class DocstoreError(Exception):
    """Base class for docstore errors."""


class ValidationFailed(DocstoreError, ValueError):
    """Raised by upsert when a document fails one or more validation rules."""

    def __init__(self, reasons: list[str]):
        self.reasons = list(reasons)
        super().__init__("Invalid document: " + "; ".join(self.reasons))
