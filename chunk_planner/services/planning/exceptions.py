"""Planning errors surfaced to callers."""


class DocumentValidationError(ValueError):
    """Raised when a document cannot be planned, e.g. its content is empty."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
