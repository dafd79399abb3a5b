"""Domain-level exceptions raised by the command handlers."""


class DomainValidationError(ValueError):
    """Business-rule violation surfaced to clients as a 400 response."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
