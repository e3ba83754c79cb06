"""
DomainError - Common base for every error a handler may raise.
"""


class DomainError(Exception):
    """Base class for domain errors. str(error) is safe to show to callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
