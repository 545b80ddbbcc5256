class QuizServiceError(Exception):
    """Base class for errors raised by the quiz service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuizServiceError):
    """Input is malformed or does not match the quiz (e.g. answer count)."""


class NotFoundError(QuizServiceError):
    """The referenced quiz does not exist."""


class InvalidReferenceError(QuizServiceError):
    """The correct option id is not one of the question's options."""
