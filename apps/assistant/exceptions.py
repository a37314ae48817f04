"""
Domain exceptions for assistant app.

Exception Hierarchy:
    AssistantServiceError (base)
    ├── InvalidQuestionError
    ├── ProductNotFoundError
    └── AssistantUnavailableError
        ├── AssistantNotConfiguredError
        └── AssistantRequestError
"""


class AssistantServiceError(Exception):
    """Base exception for all assistant service errors."""
    pass


class InvalidQuestionError(AssistantServiceError):
    """Chat question is missing or blank."""
    pass


class ProductNotFoundError(AssistantServiceError):
    """Product asked about does not exist."""
    pass


class AssistantUnavailableError(AssistantServiceError):
    """
    The AI backend could not produce an answer.

    Product detail swallows this and omits the summary; chat returns it to
    the caller.
    """
    pass


class AssistantNotConfiguredError(AssistantUnavailableError):
    """No API key configured for the AI backend."""
    pass


class AssistantRequestError(AssistantUnavailableError):
    """Transport failure, error status or malformed payload from the AI backend."""
    pass
