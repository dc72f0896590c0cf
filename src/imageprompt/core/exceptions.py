"""Exception hierarchy for Image to Prompt.

Every error a user can see is an :class:`ImagePromptError`, and its message is
meant to be displayed verbatim.
"""


class ImagePromptError(Exception):
    """Base exception for the image-to-prompt application."""


class ConfigurationError(ImagePromptError):
    """Raised at startup when required configuration is missing."""


class GenerationError(ImagePromptError):
    """Base class for failures of the prompt generation call."""


class GenerationEmptyResponseError(GenerationError):
    """Raised when the service answers without any usable text."""

    def __init__(self, message: str = "Gemini API Error: The API response was empty or invalid."):
        super().__init__(message)


class GenerationServiceError(GenerationError):
    """Raised when the service or transport reports an error.

    Attributes:
        detail: The underlying error message
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Gemini API Error: {detail}")


class GenerationUnknownError(GenerationError):
    """Raised for failures that carry no usable description."""

    def __init__(
        self,
        message: str = "An unknown error occurred while communicating with the Gemini API.",
    ):
        super().__init__(message)
