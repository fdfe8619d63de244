"""Error types shared by the generation and template services.

Two kinds only: validation failures, raised synchronously with a specific
message, and processing failures, which wrap whatever went wrong underneath
with a generic prefix that keeps the original message.
"""


class TemplateValidationError(ValueError):
    """Uploaded template archive or manifest is unacceptable."""


class ProcessingError(Exception):
    """Base class for wrapped failures of a public service operation."""


class GenerationError(ProcessingError):
    """Model call, response decoding or prompt construction failed."""


class GenerationTimeoutError(GenerationError):
    """The model provider did not answer within the configured timeout."""


class TemplateProcessingError(ProcessingError):
    """Filesystem or archive operation on a template failed."""
