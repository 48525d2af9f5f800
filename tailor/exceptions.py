"""Exceptions raised across tailor contexts."""

from pathlib import Path
from typing import Optional


class TailorError(Exception):
    """Base class for all errors surfaced to the CLI or HTTP layer."""


class ResumeLoadError(TailorError):
    """
    Raised when the resume source cannot be read or has an invalid structure.

    Attributes:
        path: Resume file that failed to load
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class SelectionError(TailorError):
    """Raised when an identifier or tag filter matches no resume items."""


class InvalidRequestError(TailorError):
    """Raised when an API request body is missing required fields."""


class TemplateNotFoundError(TailorError):
    """Raised when a named LaTeX template does not exist."""


class TemplateFailure(TailorError):
    """
    Base for template failures, carrying the template name and Jinja2 cause.

    Attributes:
        message: Error description
        template_name: Name of the template that failed
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]
        if template_name:
            parts.append(f"Template: {template_name}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class TemplateParsingError(TemplateFailure):
    """Raised when a LaTeX template cannot be parsed."""


class TemplateRenderError(TemplateFailure):
    """Raised when executing a parsed template fails."""


class ToolchainNotFoundError(TailorError):
    """Raised when no xelatex executable can be located."""


class CompilationError(TailorError):
    """
    Raised when the LaTeX toolchain fails.

    Attributes:
        message: Error description
        output: Raw combined stdout/stderr of the toolchain
    """

    def __init__(self, message: str, output: str = ""):
        self.message = message
        self.output = output
        super().__init__(f"{message}\nOutput: {output}" if output else message)


class MissingCredentialError(TailorError):
    """Raised when the remote scoring credential is not configured."""


class MatchServiceError(TailorError):
    """Raised when the remote scoring request fails."""


class ResponseParseError(MatchServiceError):
    """Raised when a model reply does not contain a single well-formed JSON object."""
