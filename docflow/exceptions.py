"""Custom exceptions for docflow."""

from typing import Optional


class DocflowError(Exception):
    """Base exception for docflow errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LayoutError(DocflowError):
    """Exception raised for invalid layout geometry or configuration."""

    pass


class RenderingError(DocflowError):
    """Exception raised during document rendering."""

    pass


class ContextCreationError(RenderingError):
    """Raised when no output surface can be created for the document."""

    pass


class ConverterError(RenderingError):
    """Base class for external markup converter failures."""

    pass


class ExternalToolNotFoundError(ConverterError):
    """Raised when the converter binary cannot be located."""

    def __init__(self, tool_path: str, details: Optional[str] = None):
        super().__init__(f"External tool not found: {tool_path}", details)
        self.tool_path = tool_path


class ConversionFailedError(ConverterError):
    """Raised when the converter exits non-zero, times out or produces nothing."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message, details)
        self.returncode = returncode
        self.stderr = stderr


class MediaError(DocflowError):
    """Exception raised during media processing."""

    pass
