"""exceptions.py
Defines custom exceptions for this project.
"""
from typing import Optional, List


class ScreenerError(Exception):
    """Base exception for skill screener errors."""
    pass

# ------------------------ Batch Validation Errors ------------------------
class ValidationError(ScreenerError):
    """Raised when a screening request is missing documents or required skills."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"ValidationError: {message}")


class ScreeningCancelledError(ScreenerError):
    """Raised when a screening batch is cancelled before its report is complete."""
    def __init__(self, completed: int, total: int):
        self.completed = completed
        self.total = total
        super().__init__(
            f"Screening cancelled after {completed}/{total} resumes were judged. "
            "No report was produced."
        )

# ------------------------ Text Extraction Errors ------------------------
class ExtractionError(ScreenerError):
    """Raised when a document cannot be rendered to plain text."""
    def __init__(
        self,
        file_name: Optional[str] = None,
        original_error: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.file_name = file_name
        self.original_error = original_error
        if message is None:
            message = f"Failed to extract text from document: {file_name}"
            if original_error:
                message += f". Original error: {original_error}"
        super().__init__(message)


class FileNotSupportedError(ExtractionError):
    """Raised when a document has an extension no renderer supports."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None,
        file_name: Optional[str] = None,
    ):
        self.extension = extension
        self.supported_extensions = supported_extensions
        message = (
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {supported_extensions}"
        )
        if context:
            message += f" Context: {context}"
        super().__init__(file_name=file_name, message=message)


class FileTooLargeError(ExtractionError):
    """Raised when a document exceeds the allowed size."""
    def __init__(self, max_size: int, actual_size: int, file_name: Optional[str] = None):
        super().__init__(
            file_name=file_name,
            message=(
                f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
            ),
        )
        self.max_size = max_size
        self.actual_size = actual_size

# ------------------------ Semantic Judge Errors ------------------------
class JudgeError(ScreenerError):
    """
    Raised when the semantic judge fails or returns a reply that cannot be used.

    Attributes:
        message (str): Human-readable description of the error.
        raw_response (Any): The judge reply that failed validation (optional).
    """
    def __init__(self, message: str = "Semantic judge failed", raw_response=None):
        self.message = message
        self.raw_response = raw_response
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.raw_response is not None:
            return f"{self.message} | Raw response: `{self.raw_response}`"
        return self.message

# ------------------------ LLM Querying Errors ------------------------
class LLMConfigError(Exception):
    """Raised when a required configuration (in .env by default) for LLMClient to function
    is missing or invalid."""

    def __init__(
        self,
        variable_name: str,
        message: str = None,
        extra_info: str = None
    ):
        """
        Args:
            variable_name: Name of the config variable.
            message: Optional custom message for the error.
            extra_info: Additional information to append to the error message.
        """
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        if extra_info:
            message += f" | {extra_info}"
        super().__init__(message)
        self.variable_name = variable_name
        self.extra_info = extra_info

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"


class LLMError(Exception):
    """Base exception for all LLM-related errors."""
    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        base_msg = message
        if provider:
            base_msg += f" | Provider: {provider}"
        if model:
            base_msg += f" | Model: {model}"
        if original_exception:
            base_msg += f" | Original Exception: {original_exception}"

        super().__init__(base_msg)


class LLMInitializationError(LLMError):
    """Raised when the LLM client fails to initialize."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        additional_message: Optional[str] = None
    ):
        message = "Failed to initialize LLM client"
        if additional_message:
            message += f": {additional_message}"
        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMQueryError(LLMError):
    """Raised when a query to the LLM fails."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        additional_message: Optional[str] = None,
        original_exception: Exception = None,
    ):
        message = "LLM query failed"
        if additional_message:
            message += f": {additional_message}"

        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMEmptyResponse(LLMError):
    """Raised when the LLM returns an empty response."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None
    ):
        super().__init__(
            message="LLM returned an empty response",
            provider=provider,
            model=model,
        )
