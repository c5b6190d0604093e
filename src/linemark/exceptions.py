#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linemark library.

This module defines the exception classes raised around the conversion core.
Converting a string never fails; these exceptions cover rule-chain
construction, option validation and file handling.

Exception Hierarchy
-------------------
- LinemarkError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - InputFileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, decoding, directories)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class LinemarkError(Exception):
    """Base exception class for all linemark-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(LinemarkError):
    """Exception raised for invalid input parameters or options.

    This exception covers validation errors such as:
    - A classification rule that can never match because an earlier rule shadows it
    - Invalid command-line or configuration values

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(LinemarkError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be accessed.

    This includes permission errors, directories passed as files and
    content that cannot be decoded with the requested encoding.
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(LinemarkError):
    """Exception raised when producing output fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        The stage where rendering failed (e.g., "write")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when the rendered HTML cannot be written.

    Parameters
    ----------
    file_path : str
        Destination path that could not be written
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.file_path = file_path
