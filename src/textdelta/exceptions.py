#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textdelta library.

The diff pipeline itself is a total function of its inputs and never raises
for any pair of texts. The exceptions below cover the surfaces around it:
option validation, configuration files, and command line inputs.

Exception Hierarchy
-------------------
- TextDeltaError (base exception)

  - ValidationError (parameter/option validation)

  - ConfigError (configuration file discovery and parsing)

  - InputError (unreadable command line inputs)

"""

from typing import Any


class TextDeltaError(Exception):
    """Base exception class for all textdelta-specific errors.

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


class ValidationError(TextDeltaError):
    """Exception raised for invalid input parameters or options.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class ConfigError(TextDeltaError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path to the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class InputError(TextDeltaError):
    """Exception raised when an input text cannot be read.

    Parameters
    ----------
    message : str
        Description of the input problem
    input_path : str, optional
        Path (or ``-`` for stdin) of the input that failed
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, input_path: str | None = None, original_error: Exception | None = None):
        """Initialize the input error with the input path."""
        super().__init__(message, original_error=original_error)
        self.input_path = input_path
