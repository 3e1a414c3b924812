# -*- coding: utf-8 -*-
"""
BetterNames Exceptions Module
Custom exception classes for structured error handling across the application.
"""


class BetterNamesError(Exception):
    """
    Base exception class for all BetterNames-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Source Exceptions
# =============================================================================

class SourceError(BetterNamesError):
    """
    Base exception for a single translation source that could not be loaded.

    The ingestor turns these into one diagnostic line each; they never
    abort a whole load.
    """

    def __init__(self, message: str, file_path: str = None, details=None):
        merged = {'file_path': file_path}
        if details:
            merged.update(details)
        super().__init__(message, details=merged)
        self.file_path = file_path


class SourceFileMissingError(SourceError):
    """Raised when a listed source file does not exist."""
    pass


class HeaderResolutionError(SourceError):
    """Raised when the header row lacks the required columns."""

    def __init__(self, message: str, file_path: str = None, headers=None):
        super().__init__(message, file_path=file_path, details={'headers': headers})
        self.headers = headers


class EmptySourceError(SourceError):
    """Raised when a source parses but yields no entries."""
    pass


class SourceReadError(SourceError):
    """Raised when reading a source file fails at the I/O level."""

    def __init__(self, message: str, file_path: str = None, operation: str = "read"):
        super().__init__(message, file_path=file_path, details={'operation': operation})
        self.operation = operation


# =============================================================================
# Preset Exceptions
# =============================================================================

class PresetError(BetterNamesError):
    """Base exception for preset directory handling."""
    pass


class PresetNotFoundError(PresetError):
    """Raised when a requested preset directory does not exist."""

    def __init__(self, message: str, preset: str = None, path: str = None):
        super().__init__(message, details={'preset': preset, 'path': path})
        self.preset = preset
        self.path = path
