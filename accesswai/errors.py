"""
Error taxonomy for the analysis core.

InputError is the only error that reaches callers of the pipeline.
ScanEntryError and SuggestionServiceError are always recovered locally.
"""

from __future__ import annotations


class AccessWAIError(Exception):
    """Base class for all AccessWAI errors."""


class InputError(AccessWAIError):
    """The supplied file set is empty or has no supported files."""


class InvalidArchiveError(InputError):
    """The uploaded archive could not be opened as a ZIP file."""


class ScanEntryError(AccessWAIError):
    """A single source file could not be read or scanned."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(f"{file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


class SuggestionServiceError(AccessWAIError):
    """The AI suggestion service failed, timed out or answered with nothing usable."""


class UnknownRuleError(AccessWAIError, KeyError):
    """No rule with the requested id is registered in the catalog."""
