"""
Errors raised inside a provider call.

A provider raises TranslationError when a response cannot be used (not a
mapping, or a non-success responseStatus). Provider.translate catches it
and reports the message as an ok=False result, so it never reaches callers.
"""

from typing import Optional


class TranslationError(Exception):
    """Unusable provider response, with an optional error code and details."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}
