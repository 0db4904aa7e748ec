"""Failure types raised by the generation client.

Callers only need to catch ``GenerationError``; the subclasses exist so the
client can log what went wrong and so tests can be precise.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Generation failed; the request produced no usable content."""


class ProviderError(GenerationError):
    """The provider call itself failed (transport, auth, quota, server error)."""


class ResponseParseError(GenerationError):
    """The provider returned text that is not valid JSON."""


class ShapeMismatchError(GenerationError):
    """Decoded JSON does not match the declared schema."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
