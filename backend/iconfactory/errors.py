"""Typed errors raised by the icon pipeline."""

from __future__ import annotations


class IconFactoryError(Exception):
    """Base class for all icon factory errors."""


class MalformedMarkupError(IconFactoryError):
    """Markup failed the structural SVG check. The prior state must be kept."""

    def __init__(self, message: str = "Invalid SVG markup", markup: str = "") -> None:
        super().__init__(message)
        self.markup = markup


class EmptyResultError(IconFactoryError):
    """No candidate icon survived sanitizing."""

    def __init__(self, message: str = "No valid SVG icons found in response") -> None:
        super().__init__(message)


class LLMNotConfiguredError(IconFactoryError):
    """The generative model has no API key configured."""


class LLMRequestError(IconFactoryError):
    """The call to the generative model failed."""


class CollectionNotFoundError(IconFactoryError):
    def __init__(self, collection_id: str) -> None:
        super().__init__(f"Collection not found: {collection_id}")
        self.collection_id = collection_id
