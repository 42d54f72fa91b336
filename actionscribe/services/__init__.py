"""Application services."""

from actionscribe.services.extraction import ActionExtractionService

__all__ = ["ActionExtractionService"]
