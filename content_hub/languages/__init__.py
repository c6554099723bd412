"""Language management."""

from content_hub.languages.service import BASE_LANGUAGE, LanguageService

__all__ = ["BASE_LANGUAGE", "LanguageService"]
