"""HTTP feature: URL building and the authenticated transport."""

from .services import UrlBuilder, create_locale_normalizer, HttpClient, API_KEY_HEADER

__all__ = ["UrlBuilder", "create_locale_normalizer", "HttpClient", "API_KEY_HEADER"]
