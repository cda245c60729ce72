"""HTTP services."""

from .url_builder import UrlBuilder, create_locale_normalizer
from .http_client import HttpClient, API_KEY_HEADER

__all__ = ["UrlBuilder", "create_locale_normalizer", "HttpClient", "API_KEY_HEADER"]
