"""
Data Collection Collectors Package

Enthält die Fetcher für externe JSON-Datenquellen.
"""

from .base import DataFetcher, FetchError
from .json_api_fetcher import JsonApiFetcher

__all__ = ["DataFetcher", "FetchError", "JsonApiFetcher"]
