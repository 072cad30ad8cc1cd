"""
Base classes for data fetchers in the Data Summary Dashboard.
"""

from abc import ABC, abstractmethod

from dashboard.common.logging_utils import get_logger
from dashboard.domain.contracts import FetchResult


class FetchError(RuntimeError):
    """Network or decode failure for a single source."""

    def __init__(self, source: str, cause: BaseException):
        self.source = source
        self.cause = cause
        super().__init__(f"Error fetching data from {source}: {cause}")


class DataFetcher(ABC):
    """Abstract base class for all fetchers."""

    def __init__(self, name: str):
        self.name = name
        self.logger = get_logger(f"fetcher.{name}")

    @abstractmethod
    def fetch(self, source: str) -> FetchResult:
        """Fetch one source and decode it.

        Args:
            source: Resource locator understood by the fetcher's transport.

        Returns:
            FetchResult with the decoded payload and its summary text.

        Raises:
            FetchError: on any network or decode failure.
        """
        pass
