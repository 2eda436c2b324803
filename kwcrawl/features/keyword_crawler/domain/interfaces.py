from abc import ABC, abstractmethod
from typing import List

from .models import PathMetadata

class IFileSystemAccess(ABC):
    """
    Contract for the blocking filesystem capability the crawler consumes.
    Failures are raised as exceptions; their message is recorded verbatim.
    """

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """Returns the bare names of the entries in path, in listing order."""
        pass

    @abstractmethod
    def stat(self, path: str) -> PathMetadata:
        """Fetches metadata for path, distinguishing directory vs regular file."""
        pass

class IAsyncFileSystemAccess(ABC):
    """
    Awaitable twin of IFileSystemAccess for the concurrent crawl.
    """

    @abstractmethod
    async def list_directory(self, path: str) -> List[str]:
        pass

    @abstractmethod
    async def stat(self, path: str) -> PathMetadata:
        pass
