import asyncio
import os
import stat
from typing import List, Optional

from ..domain.interfaces import IAsyncFileSystemAccess, IFileSystemAccess
from ..domain.models import PathMetadata

def _to_metadata(result: os.stat_result) -> PathMetadata:
    return PathMetadata(
        is_directory=stat.S_ISDIR(result.st_mode),
        is_file=stat.S_ISREG(result.st_mode),
    )

class LocalFileSystemAccess(IFileSystemAccess):
    """
    Blocking access to the host filesystem.
    stat follows symlinks, so a link to a directory is crawled as a directory.
    """

    def list_directory(self, path: str) -> List[str]:
        return os.listdir(path)

    def stat(self, path: str) -> PathMetadata:
        return _to_metadata(os.stat(path))

class AsyncLocalFileSystemAccess(IAsyncFileSystemAccess):
    """
    Runs the blocking calls in worker threads so one directory's entries
    can be inspected concurrently.

    max_concurrent_io caps the number of in-flight calls across the whole
    crawl (None or 0 = no cap).
    """

    def __init__(self, max_concurrent_io: Optional[int] = None):
        self._blocking = LocalFileSystemAccess()
        self._max_concurrent_io = max_concurrent_io or 0
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._semaphore_loop: Optional[asyncio.AbstractEventLoop] = None

    async def list_directory(self, path: str) -> List[str]:
        return await self._run(self._blocking.list_directory, path)

    async def stat(self, path: str) -> PathMetadata:
        return await self._run(self._blocking.stat, path)

    async def _run(self, func, path: str):
        if not self._max_concurrent_io:
            return await asyncio.to_thread(func, path)

        async with self._limiter():
            return await asyncio.to_thread(func, path)

    def _limiter(self) -> asyncio.Semaphore:
        # A semaphore is bound to one event loop; the adapter may outlive it
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self._max_concurrent_io)
            self._semaphore_loop = loop
        return self._semaphore
