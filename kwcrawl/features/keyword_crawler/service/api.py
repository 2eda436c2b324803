import asyncio
import logging
import os
from typing import Optional, Union

from kwcrawl.core.common.enums import CrawlMode
from kwcrawl.core.config.settings import settings

from ..data.local_fs import AsyncLocalFileSystemAccess, LocalFileSystemAccess
from ..domain.interfaces import IAsyncFileSystemAccess, IFileSystemAccess
from ..domain.models import CrawlConfiguration, CrawlReport
from .traversal import crawl_blocking, crawl_concurrent

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

class KeywordCrawler:
    """
    Facade for the Keyword Crawler Feature.
    Picks the execution mode and the filesystem adapters; the walk itself
    lives in the traversal plan shared by both modes.
    """

    def __init__(self,
                 fs: Optional[IFileSystemAccess] = None,
                 async_fs: Optional[IAsyncFileSystemAccess] = None):
        # In a full DI framework, these would be injected.
        self.fs = fs or LocalFileSystemAccess()
        self.async_fs = async_fs or AsyncLocalFileSystemAccess(settings.CRAWL_MAX_CONCURRENT_IO)

    def crawl(self, root_path: PathLike, config: Optional[CrawlConfiguration] = None) -> CrawlReport:
        """
        Sequential crawl. Deterministic depth-first, left-to-right ordering.
        """
        root, config = self._prepare(root_path, config, CrawlMode.SEQUENTIAL)
        report = crawl_blocking(root, config, self.fs)
        self._log_summary(root, report)
        return report

    async def crawl_concurrent(self, root_path: PathLike, config: Optional[CrawlConfiguration] = None) -> CrawlReport:
        """
        Concurrent crawl. All entries of a directory are inspected together.
        """
        root, config = self._prepare(root_path, config, CrawlMode.CONCURRENT)
        report = await crawl_concurrent(root, config, self.async_fs)
        self._log_summary(root, report)
        return report

    def crawl_with_mode(self,
                        root_path: PathLike,
                        config: Optional[CrawlConfiguration] = None,
                        mode: Union[CrawlMode, str, None] = None) -> CrawlReport:
        """
        Entry point for synchronous callers (jobs, scripts) that still want
        to choose the mode. Must not be called from a running event loop.
        """
        mode = CrawlMode(mode or settings.DEFAULT_CRAWL_MODE)
        if mode == CrawlMode.CONCURRENT:
            return asyncio.run(self.crawl_concurrent(root_path, config))
        return self.crawl(root_path, config)

    def _prepare(self, root_path: PathLike, config: Optional[CrawlConfiguration], mode: CrawlMode):
        root = os.fspath(root_path)
        config = config or CrawlConfiguration()
        logger.info(f"Starting {mode.value} keyword crawl of: {root}")
        return root, config

    def _log_summary(self, root: str, report: CrawlReport) -> None:
        logger.info(
            f"Crawl of {root} complete. Matched: {len(report.files)}, "
            f"scanned: {report.total_scanned} entries in {report.directories_scanned} directories, "
            f"errors: {len(report.issues)}"
        )

# Singleton Instance for easy import
crawler = KeywordCrawler()

async def crawl_for_keyword_files(root_path: PathLike, config: Optional[CrawlConfiguration] = None) -> CrawlReport:
    """Concurrent crawl with the default local adapters."""
    return await crawler.crawl_concurrent(root_path, config)

def crawl_for_keyword_files_sync(root_path: PathLike, config: Optional[CrawlConfiguration] = None) -> CrawlReport:
    """Sequential crawl with the default local adapters."""
    return crawler.crawl(root_path, config)
