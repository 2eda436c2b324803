import logging
from typing import Optional

from kwcrawl.core.common.enums import CrawlMode

from ..domain.models import CrawlConfiguration
from .api import KeywordCrawler

logger = logging.getLogger(__name__)

class CrawlJobHandler:
    """
    Worker for JobType.KEYWORD_CRAWL.

    A crawl that could not reach its root still completes as a job;
    the root error is part of the stored report.
    """

    def __init__(self, crawler: Optional[KeywordCrawler] = None):
        self.crawler = crawler or KeywordCrawler()

    def handle(self, params: dict) -> dict:
        # 1. Validate payload
        root_path = params.get("root_path")
        if not root_path:
            raise ValueError("Crawl job payload is missing 'root_path'.")

        config = CrawlConfiguration.from_dict(params.get("config") or {})

        mode_value = params.get("mode")
        try:
            mode = CrawlMode(mode_value) if mode_value else None
        except ValueError:
            raise ValueError(f"Unsupported crawl mode: {mode_value!r}") from None

        logger.info(f"Processing Keyword Crawl for: {root_path}")

        # 2. Run
        report = self.crawler.crawl_with_mode(root_path, config, mode)

        # 3. Persistable result
        return report.to_dict()
