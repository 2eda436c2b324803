from .domain.models import CrawlConfiguration, CrawlReport, MatchedEntry, CrawlIssue, DEFAULT_KEYWORDS
from .service.api import KeywordCrawler, crawler, crawl_for_keyword_files, crawl_for_keyword_files_sync

__all__ = [
    "CrawlConfiguration",
    "CrawlReport",
    "MatchedEntry",
    "CrawlIssue",
    "DEFAULT_KEYWORDS",
    "KeywordCrawler",
    "crawler",
    "crawl_for_keyword_files",
    "crawl_for_keyword_files_sync",
]
