# File: kwcrawl/core/common/enums.py

from enum import Enum, unique

@unique
class CrawlMode(str, Enum):
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"

@unique
class CrawlErrorKind(str, Enum):
    ROOT = "root"
    LISTING = "listing"
    ENTRY = "entry"
