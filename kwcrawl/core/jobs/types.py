from enum import Enum

class JobType(str, Enum):
    KEYWORD_CRAWL = "keyword_crawl"

class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
