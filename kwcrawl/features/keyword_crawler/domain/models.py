from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

from kwcrawl.core.common.enums import CrawlErrorKind

# Standard Operating Procedures, process docs, administrative and meta files.
DEFAULT_KEYWORDS: Tuple[str, ...] = ("sop", "process", "admin", "meta")


def _string_tuple(option: str, value: Any) -> Tuple[str, ...]:
    # A bare string is iterable too, but would be split into characters
    if isinstance(value, str):
        raise ValueError(f"{option} must be a list of strings, got a single string {value!r}.")
    try:
        items = tuple(value)
    except TypeError:
        raise ValueError(f"{option} must be a list of strings, got {value!r}.") from None
    bad = [item for item in items if not isinstance(item, str)]
    if bad:
        raise ValueError(f"{option} must contain only strings, got {bad[0]!r}.")
    return items


@dataclass(frozen=True)
class CrawlConfiguration:
    """
    Caller-supplied options for one crawl.

    keywords are matched case-insensitively as substrings of entry names.
    max_depth bounds recursion below the root (root = depth 0, inclusive);
    None means unbounded. file_extensions, when set, only ever filters files.
    """
    keywords: Tuple[str, ...] = DEFAULT_KEYWORDS
    max_depth: Optional[int] = None
    include_directories: bool = False
    file_extensions: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        # Accept lists from callers but keep the instance hashable/immutable
        object.__setattr__(self, "keywords", _string_tuple("keywords", self.keywords))
        if self.file_extensions is not None:
            object.__setattr__(self, "file_extensions", _string_tuple("file_extensions", self.file_extensions))

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}.")
            if self.max_depth < 0:
                raise ValueError(f"max_depth cannot be negative ({self.max_depth}).")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrawlConfiguration":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown crawl option(s): {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": list(self.keywords),
            "max_depth": self.max_depth,
            "include_directories": self.include_directories,
            "file_extensions": list(self.file_extensions) if self.file_extensions is not None else None,
        }


@dataclass(frozen=True)
class PathMetadata:
    """
    What the crawler needs to know about a path after a stat.
    Anything that is neither (fifo, socket, device) has both flags False.
    """
    is_directory: bool
    is_file: bool


@dataclass(frozen=True)
class MatchedEntry:
    """
    One reported hit.
    extension is None for directories and for files without one.
    """
    path: str
    name: str
    is_directory: bool
    matched_keywords: Tuple[str, ...]
    extension: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "is_directory": self.is_directory,
            "matched_keywords": list(self.matched_keywords),
            "extension": self.extension,
        }


@dataclass(frozen=True)
class CrawlIssue:
    """
    Typed view of a recorded failure. message is the exact string that
    also appears in CrawlReport.errors.
    """
    kind: CrawlErrorKind
    path: str
    message: str

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "path": self.path, "message": self.message}


@dataclass(frozen=True)
class CrawlReport:
    """
    Snapshot returned after a crawl completes.
    """
    files: Tuple[MatchedEntry, ...] = ()
    total_scanned: int = 0
    directories_scanned: int = 0
    issues: Tuple[CrawlIssue, ...] = ()

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(issue.message for issue in self.issues)

    @property
    def root_failed(self) -> bool:
        """True when the root could not be crawled at all."""
        return any(issue.kind == CrawlErrorKind.ROOT for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": [entry.to_dict() for entry in self.files],
            "total_scanned": self.total_scanned,
            "directories_scanned": self.directories_scanned,
            "errors": list(self.errors),
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class CrawlTally:
    """
    Mutable accumulator for one branch of the walk.
    Each branch owns its tally; parents merge children at join points.
    """
    files: list = field(default_factory=list)
    total_scanned: int = 0
    directories_scanned: int = 0
    issues: list = field(default_factory=list)

    def merge(self, other: "CrawlTally") -> None:
        self.files.extend(other.files)
        self.total_scanned += other.total_scanned
        self.directories_scanned += other.directories_scanned
        self.issues.extend(other.issues)

    def freeze(self) -> CrawlReport:
        return CrawlReport(
            files=tuple(self.files),
            total_scanned=self.total_scanned,
            directories_scanned=self.directories_scanned,
            issues=tuple(self.issues),
        )
