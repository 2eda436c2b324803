import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Generator, List, Sequence

from kwcrawl.core.common.enums import CrawlErrorKind

from ..domain.interfaces import IAsyncFileSystemAccess, IFileSystemAccess
from ..domain.matcher import find_matching_keywords, normalize_keywords
from ..domain.models import CrawlConfiguration, CrawlIssue, CrawlReport, CrawlTally, MatchedEntry

logger = logging.getLogger(__name__)

# A walk yields filesystem requests and is resumed with their result,
# or has the failure thrown back in at the same point.
Walk = Generator[Any, Any, Any]


@dataclass(frozen=True)
class StatPath:
    path: str

@dataclass(frozen=True)
class ListDirectory:
    path: str

@dataclass(frozen=True)
class Fork:
    """
    Independent sub-walks whose results are wanted back in this order.
    """
    branches: Sequence[Walk]


class TraversalPlan:
    """
    The crawl algorithm, written once against abstract filesystem requests.

    It never touches the filesystem itself: run_blocking() and
    run_concurrent() perform the requests, so both execution modes share
    every decision about depth, filters, counting and error recording.
    """

    def __init__(self, config: CrawlConfiguration):
        self.config = config
        self.keywords = normalize_keywords(config.keywords)

    def walk(self, root_path: str) -> Walk:
        tally = CrawlTally()

        # 1. Root validation. Nothing below the root is visited on failure.
        try:
            root = yield StatPath(root_path)
        except Exception as e:
            self._record(tally, CrawlErrorKind.ROOT, root_path, f"Error accessing root path {root_path}: {e}")
            return tally.freeze()

        if not root.is_directory:
            self._record(
                tally,
                CrawlErrorKind.ROOT,
                root_path,
                f"Error accessing root path {root_path}: Root path {root_path} is not a directory"
            )
            return tally.freeze()

        # 2. Recursive descent
        yield from self._visit_directory(root_path, 0, tally)
        return tally.freeze()

    def _visit_directory(self, dir_path: str, depth: int, tally: CrawlTally) -> Walk:
        if self.config.max_depth is not None and depth > self.config.max_depth:
            return

        try:
            names = yield ListDirectory(dir_path)
        except Exception as e:
            # Subtree abandoned, siblings carry on
            self._record(tally, CrawlErrorKind.LISTING, dir_path, f"Error reading directory {dir_path}: {e}")
            return

        tally.directories_scanned += 1

        branches = [self._visit_entry(dir_path, name, depth) for name in names]
        partials = yield Fork(branches)

        # Join point: merged in listing order
        for partial in partials:
            tally.merge(partial)

    def _visit_entry(self, dir_path: str, name: str, depth: int) -> Walk:
        tally = CrawlTally()
        full_path = os.path.join(dir_path, name)

        try:
            metadata = yield StatPath(full_path)
        except Exception as e:
            self._record(tally, CrawlErrorKind.ENTRY, full_path, f"Error processing {full_path}: {e}")
            return tally

        tally.total_scanned += 1

        if metadata.is_directory:
            if self.config.include_directories:
                matched = find_matching_keywords(name, self.keywords)
                if matched:
                    tally.files.append(MatchedEntry(
                        path=full_path,
                        name=name,
                        is_directory=True,
                        matched_keywords=tuple(matched),
                    ))

            # Recurse whether or not the directory itself matched
            yield from self._visit_directory(full_path, depth + 1, tally)

        elif metadata.is_file:
            matched = find_matching_keywords(name, self.keywords)
            if matched:
                extension = os.path.splitext(name)[1]
                allowed = self.config.file_extensions
                if allowed is None or extension in allowed:
                    tally.files.append(MatchedEntry(
                        path=full_path,
                        name=name,
                        is_directory=False,
                        matched_keywords=tuple(matched),
                        extension=extension or None,
                    ))

        return tally

    def _record(self, tally: CrawlTally, kind: CrawlErrorKind, path: str, message: str) -> None:
        logger.warning(message)
        tally.issues.append(CrawlIssue(kind=kind, path=path, message=message))


def _resolve(request: Any, fs) -> Callable:
    if isinstance(request, StatPath):
        return fs.stat
    if isinstance(request, ListDirectory):
        return fs.list_directory
    raise TypeError(f"Unknown filesystem request: {request!r}")


class _Frame:
    """
    A suspended walk on the blocking driver's stack.
    """
    __slots__ = ("walk", "reply", "failure", "branches", "results")

    def __init__(self, walk: Walk):
        self.walk = walk
        self.reply = None
        self.failure = None
        self.branches = None
        self.results = None


def _next_branch(stack: List[_Frame], frame: _Frame) -> None:
    # Start the next pending branch, or hand the collected results back
    branch = next(frame.branches, None)
    if branch is None:
        frame.reply = frame.results
        frame.branches, frame.results = None, None
    else:
        stack.append(_Frame(branch))


def run_blocking(walk: Walk, fs: IFileSystemAccess) -> Any:
    """
    Drives a walk one request at a time: strict depth-first, left to right.

    Forked branches run on an explicit stack rather than the call stack,
    so directory nesting depth is not limited by the recursion limit.
    """
    stack = [_Frame(walk)]
    while True:
        frame = stack[-1]
        try:
            if frame.failure is None:
                request = frame.walk.send(frame.reply)
            else:
                request = frame.walk.throw(frame.failure)
        except StopIteration as done:
            stack.pop()
            if not stack:
                return done.value
            parent = stack[-1]
            parent.results.append(done.value)
            _next_branch(stack, parent)
            continue

        frame.reply, frame.failure = None, None

        if isinstance(request, Fork):
            frame.branches = iter(request.branches)
            frame.results = []
            _next_branch(stack, frame)
            continue

        call = _resolve(request, fs)
        try:
            frame.reply = call(request.path)
        except Exception as e:
            frame.failure = e


async def run_concurrent(walk: Walk, fs: IAsyncFileSystemAccess) -> Any:
    """
    Drives a walk on the event loop. Every Fork is fanned out with
    asyncio.gather, so all entries of one directory (and their subtrees)
    are in flight together; gather returns results in branch order.
    """
    reply, failure = None, None
    while True:
        try:
            request = walk.send(reply) if failure is None else walk.throw(failure)
        except StopIteration as done:
            return done.value

        reply, failure = None, None

        if isinstance(request, Fork):
            results: List[Any] = await asyncio.gather(
                *(run_concurrent(branch, fs) for branch in request.branches)
            )
            reply = list(results)
            continue

        call = _resolve(request, fs)
        try:
            reply = await call(request.path)
        except Exception as e:
            failure = e


def crawl_blocking(root_path: str, config: CrawlConfiguration, fs: IFileSystemAccess) -> CrawlReport:
    return run_blocking(TraversalPlan(config).walk(root_path), fs)


async def crawl_concurrent(root_path: str, config: CrawlConfiguration, fs: IAsyncFileSystemAccess) -> CrawlReport:
    return await run_concurrent(TraversalPlan(config).walk(root_path), fs)
