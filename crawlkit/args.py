"""Argument containers used to set up a crawler scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, List, Optional

from crawlkit.errors import gen_error


@dataclass
class RequestArgs:
    """Request arguments: accepted primary domains and the maximum depth."""

    accepted_domains: Optional[List[str]] = None
    max_depth: int = 0

    def check(self) -> None:
        """Raise CrawlerError if the arguments are invalid."""
        if self.accepted_domains is None:
            raise gen_error("nil accepted primary domain list")

    def same(self, another: Optional["RequestArgs"]) -> bool:
        """Tell whether ``another`` holds the same request arguments."""
        if another is None:
            return False
        if another.max_depth != self.max_depth:
            return False
        return list(another.accepted_domains or []) == list(
            self.accepted_domains or []
        )


_DATA_ARGS_MESSAGES = {
    "req_buffer_cap": "zero request buffer capacity",
    "req_max_buffer_number": "zero max request buffer number",
    "resp_buffer_cap": "zero response buffer capacity",
    "resp_max_buffer_number": "zero max response buffer number",
    "item_buffer_cap": "zero item buffer capacity",
    "item_max_buffer_number": "zero max item buffer number",
    "error_buffer_cap": "zero error buffer capacity",
    "error_max_buffer_number": "zero max error buffer number",
}


@dataclass
class DataArgs:
    """Capacities and buffer counts of the scheduler's buffer pools."""

    req_buffer_cap: int = 0
    req_max_buffer_number: int = 0
    resp_buffer_cap: int = 0
    resp_max_buffer_number: int = 0
    item_buffer_cap: int = 0
    item_max_buffer_number: int = 0
    error_buffer_cap: int = 0
    error_max_buffer_number: int = 0

    def check(self) -> None:
        """Raise CrawlerError for the first zero value, in field order."""
        for item in fields(self):
            if getattr(self, item.name) == 0:
                raise gen_error(_DATA_ARGS_MESSAGES[item.name])


@dataclass(frozen=True)
class ModuleArgsSummary:
    """The sizes of the module lists."""

    downloader_list_size: int = 0
    analyzer_list_size: int = 0
    pipeline_list_size: int = 0


@dataclass
class ModuleArgs:
    """The downloaders, analyzers and pipelines of a scheduler."""

    downloaders: List[Any] = field(default_factory=list)
    analyzers: List[Any] = field(default_factory=list)
    pipelines: List[Any] = field(default_factory=list)

    def check(self) -> None:
        """Raise CrawlerError if any module list is empty."""
        if not self.downloaders:
            raise gen_error("empty downloader list")
        if not self.analyzers:
            raise gen_error("empty analyzer list")
        if not self.pipelines:
            raise gen_error("empty pipeline list")

    def summary(self) -> ModuleArgsSummary:
        """Return the sizes of the module lists."""
        return ModuleArgsSummary(
            downloader_list_size=len(self.downloaders),
            analyzer_list_size=len(self.analyzers),
            pipeline_list_size=len(self.pipelines),
        )