"""Crawler error types and helpers that build scheduler errors."""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """The part of the crawler an error comes from."""

    DOWNLOADER = "downloader error"
    ANALYZER = "analyzer error"
    PIPELINE = "pipeline error"
    SCHEDULER = "scheduler error"

    def __str__(self) -> str:
        return self.value


class CrawlerError(Exception):
    """An error raised by some part of the crawler."""

    def __init__(self, error_type: ErrorType, message: str) -> None:
        self.error_type = ErrorType(error_type)
        self.message = message
        super().__init__(f"crawler error: {self.error_type.value}: {message}")


class IllegalParameterError(ValueError):
    """Raised when a parameter is not acceptable."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"illegal parameter: {message}")


def gen_error(message: str) -> CrawlerError:
    """Build a scheduler error with the given message."""
    return CrawlerError(ErrorType.SCHEDULER, message)


def gen_error_by_error(error: BaseException) -> CrawlerError:
    """Build a scheduler error from another error."""
    return CrawlerError(ErrorType.SCHEDULER, str(error))


def gen_parameter_error(message: str) -> CrawlerError:
    """Build a scheduler error that reports an illegal parameter."""
    return CrawlerError(ErrorType.SCHEDULER, str(IllegalParameterError(message)))