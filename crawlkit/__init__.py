"""Building blocks for a concurrent web crawler, with logging and Go package inspection tools."""

__version__ = "0.1.0"
__all__ = [
    "args",
    "buffer",
    "domain",
    "errors",
    "logbase",
    "logfield",
    "logger",
    "pkgtool",
    "reader",
    "showds",
    "showpds",
    "stdlogger",
]