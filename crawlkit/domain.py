"""Primary domain extraction for host names."""

from __future__ import annotations

import re

from crawlkit.errors import gen_error

_IP_PATTERN = re.compile(
    r"((?:(?:25[0-5]|2[0-4]\d|[01]?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|[01]?\d?\d))",
    re.ASCII,
)

_DOMAIN_SUFFIXES = [
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"\.(com|com\.\w{2})\Z",
        r"\.(gov|gov\.\w{2})\Z",
        r"\.(net|net\.\w{2})\Z",
        r"\.(org|org\.\w{2})\Z",
        r"\.me\Z",
        r"\.biz\Z",
        r"\.info\Z",
        r"\.name\Z",
        r"\.mobi\Z",
        r"\.so\Z",
        r"\.asia\Z",
        r"\.tel\Z",
        r"\.tv\Z",
        r"\.cc\Z",
        r"\.co\Z",
        r"\.\w{2}\Z",
    )
]


def get_primary_domain(host: str) -> str:
    """Return the primary domain of ``host``; IP addresses come back as is.

    Raises CrawlerError for an empty or unrecognized host.
    """
    host = host.strip()
    if not host:
        raise gen_error("empty host")
    if _IP_PATTERN.search(host):
        return host
    suffix_index = 0
    for pattern in _DOMAIN_SUFFIXES:
        match = pattern.search(host)
        if match:
            suffix_index = match.start()
            break
    if suffix_index > 0:
        dot = host.rfind(".", 0, suffix_index)
        return host[dot + 1:]
    raise gen_error("unrecognized host")