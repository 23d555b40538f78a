"""
Path helpers shared by the providers.

All base-relative arguments go through join_path exactly once, so callers may
pass "a.txt", "/a.txt" or "sub//a.txt" and get the same result.
"""
from typing import Tuple

from file_providers.support.errors import InvalidPathError

SEPARATOR = "/"


def join_path(base: str, *parts: str) -> str:
    """
    Join a base location and any number of relative parts with single separators.

    A leading separator is kept only when the base starts with one. Empty
    segments are dropped, "." and ".." are passed through untouched.

    >>> join_path("/data", "/a.txt")
    '/data/a.txt'
    >>> join_path("", "/reports/", "q1.csv")
    'reports/q1.csv'
    """
    segments = [
        segment
        for part in (base, *parts)
        for segment in part.split(SEPARATOR)
        if segment
    ]
    joined = SEPARATOR.join(segments)

    if base.startswith(SEPARATOR):
        return SEPARATOR + joined
    return joined


def split_bucket_location(location: str) -> Tuple[str, str]:
    """
    Split a ``{bucket}/{remainder}`` location on its first separator.

    :raises InvalidPathError: If there is no separator or the bucket part is empty
    """
    if SEPARATOR not in location:
        raise InvalidPathError(
            f"Destination '{location}' has no '/'. It should be {{bucket}}/{{file_name}}",
            location,
        )

    bucket, remainder = location.split(SEPARATOR, 1)
    if not bucket:
        raise InvalidPathError(
            f"Destination '{location}' does not start with a bucket name", location
        )
    return bucket, remainder


def key_prefix(path: str) -> str:
    """
    Turn a listing path into an object key prefix.

    Leading separators are dropped like in join_path, but a trailing one is
    kept so "reports/" does not also match "reports_old/...".

    >>> key_prefix("/reports/")
    'reports/'
    >>> key_prefix("reports")
    'reports'
    """
    prefix = join_path("", path)
    if prefix and path.endswith(SEPARATOR):
        return prefix + SEPARATOR
    return prefix
