"""Runtime version to dependency requirement conversion."""

from __future__ import annotations

import re


_SEMVER_RE = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
)


def format_version(version: str) -> str:
    """Shorten a full semantic version to ``<major>.<minor>[-<pre>]``.

    The patch number and build metadata are dropped; major and minor are
    copied as written::

        format_version("1.2.3")       -> "1.2"
        format_version("1.2.3-rc.0")  -> "1.2-rc.0"

    Raises:
        ValueError: If *version* is not ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``.
    """
    match = _SEMVER_RE.fullmatch(version.strip())
    if match is None:
        raise ValueError(f"Invalid semantic version: {version!r}")

    short = f"{match['major']}.{match['minor']}"
    if match["pre"]:
        short += f"-{match['pre']}"
    return short
