from __future__ import annotations

import re

from .errors import MalformedVersionError


# Build metadata after '+' is accepted but not validated.
_VERSION_RE = re.compile(r"v([0-9]+)\.([0-9]+)\.([0-9]+)(?:\+.*)?", re.DOTALL)


def trim_version(version: str) -> str:
    """Return the `vMAJOR.MINOR.PATCH` part of a server version string.

    A missing leading 'v' is added. Build metadata is dropped.
    """

    candidate = version if version.startswith("v") else f"v{version}"
    m = _VERSION_RE.fullmatch(candidate)
    if m is None:
        raise MalformedVersionError(version)
    major, minor, patch = m.groups()
    return f"v{major}.{minor}.{patch}"
