"""Case escaping of module paths and versions.

Paths and versions may contain uppercase letters, but they end up as file
names and URLs on case-insensitive systems. Each uppercase letter is
therefore written as "!" followed by its lowercase form, so that
"github.com/Azure" becomes "github.com/!azure". The "!" marker is not a
valid path character, so the mapping is reversible.
"""
from __future__ import annotations

from typing import Optional

from .charclass import PathKind, check_elem
from .constants import Constants
from .errors import DisallowedVersionError, InvalidEscapeError, ModulePathError
from .path import check_path, check_path_without_version


def _escape_string(s: str) -> str:
    if not any("A" <= c <= "Z" for c in s):
        return s
    out = []
    for c in s:
        if "A" <= c <= "Z":
            out.append(Constants.ESCAPE_MARKER + c.lower())
        else:
            out.append(c)
    return "".join(out)


def _unescape_string(escaped: str) -> Optional[str]:
    out = []
    bang = False
    for c in escaped:
        if c >= "\x80":
            return None
        if bang:
            bang = False
            if not "a" <= c <= "z":
                return None
            out.append(c.upper())
            continue
        if c == Constants.ESCAPE_MARKER:
            bang = True
            continue
        if "A" <= c <= "Z":
            return None
        out.append(c)
    if bang:
        return None
    return "".join(out)


def escape_path(path: str) -> str:
    """Return the case-escaped form of the bare module path ``path``.

    Raises the same error as check_path_without_version for invalid paths.
    """
    check_path_without_version(path)
    return _escape_string(path)


def escape_version(v: str) -> str:
    """Return the case-escaped form of version ``v``.

    >>> escape_version("v2.3.1-ABcD")
    'v2.3.1-!a!bc!d'
    """
    try:
        check_elem(v, PathKind.FILE)
    except ModulePathError as exc:
        raise DisallowedVersionError(v) from exc
    if Constants.ESCAPE_MARKER in v:
        raise DisallowedVersionError(v)
    return _escape_string(v)


def unescape_path(escaped: str) -> str:
    """Return the module path encoded by ``escaped``."""
    path = _unescape_string(escaped)
    if path is None:
        raise InvalidEscapeError("module path", escaped)
    try:
        check_path(path)
    except ModulePathError as exc:
        raise InvalidEscapeError("module path", escaped, exc) from exc
    return path


def unescape_version(escaped: str) -> str:
    """Return the version encoded by ``escaped``."""
    v = _unescape_string(escaped)
    if v is None:
        raise InvalidEscapeError("version", escaped)
    try:
        check_elem(v, PathKind.FILE)
    except ModulePathError as exc:
        raise InvalidEscapeError("version", escaped, exc) from exc
    return v
