"""Module path validation and major-version suffix handling.

A module path may end in a major-version suffix such as ``@v2``; the rest of
the path (the base path) must have a dotted first element, like a host name.
"""

from __future__ import annotations

from typing import Tuple

from . import semver
from .charclass import PathKind, check_path as check_path_kind, first_path_ok
from .constants import Constants, PathProblem
from .errors import (
    InvalidCharacterError,
    InvalidPathError,
    MajorVersionMismatchError,
    MalformedPathError,
    ModulePathError,
    PathCarriesMajorVersionError,
)


def split_path_version(path: str) -> Tuple[str, str, bool]:
    """Split a trailing ``@version`` off ``path``.

    Returns (prefix, version, ok); ok is False and the other two are empty
    when the path carries no well-formed version suffix.

    >>> split_path_version("foo.com/bar@v0.1")
    ('foo.com/bar', 'v0.1', True)
    """
    i = path.rfind(Constants.VERSION_SEPARATOR)
    if i <= 0 or i + 2 >= len(path):
        return "", "", False
    prefix, version = path[:i], path[i + 1:]
    if Constants.VERSION_SEPARATOR in prefix:
        return "", "", False
    if not semver.is_valid(version):
        return "", "", False
    return prefix, version, True


def check_path_without_version(base_path: str) -> None:
    """Check a module path that must not carry a major version suffix.

    Errors are raised without path context; see check_path for the
    wrapped form.
    """
    if split_path_version(base_path)[2]:
        raise PathCarriesMajorVersionError(base_path)
    check_path_kind(base_path, PathKind.MODULE)

    i = base_path.find("/")
    if i < 0:
        i = len(base_path)
    if i == 0:
        raise MalformedPathError(PathProblem.LEADING_SLASH)
    first = base_path[:i]
    if "." not in first:
        raise MalformedPathError(PathProblem.MISSING_DOT)
    if first[0] == "-":
        raise MalformedPathError(PathProblem.LEADING_DASH_FIRST)
    for c in first:
        if not first_path_ok(c):
            raise InvalidCharacterError(c, "first path element")


def check_path(path: str) -> None:
    """Check a module path that may end in a major version suffix.

    Raises:
        InvalidPathError: wrapping the underlying problem
    """
    try:
        base_path, vers, ok = split_path_version(path)
        if ok:
            if semver.major(vers) != vers:
                raise MalformedPathError(PathProblem.MAJOR_ONLY)
        else:
            base_path = path
        check_path_without_version(base_path)
    except ModulePathError as exc:
        raise InvalidPathError(PathKind.MODULE.value, path, exc) from exc


def check_file_path(path: str) -> None:
    """Check that ``path`` is a valid slash-separated file path."""
    try:
        check_path_kind(path, PathKind.FILE)
    except ModulePathError as exc:
        raise InvalidPathError(PathKind.FILE.value, path, exc) from exc


def match_path_major(v: str, path_major: str) -> bool:
    """Report whether version ``v`` is allowed under suffix ``path_major``.

    An empty ``path_major`` admits only v0 and v1 versions.
    """
    m = semver.major(v)
    if path_major == "":
        return m in Constants.UNSUFFIXED_MAJORS
    return m == path_major


def check_path_major(v: str, path_major: str, path: str) -> None:
    """Raise MajorVersionMismatchError unless ``v`` matches ``path_major``."""
    if not match_path_major(v, path_major):
        raise MajorVersionMismatchError(path, v)
