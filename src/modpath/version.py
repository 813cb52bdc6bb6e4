"""Module versions: a module path paired with a canonical version.

Major versions 0 and 1 may be used without a path suffix; from v2 onwards
the path must end in the matching ``@vN`` suffix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from . import semver
from .common.logging_utils import extra_context, is_debug_enabled
from .constants import Constants
from .errors import (
    InvalidVersionStringError,
    MalformedVersionError,
    MissingMajorVersionError,
    ModulePathError,
    NonCanonicalVersionError,
)
from .path import check_path, check_path_major, split_path_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QualifiedVersion:
    """A validated module path with an optional canonical version.

    Build instances with new_version or parse_version.
    """
    base_path: str
    major_suffix: Optional[int] = None
    version: Optional[str] = None

    @property
    def path(self) -> str:
        """Module path including its major version suffix, if any."""
        if self.major_suffix is None:
            return self.base_path
        return f"{self.base_path}{Constants.VERSION_SEPARATOR}v{self.major_suffix}"

    def __str__(self) -> str:
        if self.version is None:
            return self.path
        return f"{self.base_path}{Constants.VERSION_SEPARATOR}{self.version}"


def _trace_rejection(action: str, path: str, version: str, exc: ModulePathError) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Rejected %s@%s: %s",
            path,
            version,
            exc,
            extra=extra_context(
                event="validation",
                component="version",
                action=action,
                outcome="rejected",
                error_type=type(exc).__name__,
            ),
        )


def _check_version_form(path: str, version: str) -> None:
    if not semver.is_valid(version):
        raise MalformedVersionError(version, path)
    if not semver.is_canonical(version):
        raise NonCanonicalVersionError(version, path)


def check(path: str, version: str) -> None:
    """Check that ``path`` and ``version`` together form a valid module version.

    The path may carry a major suffix; the version must be canonical and its
    major must agree with the suffix.

    Raises:
        ModulePathError: the first failing rule
    """
    try:
        check_path(path)
        _check_version_form(path, version)
        path_major = split_path_version(path)[1]
        check_path_major(version, path_major, path)
    except ModulePathError as exc:
        _trace_rejection("check", path, version, exc)
        raise


def new_version(path: str, version: str = "") -> QualifiedVersion:
    """Build a QualifiedVersion from a module path and an optional version.

    With no version the path must carry a major suffix. A path without a
    suffix gets one added when the version's major is 2 or more.
    """
    try:
        return _new_version(path, version)
    except ModulePathError as exc:
        _trace_rejection("new_version", path, version, exc)
        raise


def _new_version(path: str, version: str) -> QualifiedVersion:
    check_path(path)
    base_path, path_major, ok = split_path_version(path)
    if not ok:
        base_path = path

    if version == "":
        if not ok:
            raise MissingMajorVersionError(path)
        return QualifiedVersion(base_path=base_path, major_suffix=int(path_major[1:]))

    _check_version_form(path, version)
    if ok:
        check_path_major(version, path_major, path)
        return QualifiedVersion(base_path=base_path, major_suffix=int(path_major[1:]), version=version)

    vmajor = semver.major(version)
    if vmajor in Constants.UNSUFFIXED_MAJORS:
        return QualifiedVersion(base_path=base_path, version=version)

    if is_debug_enabled(logger):
        logger.debug(
            "Adding major suffix %s to %s",
            vmajor,
            path,
            extra=extra_context(
                event="decision",
                component="version",
                action="new_version",
                outcome="suffix_synthesized",
            ),
        )
    return QualifiedVersion(base_path=base_path, major_suffix=int(vmajor[1:]), version=version)


def parse_version(s: str) -> QualifiedVersion:
    """Parse a ``path@version`` string, splitting at the last "@".

    The path part must not carry its own major suffix, since ``str()`` of
    the result has to reproduce ``s``.
    """
    path, sep, version = s.rpartition(Constants.VERSION_SEPARATOR)
    if not sep or version == "" or Constants.VERSION_SEPARATOR in path:
        raise InvalidVersionStringError(s)
    return new_version(path, version)


def _sort_key(v: QualifiedVersion):
    parsed = semver.parse(v.version or "")
    return (
        v.path,
        parsed is not None,
        parsed.precedence_key() if parsed is not None else (),
        v.version or "",
    )


def sort_versions(versions: Iterable[QualifiedVersion]) -> List[QualifiedVersion]:
    """Return ``versions`` ordered by path, then by version precedence.

    Versions with equal precedence fall back to their raw text.
    """
    return sorted(versions, key=_sort_key)
