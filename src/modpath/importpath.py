"""Import paths: a package path with optional major version and qualifier.

The general form is ``path[@version][:qualifier]``, for example
``foo.com/bar@v0:baz``. The qualifier is the name the imported package is
referred to by and defaults to the last element of the path.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from . import semver
from .charclass import PathKind, check_path as check_path_kind
from .constants import Constants, PathProblem
from .errors import InvalidPathError, MalformedPathError, ModulePathError


def _default_qualifier(path: str) -> str:
    return path.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class ImportPath:
    """The parts of a parsed import path."""
    path: str
    version: Optional[str] = None
    explicit_qualifier: bool = False
    qualifier: str = ""

    @property
    def default_qualifier(self) -> str:
        """Qualifier implied by the path alone."""
        return _default_qualifier(self.path)

    def canonical(self) -> ImportPath:
        """Return a copy without an explicit qualifier when it is redundant."""
        if self.explicit_qualifier and self.qualifier == self.default_qualifier:
            return replace(self, explicit_qualifier=False, qualifier=self.default_qualifier)
        return self

    def unqualified(self) -> ImportPath:
        """Return a copy with any explicit qualifier removed."""
        return replace(self, explicit_qualifier=False, qualifier=self.default_qualifier)

    def __str__(self) -> str:
        s = self.path
        if self.version is not None:
            s += Constants.VERSION_SEPARATOR + self.version
        if self.explicit_qualifier:
            s += Constants.QUALIFIER_SEPARATOR + self.qualifier
        return s


def parse_import_path(p: str) -> ImportPath:
    """Split ``p`` into its path, version and qualifier.

    Parsing never fails; use check_import_path to validate the result.

    >>> str(parse_import_path("foo.com/bar@v0:bar").canonical())
    'foo.com/bar@v0'
    """
    rest = p
    qualifier: Optional[str] = None
    i = p.rfind(Constants.QUALIFIER_SEPARATOR)
    if i >= 0 and i > p.rfind("/"):
        rest, qualifier = p[:i], p[i + 1:]

    path, version = rest, None
    j = rest.rfind(Constants.VERSION_SEPARATOR)
    if 0 < j < len(rest) - 1 and j > rest.rfind("/"):
        path, version = rest[:j], rest[j + 1:]

    if qualifier is None:
        return ImportPath(path=path, version=version, qualifier=_default_qualifier(path))
    return ImportPath(path=path, version=version, explicit_qualifier=True, qualifier=qualifier)


def check_import_path(p: str) -> None:
    """Check that ``p`` is a valid import path.

    Raises:
        InvalidPathError: wrapping the underlying problem
    """
    parts = parse_import_path(p)
    try:
        if parts.version is not None and semver.major(parts.version) != parts.version:
            raise MalformedPathError(PathProblem.IMPORT_MAJOR_ONLY)
        check_path_kind(parts.path, PathKind.IMPORT)
    except ModulePathError as exc:
        raise InvalidPathError(PathKind.IMPORT.value, p, exc) from exc
