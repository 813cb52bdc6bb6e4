"""Exception hierarchy for module path and version validation.

Every error keeps the offending input in structured fields and renders its
message from those fields in ``__str__``, so callers can match on the type
and attributes instead of the formatted text.
"""

from __future__ import annotations

import json
from typing import Optional

from .constants import PathProblem


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted, escaped string literal."""
    return json.dumps(text, ensure_ascii=False)


def quote_char(char: str) -> str:
    """Return ``char`` as a single-quoted character literal."""
    if char == "'":
        return "'\\''"
    if char == "\\":
        return "'\\\\'"
    if char.isprintable():
        return f"'{char}'"
    return "'" + json.dumps(char)[1:-1] + "'"


class ModulePathError(ValueError):
    """Base exception for all identifier validation failures."""

    def __init__(self, *fields) -> None:
        # args holds the constructor arguments; pickle and copy rebuild from it.
        super().__init__(*fields)


class InvalidCharacterError(ModulePathError):
    """Raised for the first character outside the allowed class."""

    def __init__(self, char: str, context: Optional[str] = None):
        self.char = char
        self.context = context
        super().__init__(char, context)

    def __str__(self) -> str:
        msg = f"invalid char {quote_char(self.char)}"
        if self.context:
            msg += f" in {self.context}"
        return msg


class MalformedPathError(ModulePathError):
    """Raised for structural path violations."""

    def __init__(self, problem: PathProblem, element: Optional[str] = None):
        self.problem = problem
        self.element = element
        super().__init__(problem, element)

    def __str__(self) -> str:
        return self.problem.value.format(element=quote(self.element or ""))


class PathCarriesMajorVersionError(ModulePathError):
    """Raised when a bare path already carries an @vN suffix."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return "module path inappropriately contains major version"


class InvalidPathError(ModulePathError):
    """Wraps a path error with the kind and full text of the rejected path."""

    def __init__(self, kind: str, path: str, cause: ModulePathError):
        self.kind = kind
        self.path = path
        self.cause = cause
        super().__init__(kind, path, cause)

    def __str__(self) -> str:
        return f"malformed {self.kind} path {quote(self.path)}: {self.cause}"


class MalformedVersionError(ModulePathError):
    """Raised when a version does not parse as a semantic version."""

    def __init__(self, version: str, path: str):
        self.version = version
        self.path = path
        super().__init__(version, path)

    def __str__(self) -> str:
        return f"version {quote(self.version)} (of module {quote(self.path)}) is not well formed"


class NonCanonicalVersionError(ModulePathError):
    """Raised when a version parses but differs from its canonical form."""

    def __init__(self, version: str, path: str):
        self.version = version
        self.path = path
        super().__init__(version, path)

    def __str__(self) -> str:
        return f"version {quote(self.version)} (of module {quote(self.path)}) is not canonical"


class MajorVersionMismatchError(ModulePathError):
    """Raised when the path's major suffix disagrees with the version."""

    def __init__(self, path: str, version: str):
        self.path = path
        self.version = version
        super().__init__(path, version)

    def __str__(self) -> str:
        return f"mismatched major version suffix in {quote(self.path)} (version {self.version})"


class MissingMajorVersionError(ModulePathError):
    """Raised when neither a version nor a suffix fixes the major version."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"path {quote(self.path)} has no major version"


class InvalidVersionStringError(ModulePathError):
    """Raised when a path@version string has no version part."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(text)

    def __str__(self) -> str:
        return f"invalid module path@version {quote(self.text)}"


class DisallowedVersionError(ModulePathError):
    """Raised when a version cannot be escaped safely."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(version)

    def __str__(self) -> str:
        return f"version {quote(self.version)} is disallowed"


class InvalidEscapeError(ModulePathError):
    """Raised when an escaped path or version does not unescape cleanly."""

    def __init__(self, kind: str, escaped: str, cause: Optional[ModulePathError] = None):
        self.kind = kind
        self.escaped = escaped
        self.cause = cause
        super().__init__(kind, escaped, cause)

    def __str__(self) -> str:
        msg = f"invalid escaped {self.kind} {quote(self.escaped)}"
        if self.cause is not None:
            msg += f": {self.cause}"
        return msg
