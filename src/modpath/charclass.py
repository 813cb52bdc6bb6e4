"""Character classes and element rules shared by every path grammar."""

from __future__ import annotations

from enum import Enum

from .constants import Constants, PathProblem
from .errors import InvalidCharacterError, MalformedPathError


class PathKind(Enum):
    """Kind of path being validated; selects the character class."""
    MODULE = "module"
    IMPORT = "import"
    FILE = "file"


def _is_ascii_alnum(c: str) -> bool:
    return ("0" <= c <= "9") or ("A" <= c <= "Z") or ("a" <= c <= "z")


def mod_path_ok(c: str) -> bool:
    """Report whether ``c`` may appear in a module path element."""
    return _is_ascii_alnum(c) or c in Constants.MODULE_PUNCTUATION


def import_path_ok(c: str) -> bool:
    """Report whether ``c`` may appear in an import path element."""
    return mod_path_ok(c)


def file_name_ok(c: str) -> bool:
    """Report whether ``c`` may appear in a file name element.

    Non-ASCII letters are accepted; other non-ASCII characters are not.
    """
    if c < "\x80":
        return _is_ascii_alnum(c) or c in Constants.FILE_NAME_PUNCTUATION
    return c.isalpha()


def first_path_ok(c: str) -> bool:
    """Report whether ``c`` may appear in the first element of a module path."""
    return ("0" <= c <= "9") or ("a" <= c <= "z") or c in Constants.FIRST_ELEMENT_PUNCTUATION


_CHAR_CHECKS = {
    PathKind.MODULE: mod_path_ok,
    PathKind.IMPORT: import_path_ok,
    PathKind.FILE: file_name_ok,
}


def check_elem(elem: str, kind: PathKind) -> None:
    """Validate a single slash-free path element.

    Raises:
        MalformedPathError: for structural problems
        InvalidCharacterError: for the first character outside the class
    """
    if elem == "":
        raise MalformedPathError(PathProblem.EMPTY_ELEMENT)
    if elem.count(".") == len(elem):
        raise MalformedPathError(PathProblem.DOTS_ONLY, elem)
    if elem[0] == "." and kind == PathKind.MODULE:
        raise MalformedPathError(PathProblem.LEADING_DOT, elem)
    if elem[-1] == ".":
        raise MalformedPathError(PathProblem.TRAILING_DOT, elem)

    char_ok = _CHAR_CHECKS[kind]
    for c in elem:
        if not char_ok(c):
            raise InvalidCharacterError(c)

    short = elem.split(".", 1)[0]
    for bad in Constants.BAD_WINDOWS_NAMES:
        if bad.lower() == short.lower():
            raise MalformedPathError(PathProblem.WINDOWS_NAME, short)

    if kind == PathKind.FILE:
        # Short names only matter for import and module paths.
        return

    tilde = short.rfind("~")
    if 0 <= tilde < len(short) - 1:
        suffix = short[tilde + 1:]
        if all("0" <= c <= "9" for c in suffix):
            raise MalformedPathError(PathProblem.WINDOWS_SHORT_NAME, elem)


def check_path(path: str, kind: PathKind) -> None:
    """Validate the slash-separated structure of ``path`` and each element.

    Errors are raised unwrapped; callers add the path context.
    """
    if path == "":
        raise MalformedPathError(PathProblem.EMPTY_STRING)
    if path[0] == "-" and kind != PathKind.FILE:
        raise MalformedPathError(PathProblem.LEADING_DASH)
    if "//" in path:
        raise MalformedPathError(PathProblem.DOUBLE_SLASH)
    if path[-1] == "/":
        raise MalformedPathError(PathProblem.TRAILING_SLASH)
    for elem in path.split("/"):
        check_elem(elem, kind)
