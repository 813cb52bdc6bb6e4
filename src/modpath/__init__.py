"""Validation and canonicalization of module paths and versions."""

from . import semver
from .charclass import PathKind
from .errors import (
    DisallowedVersionError,
    InvalidCharacterError,
    InvalidEscapeError,
    InvalidPathError,
    InvalidVersionStringError,
    MajorVersionMismatchError,
    MalformedPathError,
    MalformedVersionError,
    MissingMajorVersionError,
    ModulePathError,
    NonCanonicalVersionError,
    PathCarriesMajorVersionError,
)
from .escape import escape_path, escape_version, unescape_path, unescape_version
from .importpath import ImportPath, check_import_path, parse_import_path
from .path import (
    check_file_path,
    check_path,
    check_path_major,
    check_path_without_version,
    match_path_major,
    split_path_version,
)
from .version import QualifiedVersion, check, new_version, parse_version, sort_versions

__all__ = [
    "semver",
    "PathKind",
    "ModulePathError",
    "InvalidCharacterError",
    "MalformedPathError",
    "PathCarriesMajorVersionError",
    "InvalidPathError",
    "MalformedVersionError",
    "NonCanonicalVersionError",
    "MajorVersionMismatchError",
    "MissingMajorVersionError",
    "InvalidVersionStringError",
    "DisallowedVersionError",
    "InvalidEscapeError",
    "check_path_without_version",
    "check_path",
    "check_file_path",
    "split_path_version",
    "match_path_major",
    "check_path_major",
    "check",
    "new_version",
    "parse_version",
    "sort_versions",
    "QualifiedVersion",
    "escape_path",
    "escape_version",
    "unescape_path",
    "unescape_version",
    "ImportPath",
    "parse_import_path",
    "check_import_path",
]
