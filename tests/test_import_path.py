"""Tests for import path parsing and canonicalization."""

import pytest

from modpath import ImportPath, InvalidPathError, check_import_path, parse_import_path
from modpath.constants import PathProblem


PARSE_CASES = [
    ("stdlib/path", ImportPath(path="stdlib/path", qualifier="path"), None),
    ("math", ImportPath(path="math", qualifier="math"), None),
    (
        "stdlib/path:other",
        ImportPath(path="stdlib/path", explicit_qualifier=True, qualifier="other"),
        None,
    ),
    ("math:other", ImportPath(path="math", explicit_qualifier=True, qualifier="other"), None),
    ("foo.com/bar@v0", ImportPath(path="foo.com/bar", version="v0", qualifier="bar"), None),
    ("main.test@v0", ImportPath(path="main.test", version="v0", qualifier="main.test"), None),
    (
        "foo.com/bar@v0:other",
        ImportPath(path="foo.com/bar", version="v0", explicit_qualifier=True, qualifier="other"),
        None,
    ),
    (
        "foo.com/bar@v0:bar",
        ImportPath(path="foo.com/bar", version="v0", explicit_qualifier=True, qualifier="bar"),
        "foo.com/bar@v0",
    ),
]


class TestParseImportPath:
    """Parsing is total and round-trips through str()."""

    @pytest.mark.parametrize("p,want,want_canonical", PARSE_CASES)
    def test_parse(self, p, want, want_canonical):
        parts = parse_import_path(p)
        assert parts == want
        assert str(parts) == p
        assert str(parts.canonical()) == (want_canonical or p)

    @pytest.mark.parametrize("p,want,want_canonical", PARSE_CASES)
    def test_canonical_is_idempotent(self, p, want, want_canonical):
        canon = parse_import_path(p).canonical()
        assert canon.canonical() == canon

    def test_redundant_qualifier_dropped(self):
        canon = parse_import_path("foo.com/bar@v0:bar").canonical()
        assert canon.explicit_qualifier is False
        assert canon.qualifier == "bar"

    @pytest.mark.parametrize("p", ["", ":", "@", "a@", "@v1", "foo.com:8080/bar", "a:b:c", "x@y@z:q", "foo:", "foo.com/bar@v0/baz:q"])
    def test_total_round_trip(self, p):
        assert str(parse_import_path(p)) == p

    def test_colon_before_slash_is_part_of_path(self):
        parts = parse_import_path("foo.com:8080/bar")
        assert parts.path == "foo.com:8080/bar"
        assert parts.explicit_qualifier is False
        assert parts.qualifier == "bar"

    def test_at_before_last_slash_is_part_of_path(self):
        parts = parse_import_path("foo.com/bar@v0/baz")
        assert parts.path == "foo.com/bar@v0/baz"
        assert parts.version is None
        assert parts.qualifier == "baz"
        assert str(parts) == "foo.com/bar@v0/baz"

    def test_version_token_not_validated(self):
        parts = parse_import_path("foo.com/bar@latest")
        assert parts.version == "latest"

    def test_unqualified(self):
        parts = parse_import_path("foo.com/bar@v1:baz").unqualified()
        assert str(parts) == "foo.com/bar@v1"
        assert parts.qualifier == "bar"

    def test_default_qualifier(self):
        assert parse_import_path("foo.com/bar:baz").default_qualifier == "bar"


class TestCheckImportPath:
    """Validation of parsed import paths."""

    @pytest.mark.parametrize("p", ["foo.com/bar", "foo.com/bar@v1", "math", "foo.com/c++@v2:cpp"])
    def test_valid(self, p):
        assert check_import_path(p) is None

    def test_full_version_rejected(self):
        with pytest.raises(InvalidPathError) as exc_info:
            check_import_path("foo.com/bar@v1.2.3")
        assert exc_info.value.kind == "import"
        assert exc_info.value.cause.problem == PathProblem.IMPORT_MAJOR_ONLY

    def test_bad_char(self):
        with pytest.raises(InvalidPathError) as exc_info:
            check_import_path("foo.com/b ar")
        assert str(exc_info.value) == "malformed import path \"foo.com/b ar\": invalid char ' '"
