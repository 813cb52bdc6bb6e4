"""Tests for the character classes shared by all path kinds."""

import pytest

from modpath.charclass import (
    PathKind,
    check_elem,
    check_path,
    file_name_ok,
    first_path_ok,
    import_path_ok,
    mod_path_ok,
)
from modpath.errors import InvalidCharacterError, MalformedPathError


class TestCharacterClasses:
    """Per-character predicates."""

    @pytest.mark.parametrize("c", list("azAZ09-._~+"))
    def test_module_chars(self, c):
        assert mod_path_ok(c)
        assert import_path_ok(c)

    @pytest.mark.parametrize("c", list(" !\"'`*:@/\\\t\x00") + ["é"])
    def test_module_rejects(self, c):
        assert not mod_path_ok(c)

    def test_first_element(self):
        assert first_path_ok("a")
        assert first_path_ok("-")
        assert not first_path_ok("A")
        assert not first_path_ok("_")

    def test_file_names(self):
        for c in "!#$%&()+,-.=@[]^_{}~ ":
            assert file_name_ok(c)
        assert file_name_ok("é")
        assert not file_name_ok("*")
        assert not file_name_ok("☃")


class TestCheckElem:
    """Element rules differ slightly by kind."""

    def test_leading_dot_allowed_for_files(self):
        check_elem(".hidden", PathKind.FILE)
        check_elem(".hidden", PathKind.IMPORT)
        with pytest.raises(MalformedPathError):
            check_elem(".hidden", PathKind.MODULE)

    def test_short_names_allowed_for_files(self):
        check_elem("PROGRA~1", PathKind.FILE)
        with pytest.raises(MalformedPathError):
            check_elem("PROGRA~1", PathKind.IMPORT)

    def test_windows_names_rejected_for_all_kinds(self):
        for kind in PathKind:
            with pytest.raises(MalformedPathError):
                check_elem("nul.txt", kind)

    def test_first_bad_char_reported(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            check_elem("a'b\"c", PathKind.MODULE)
        assert exc_info.value.char == "'"
        assert str(exc_info.value) == "invalid char '\\''"

    def test_control_char_quoted(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            check_elem("a\tb", PathKind.MODULE)
        assert str(exc_info.value) == "invalid char '\\t'"


class TestCheckPath:
    """Whole-path structure."""

    def test_leading_dash_allowed_for_files(self):
        check_path("-x/y", PathKind.FILE)
        with pytest.raises(MalformedPathError):
            check_path("-x/y", PathKind.IMPORT)
