"""Tests for the public scanning API: scan, scan_file, Scanner."""

import logging
from pathlib import Path

import pytest

from hscan import (
    DiagnosticKind,
    ParseResult,
    Require,
    RequireKind,
    Scanner,
    scan,
    scan_file,
)

MODULE_SOURCE = """\
#include "hscpp/module/Tracker.h"
#include "Printer.h"

hscpp_require_source("Printer.cpp");
hscpp_require_include("../include", "../../lib/include");
hscpp_require_lib("Dependency.lib");
hscpp_preprocessor_definitions(HSCPP_RUNTIME, "VERSION=3");

/* hscpp_require_lib("ignored.lib") */
void Printer::Update()
{
    // hscpp_require_source("nope.cpp")
    Log("hscpp_require_source(\\"string.cpp\\")");
}
"""


class TestBasicExtraction:
    """Directives are extracted with their kinds and arguments."""

    def test_source_with_two_paths(self) -> None:
        result = scan('hscpp_require_source("a.cpp", "b.cpp")')
        assert result.requires == (
            Require(kind=RequireKind.SOURCE, paths=("a.cpp", "b.cpp")),
        )
        assert result.preprocessor_definitions == ()

    def test_kinds_combine_in_file_order(self) -> None:
        source = (
            'hscpp_require_include("inc");\n'
            'hscpp_require_lib("x.lib");\n'
            'hscpp_preprocessor_definitions(DEBUG, "RELEASE");\n'
        )
        result = scan(source)
        assert result.requires == (
            Require(RequireKind.INCLUDE, ("inc",)),
            Require(RequireKind.LIBRARY, ("x.lib",)),
        )
        assert result.preprocessor_definitions == ("DEBUG", "RELEASE")

    def test_realistic_module(self) -> None:
        result = scan(MODULE_SOURCE)
        assert result.requires == (
            Require(RequireKind.SOURCE, ("Printer.cpp",)),
            Require(RequireKind.INCLUDE, ("../include", "../../lib/include")),
            Require(RequireKind.LIBRARY, ("Dependency.lib",)),
        )
        assert result.preprocessor_definitions == ("HSCPP_RUNTIME", "VERSION=3")

    def test_order_is_not_grouped_by_kind(self) -> None:
        source = (
            'hscpp_require_lib("a.lib");\n'
            'hscpp_require_source("s.cpp");\n'
            'hscpp_require_lib("a.lib");\n'
        )
        result = scan(source)
        assert [req.kind for req in result.requires] == [
            RequireKind.LIBRARY,
            RequireKind.SOURCE,
            RequireKind.LIBRARY,
        ]
        assert result.libraries == ("a.lib", "a.lib")

    def test_duplicate_paths_are_kept(self) -> None:
        result = scan('hscpp_require_source("a.cpp", "a.cpp")')
        assert result.requires[0].paths == ("a.cpp", "a.cpp")

    def test_definitions_accumulate_across_calls(self) -> None:
        source = (
            "hscpp_preprocessor_definitions(A);\n"
            "int x;\n"
            'hscpp_preprocessor_definitions("B", A);\n'
        )
        assert scan(source).preprocessor_definitions == ("A", "B", "A")

    def test_whitespace_around_arguments(self) -> None:
        source = 'hscpp_require_source  (\n  "a.cpp" ,\n\t"b.cpp"\n)'
        assert scan(source).sources == ("a.cpp", "b.cpp")

    def test_escaped_quote_in_argument_is_unescaped(self) -> None:
        result = scan('hscpp_preprocessor_definitions("MSG=\\"hi\\"")')
        assert result.preprocessor_definitions == ('MSG="hi"',)

    def test_other_backslashes_kept_verbatim(self) -> None:
        result = scan('hscpp_require_include("C:\\\\sdk\\\\include")')
        assert result.include_paths == ("C:\\\\sdk\\\\include",)

    def test_empty_source(self) -> None:
        assert scan("") == ParseResult.empty()


class TestSuppression:
    """Directive text inside comments and strings is never recognized."""

    def test_line_comment(self) -> None:
        assert scan('// hscpp_require_source("foo.cpp")\n').requires == ()

    def test_line_comment_without_trailing_newline(self) -> None:
        assert scan('// hscpp_require_source("foo.cpp")').requires == ()

    def test_block_comment(self) -> None:
        source = '/*\n hscpp_require_lib("x.lib")\n*/ hscpp_require_lib("y.lib")'
        assert scan(source).libraries == ("y.lib",)

    def test_string_literal(self) -> None:
        source = 'const char* s = "hscpp_require_source(\\"x.cpp\\")";'
        assert scan(source).requires == ()

    def test_directive_after_line_comment_is_found(self) -> None:
        source = '// note\nhscpp_require_source("a.cpp")'
        assert scan(source).sources == ("a.cpp",)

    def test_division_is_not_a_comment(self) -> None:
        source = 'int half = total / 2; hscpp_require_source("a.cpp")'
        assert scan(source).sources == ("a.cpp",)


class TestNonMatches:
    """Identifiers that merely resemble directives are silently ignored."""

    def test_keyword_with_suffix_and_no_paren(self) -> None:
        collected = []
        result = scan("hscpp_require_source_custom_thing", on_diagnostic=collected.append)
        assert result.requires == ()
        assert collected == []

    def test_unknown_suffix_after_common_prefix(self) -> None:
        collected = []
        result = scan('hscpp_require_header("x.h")', on_diagnostic=collected.append)
        assert result.is_empty
        assert collected == []

    def test_keyword_followed_by_string_not_paren(self) -> None:
        collected = []
        result = scan('hscpp_require_source "a.cpp"', on_diagnostic=collected.append)
        assert result.is_empty
        assert collected == []

    def test_truncated_keyword_at_end_of_buffer(self) -> None:
        assert scan("hscpp_require_sou").is_empty


class TestLocalErrorRecovery:
    """A malformed directive is dropped without affecting later ones."""

    def test_missing_closing_paren_then_valid_directive(self) -> None:
        collected = []
        source = 'hscpp_require_source("a.cpp"\nint x = 0;\nhscpp_require_lib("y.lib");\n'
        result = scan(source, on_diagnostic=collected.append)

        assert result.requires == (Require(RequireKind.LIBRARY, ("y.lib",)),)
        assert len(collected) == 1
        assert collected[0].kind is DiagnosticKind.MISSING_CLOSING_PAREN
        assert collected[0].location is not None
        assert collected[0].location.lineno == 2
        assert collected[0].location.col_offset == 1

    def test_bad_argument_drops_whole_call(self) -> None:
        collected = []
        result = scan('hscpp_require_source("a.cpp", b.cpp)', on_diagnostic=collected.append)
        assert result.requires == ()
        assert [d.kind for d in collected] == [DiagnosticKind.MISSING_OPENING_QUOTE]

    def test_each_malformed_call_reports_once(self) -> None:
        collected = []
        source = (
            "hscpp_require_lib(x.lib);\n"
            "hscpp_preprocessor_definitions(1FOO);\n"
            'hscpp_require_source("ok.cpp");\n'
        )
        result = scan(source, on_diagnostic=collected.append)
        assert result.sources == ("ok.cpp",)
        assert [d.kind for d in collected] == [
            DiagnosticKind.MISSING_OPENING_QUOTE,
            DiagnosticKind.INVALID_DEFINITION,
        ]

    def test_unterminated_argument_string(self) -> None:
        collected = []
        result = scan('hscpp_require_source("a.cpp', on_diagnostic=collected.append)
        assert result.is_empty
        assert [d.kind for d in collected] == [DiagnosticKind.UNTERMINATED_STRING]

    def test_default_sink_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="hscan"):
            scan('hscpp_require_lib("x"', source_file="Foo.cpp")
        assert "Foo.cpp:1:22: hscpp_require_lib missing closing ')'" in caplog.text
        assert caplog.records[0].name == "hscan.diagnostics"


class TestDeterminism:
    """Scanning identical content yields equal results."""

    def test_two_scans_equal(self) -> None:
        assert scan(MODULE_SOURCE) == scan(MODULE_SOURCE)

    def test_scanner_instance_can_rescan(self) -> None:
        scanner = Scanner(MODULE_SOURCE)
        first = scanner.scan()
        second = scanner.scan()
        assert first == second
        assert first is not second

    def test_scanner_has_no_instance_dict(self) -> None:
        scanner = Scanner(MODULE_SOURCE)
        assert not hasattr(scanner, "__dict__")
        with pytest.raises(AttributeError):
            scanner.extra = 1


class TestScanFile:
    """scan_file reads one file and never raises for access problems."""

    def test_reads_and_scans(self, tmp_path: Path) -> None:
        path = tmp_path / "Printer.cpp"
        path.write_text(MODULE_SOURCE, encoding="utf-8")
        assert scan_file(path) == scan(MODULE_SOURCE)

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "a.cpp"
        path.write_text('hscpp_require_lib("m.lib")', encoding="utf-8")
        assert scan_file(str(path)).libraries == ("m.lib",)

    def test_missing_file(self, tmp_path: Path) -> None:
        collected = []
        path = tmp_path / "missing.cpp"
        result = scan_file(path, on_diagnostic=collected.append)

        assert result == ParseResult.empty()
        assert len(collected) == 1
        assert collected[0].kind is DiagnosticKind.FILE_ACCESS
        assert collected[0].source_file == str(path)
        assert str(path) in str(collected[0])

    def test_directory_is_reported_not_raised(self, tmp_path: Path) -> None:
        collected = []
        assert scan_file(tmp_path, on_diagnostic=collected.append).is_empty
        assert [d.kind for d in collected] == [DiagnosticKind.FILE_ACCESS]

    def test_diagnostics_carry_file_path(self, tmp_path: Path) -> None:
        collected = []
        path = tmp_path / "bad.cpp"
        path.write_text('\n\nhscpp_require_source("a.cpp"', encoding="utf-8")
        scan_file(path, on_diagnostic=collected.append)
        assert str(collected[0]).startswith(f"{path}:3:")

    def test_undecodable_bytes_are_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.cpp"
        path.write_bytes(b'// caf\xe9\nhscpp_require_source("a.cpp")')
        assert scan_file(path).sources == ("a.cpp",)


class TestParseResultAccessors:
    """Convenience views over requires."""

    def test_paths_by_kind(self) -> None:
        result = scan(MODULE_SOURCE)
        assert result.sources == ("Printer.cpp",)
        assert result.include_paths == ("../include", "../../lib/include")
        assert result.libraries == ("Dependency.lib",)
        assert result.paths_of(RequireKind.LIBRARY) == ("Dependency.lib",)

    def test_is_empty(self) -> None:
        assert ParseResult.empty().is_empty
        assert not scan("hscpp_preprocessor_definitions(X)").is_empty

    def test_frozen(self) -> None:
        result = ParseResult.empty()
        with pytest.raises(AttributeError):
            result.requires = ()  # type: ignore[misc]
