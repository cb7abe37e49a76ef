"""Tests for the swagger-genie command-line interface.

WHY: The CLI is the CI-facing surface. Exit codes and the
path:line:col diagnostics format are what build scripts parse, and
--in-place must rewrite nothing but the annotation lines.

HOW: main() is called with explicit argv against temporary Go files.
stdout/stderr are captured with capsys; SystemExit carries the exit code.

RULES:
- Exit codes: 0 ok, 1 warnings, I/O or decoding error, 2 usage error
- stdout carries only the transformed source
"""

import io

import pytest

from swagger_genie.cli import build_parser, check_text, collapse_text, expand_text, main
from swagger_genie.core.ir import Diagnostic
from swagger_genie.host import DiagnosticsStore


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestTextHelpers:

    def test_expand_text(self, go_call_source, go_directive_source):
        text, diagnostics, changed = expand_text(go_call_source)
        assert text == go_directive_source
        assert changed == 6
        assert [(d.line, d.start) for d in diagnostics] == [(6, 26)]

    def test_expand_text_keeps_crlf(self):
        text, _, _ = expand_text("@ID(getUser)\r\nfunc x() {}\r\n")
        assert text == "// @ID getUser\r\nfunc x() {}\r\n"

    def test_expand_text_without_final_newline(self):
        text, _, changed = expand_text("package x\n@Tags(users)")
        assert text == "package x\n// @Tags users"
        assert changed == 1

    def test_collapse_then_expand_restores(self, go_directive_source):
        collapsed, changed = collapse_text(go_directive_source)
        assert changed == 6
        assert "@Router(path=\"/classrooms\", method=\"get\")" in collapsed
        assert expand_text(collapsed)[0] == go_directive_source

    def test_expand_text_replaces_stale_store_entries(self):
        store = DiagnosticsStore()
        store.set_line("a.go", 0, [Diagnostic(start=0, end=1, message="stale")])
        store.set_line("a.go", 9, [Diagnostic(start=0, end=1, message="other")])
        _, diagnostics, _ = expand_text('@Success(200, dtoUser, "OK")\n', store=store, document="a.go")
        assert [(d.line, d.message.split()[0]) for d in diagnostics] == [(0, "'dtoUser'"), (9, "other")]
        assert store.get("a.go") == diagnostics

    def test_check_text(self, go_directive_source):
        diagnostics = check_text(go_directive_source)
        assert [(d.line, d.start, d.end) for d in diagnostics] == [(6, 26, 34)]

    def test_check_text_ignores_call_lines(self, go_call_source):
        assert check_text(go_call_source) == []


class TestExpandCommand:

    def test_prints_to_stdout(self, go_call_file, go_directive_source, capsys):
        assert _run(["expand", str(go_call_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == go_directive_source
        assert "{}:7:27: warning:".format(go_call_file) in captured.err
        assert "Expanded 6 line(s)." in captured.err

    def test_in_place(self, go_call_file, go_directive_source, capsys):
        assert _run(["expand", "--in-place", str(go_call_file)]) == 0
        assert go_call_file.read_text(encoding="utf-8") == go_directive_source
        assert capsys.readouterr().out == ""

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('@Router("/a", "get")\n'))
        assert _run(["expand", "-"]) == 0
        assert capsys.readouterr().out == "// @Router /a [get]\n"

    def test_in_place_with_stdin_is_usage_error(self, capsys):
        assert _run(["expand", "-i", "-"]) == 2
        assert "--in-place" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert _run(["expand", str(tmp_path / "missing.go")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.go"
        path.write_bytes(b"\xff\xfe@Summary(caf\xe9)\n")
        assert _run(["expand", str(path)]) == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Traceback" not in err


class TestCollapseCommand:

    def test_in_place(self, tmp_path, capsys):
        path = tmp_path / "a.go"
        path.write_text("\t// @Router /users [get]\n", encoding="utf-8")
        assert _run(["collapse", "-i", str(path)]) == 0
        assert path.read_text(encoding="utf-8") == '\t@Router(path="/users", method="get")\n'
        assert "Collapsed 1 line(s)." in capsys.readouterr().err


class TestCheckCommand:

    def test_warnings_exit_1(self, tmp_path, go_directive_source, capsys):
        path = tmp_path / "a.go"
        path.write_text(go_directive_source, encoding="utf-8")
        assert _run(["check", str(path)]) == 1
        err = capsys.readouterr().err
        assert "{}:7:27: warning: 'dtoError' does not match".format(path) in err
        assert "1 warning(s)." in err

    def test_clean_exit_0(self, tmp_path):
        path = tmp_path / "a.go"
        path.write_text('// @Success 200 {object} dto.User "OK"\n', encoding="utf-8")
        assert _run(["check", str(path)]) == 0

    def test_stdin_label(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("// @Success 200 dtoUser\n"))
        assert _run(["check", "-"]) == 1
        assert "<stdin>:1:17: warning:" in capsys.readouterr().err


class TestParser:

    def test_command_required(self, capsys):
        assert _run([]) == 2

    def test_version(self, capsys):
        assert _run(["--version"]) == 0
        assert "swagger-genie" in capsys.readouterr().out

    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])
        assert args.port is None
        assert args.host
