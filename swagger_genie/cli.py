"""Command-line interface for go-swagger-genie.

WHY: Outside an editor, authors still want to expand call-form
annotations in a Go file, view existing swag comments in call form, or
lint type paths in CI. The CLI applies the line-level engine to every
line of a file (or stdin) and reports diagnostics compiler-style.

HOW: argparse with four subcommands — expand, collapse, check, serve.
Each line is processed independently; line endings are preserved.
Output goes to stdout unless --in-place is given. Diagnostics and
status messages go to stderr.

RULES:
- FILE may be "-" to read stdin (--in-place is then rejected)
- Diagnostics format: {path}:{line}:{col}: warning: {message} (1-based)
- Exit codes: 0 = success; 1 = warnings found (check), I/O error or
  non-UTF-8 input; 2 = usage error (argparse)
- Logging goes to stderr at SWAGGER_GENIE_LOG_LEVEL (--verbose → DEBUG)
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from swagger_genie import __version__, config
from swagger_genie.core.ir import Diagnostic
from swagger_genie.core.transcoder import collapse_line, parse_directive_line, validate
from swagger_genie.host import DiagnosticsStore, LineProcessor

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _split_ending(line: str) -> Tuple[str, str]:
    """Split a line into its content and its line ending."""
    content = line.rstrip("\r\n")
    return content, line[len(content):]


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_result(path: str, text: str, in_place: bool) -> None:
    if in_place:
        Path(path).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def _report(path: str, diagnostics: List[Diagnostic]) -> None:
    label = "<stdin>" if path == "-" else path
    for diagnostic in diagnostics:
        _status("{}:{}:{}: {}: {}".format(
            label,
            (diagnostic.line or 0) + 1,
            diagnostic.start + 1,
            diagnostic.severity.value,
            diagnostic.message,
        ))


def expand_text(
    text: str,
    processor: Optional[LineProcessor] = None,
    store: Optional[DiagnosticsStore] = None,
    document: str = "-",
) -> Tuple[str, List[Diagnostic], int]:
    """Expand every call-form line of ``text``.

    Each line's diagnostics are written to ``store`` under ``document``,
    replacing whatever that line held before.

    Returns:
        (new_text, diagnostics for the whole document, changed_line_count)
    """
    processor = processor or LineProcessor()
    store = store or DiagnosticsStore()
    out: List[str] = []
    changed = 0
    for number, line in enumerate(text.splitlines(keepends=True)):
        content, ending = _split_ending(line)
        result = processor.process_line(content, line_number=number)
        if result.changed:
            changed += 1
        store.set_line(document, number, result.diagnostics)
        out.append(result.text + ending)
    return "".join(out), store.get(document), changed


def collapse_text(text: str) -> Tuple[str, int]:
    """Render every supported directive line of ``text`` in call form."""
    out: List[str] = []
    changed = 0
    for line in text.splitlines(keepends=True):
        content, ending = _split_ending(line)
        collapsed = collapse_line(content)
        if collapsed is None:
            out.append(line)
        else:
            changed += 1
            out.append(collapsed + ending)
    return "".join(out), changed


def check_text(text: str) -> List[Diagnostic]:
    """Validate every directive line of ``text``."""
    diagnostics: List[Diagnostic] = []
    for number, line in enumerate(text.splitlines()):
        if parse_directive_line(line) is None:
            continue
        for diagnostic in validate(line):
            diagnostics.append(dataclasses.replace(diagnostic, line=number))
    return diagnostics


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_expand(args: argparse.Namespace) -> int:
    text = _read_source(args.file)
    new_text, diagnostics, changed = expand_text(text, document=args.file)
    _write_result(args.file, new_text, args.in_place)
    _report(args.file, diagnostics)
    _status("Expanded {} line(s).".format(changed))
    return 0


def _cmd_collapse(args: argparse.Namespace) -> int:
    text = _read_source(args.file)
    new_text, changed = collapse_text(text)
    _write_result(args.file, new_text, args.in_place)
    _status("Collapsed {} line(s).".format(changed))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    text = _read_source(args.file)
    diagnostics = check_text(text)
    _report(args.file, diagnostics)
    if diagnostics:
        _status("{} warning(s).".format(len(diagnostics)))
        return 1
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    port = args.port if args.port is not None else config.load_port()
    _status("Serving on http://{}:{}".format(args.host, port))
    uvicorn.run("swagger_genie.server.app:app", host=args.host, port=port,
                log_level=config.LOG_LEVEL.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    RULES:
    - Subcommands: expand, collapse, check (take FILE), serve
    - expand/collapse accept -i/--in-place
    """
    parser = argparse.ArgumentParser(
        prog="swagger-genie",
        description="Expand @Tag(args) annotations into swag comments and back.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging on stderr.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    commands: List[Tuple[str, str, Callable[[argparse.Namespace], int]]] = [
        ("expand", "Rewrite @Tag(args) lines as // @Tag comments.", _cmd_expand),
        ("collapse", "Rewrite // @Tag comments as @Tag(args) lines.", _cmd_collapse),
    ]
    for name, help_text, handler in commands:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", help="Go source file, or '-' for stdin.")
        sub.add_argument("-i", "--in-place", action="store_true",
                         help="Overwrite FILE instead of printing to stdout.")
        sub.set_defaults(handler=handler)

    check = subparsers.add_parser("check", help="Warn about malformed type paths in swag comments.")
    check.add_argument("file", help="Go source file, or '-' for stdin.")
    check.set_defaults(handler=_cmd_check)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=config.API_HOST,
                       help="Bind address (default: %(default)s).")
    serve.add_argument("--port", type=int, default=None,
                       help="Port (default: SWAGGER_GENIE_PORT or 8765).")
    serve.set_defaults(handler=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``swagger-genie`` and ``python -m swagger_genie``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if getattr(args, "in_place", False) and args.file == "-":
        parser.error("--in-place cannot be used with stdin")

    try:
        code = args.handler(args)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("I/O failure", exc_info=True)
        _status("Error: {}".format(exc))
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
