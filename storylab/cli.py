"""Command-line interface for the StoryLab script tools.

WHY: Scripts are often edited in a text editor rather than the browser.
The CLI offers the same operations as the web front end - retime the
markers after an edit, export a subtitle track, save dated export files -
so they can be scripted and piped.

HOW: argparse with one subcommand per operation. Input "-" reads stdin.
Pacing comes from storylab.config unless --chars-per-second overrides it.

RULES:
- Subcommands: recalc, captions, export, formats, serve
- Content goes to stdout when no output path is given
- Status output goes to stderr (not stdout)
- Exit codes: 0 = success, 1 = error ("Error: ..." on stderr)
- Python 3.9.6 compatible - no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from script_timing import count_markers, recalculate_timestamps, synthesize_subtitles
from storylab.config import DEFAULT_FORMATS, EXPORT_PREFIX, LOG_LEVEL, load_pacing
from storylab.export import export_basename, run_formatters, save_outputs
from storylab.formatters import FORMATTERS


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(path: str) -> str:
    """Read a script with its line endings untouched."""
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_output(content: str, path: Optional[str]) -> None:
    if path:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    else:
        sys.stdout.write(content)


def _cmd_recalc(args: argparse.Namespace) -> None:
    if args.in_place and args.input == "-":
        raise ValueError("--in-place needs a file path, not stdin")

    script = _read_input(args.input)
    result = recalculate_timestamps(script, load_pacing(args.chars_per_second))

    output_path = args.input if args.in_place else args.output
    _write_output(result, output_path)
    if output_path:
        _status("Recalculated {} markers in {}".format(count_markers(result), output_path))


def _cmd_captions(args: argparse.Namespace) -> None:
    script = _read_input(args.input)
    srt = synthesize_subtitles(script, load_pacing(args.chars_per_second))
    if not srt:
        _status("Warning: no time markers found, subtitle track is empty")
    _write_output(srt, args.output)
    if args.output:
        _status("Wrote {} captions to {}".format(count_markers(script), args.output))


def _cmd_export(args: argparse.Namespace) -> None:
    script = _read_input(args.input)
    pacing = load_pacing(args.chars_per_second)

    if args.recalculate:
        script = recalculate_timestamps(script, pacing)

    format_keys = (
        [f.strip() for f in args.formats.split(",") if f.strip()]
        if args.formats
        else list(DEFAULT_FORMATS)
    )

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not output_dir.is_dir():
        raise ValueError("Output directory does not exist: {}".format(output_dir))

    stem = args.basename or export_basename()
    outputs = run_formatters(script, format_keys, pacing)
    for path in save_outputs(outputs, stem, output_dir):
        _status("  Saved: {}".format(path))


def _cmd_formats(args: argparse.Namespace) -> None:
    for key in sorted(FORMATTERS):
        print("{:<14} {}".format(key, FORMATTERS[key].name))


def _cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("storylab.server.app:app", host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable - tests can inspect the parser without touching files.
    """
    parser = argparse.ArgumentParser(
        prog="storylab",
        description="Retime and export markdown video scripts with (MM:SS) markers.",
    )
    parser.add_argument(
        "--chars-per-second",
        type=float,
        default=None,
        help="Reading speed used to estimate timings "
             "(default: STORYLAB_CHARS_PER_SECOND or 4.5).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    recalc = sub.add_parser("recalc", help="Recompute every time marker from the text.")
    recalc.add_argument("input", help="Script file, or '-' for stdin.")
    recalc.add_argument("-o", "--output", default=None, help="Output file (default: stdout).")
    recalc.add_argument("--in-place", action="store_true", help="Overwrite the input file.")
    recalc.set_defaults(func=_cmd_recalc)

    captions = sub.add_parser("captions", help="Write an SRT subtitle track.")
    captions.add_argument("input", help="Script file, or '-' for stdin.")
    captions.add_argument("-o", "--output", default=None, help="Output file (default: stdout).")
    captions.set_defaults(func=_cmd_captions)

    export = sub.add_parser("export", help="Save dated export files.")
    export.add_argument("input", help="Script file, or '-' for stdin.")
    export.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of export formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), ",".join(DEFAULT_FORMATS)
             ),
    )
    export.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save export files (default: current directory).",
    )
    export.add_argument(
        "--basename",
        default=None,
        help="File stem for exports (default: {}_<YYYY-MM-DD>).".format(EXPORT_PREFIX),
    )
    export.add_argument(
        "--recalculate",
        action="store_true",
        help="Recompute time markers before exporting.",
    )
    export.set_defaults(func=_cmd_export)

    formats = sub.add_parser("formats", help="List available export formats.")
    formats.set_defaults(func=_cmd_formats)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
