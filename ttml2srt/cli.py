"""Command-line interface for the TTML → SRT converter.

WHY: Most users convert subtitle files from the terminal or from batch
scripts. The CLI is the thin shell around the pure conversion core: it
owns argument parsing, file reading/writing, logging setup and exit codes.

HOW: Uses argparse with defaults taken from Settings (environment /
.env). Reads the source file, parses it into the IR, runs the selected
formatter and writes ``{stem}{suffix}`` into the output directory (the
current directory unless --output-dir or TTML2SRT_OUTPUT_DIR says
otherwise). Status messages go to stderr; --stdout prints the converted
text instead of writing a file.

RULES:
- Positional argument: source TTML file; missing → message, exit 0
- Exit codes: 0 = success / nothing to do, 1 = file not found, I/O
  error, malformed input, invalid timecode or bad configuration
- Each failure class has its own message
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ttml2srt import __version__
from ttml2srt.config import APP_NAME, Settings, load_settings
from ttml2srt.core.errors import InvalidTimecodeError, MalformedInputError
from ttml2srt.core.parser import parse_document
from ttml2srt.formatters import FORMATTERS
from ttml2srt.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "[{}]".format(APP_NAME)
ERROR_PREFIX = "[{}] [Error]".format(APP_NAME)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    RULES:
    - All status messages go to stderr, prefixed with the app name
    - Always flush after writing
    """
    print(MESSAGE_PREFIX, msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    print(ERROR_PREFIX, msg, file=sys.stderr, flush=True)
    sys.exit(1)


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one formatter output as ``{stem}{suffix}`` and return its path.

    The content already carries its line terminators, so no newline
    translation is applied on write.
    """
    target = output_dir / "{}{}".format(stem, output.suffix)
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(output.content)
    return target


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without converting anything.

    RULES:
    - Positional: source_file (optional at parse time)
    - Optional: --format, --disable-styles/--no-disable-styles,
      --hour-offset/--no-hour-offset,
      --output-dir, --stdout, --verbose, --version
    """
    if settings is None:
        settings = Settings()

    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Convert TTML / EBU-TT XML subtitles to SubRip (SRT).",
    )

    parser.add_argument(
        "source_file",
        nargs="?",
        default=None,
        help="Path to the TTML / EBU-TT subtitle file.",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(FORMATTERS.keys()),
        default=settings.output_format,
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--disable-styles",
        action=argparse.BooleanOptionalAction,
        default=not settings.styles_enabled,
        help="Do not emit <font color> markup for coloured text "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--hour-offset",
        action=argparse.BooleanOptionalAction,
        default=settings.hour_offset_correction,
        help="Strip 10/20-hour EBU-TT segment offsets from clock timecodes "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help="Directory to save the output file (default: current directory).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the converted subtitles to stdout instead of writing a file.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="{} v{}".format(MESSAGE_PREFIX, __version__),
    )

    return parser


def run(args: argparse.Namespace) -> List[Path]:
    """Convert the file named in ``args`` and return the written paths.

    Exits the process with status 1 on any failure.
    """
    source = Path(args.source_file).resolve()
    if not source.is_file():
        _fail('File not found: "{}"'.format(source))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        xml_text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail("Could not read {}: {}".format(source, e))

    try:
        document = parse_document(xml_text)
    except MalformedInputError as e:
        logger.debug("Parse failure: %s", e)
        _fail("Malformed XML Subtitle: {}".format(source))

    formatter = FORMATTERS[args.output_format](
        styles_enabled=not args.disable_styles,
        hour_offset_correction=args.hour_offset,
    )
    logger.info("Running %s formatter on %d paragraphs", formatter.name, len(document.paragraphs))

    try:
        outputs = formatter.format(document)
    except InvalidTimecodeError as e:
        _fail("Invalid timecode in {}: {}".format(source, e))

    if args.stdout:
        for output in outputs:
            sys.stdout.write(output.content)
        return []

    saved: List[Path] = []
    for output in outputs:
        try:
            saved.append(_save_output(output, source.stem, output_dir))
        except OSError as e:
            _fail("Could not write output: {}".format(e))
    return saved


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.source_file:
        _status("Source XML subtitle required.")
        sys.exit(0)

    for path in run(args):
        _status("XML Subtitle successfully converted ({} format): {}".format(args.output_format, path))


if __name__ == "__main__":
    main()
