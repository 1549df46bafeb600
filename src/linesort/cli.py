"""Command-line interface for linesort.

- reads from stdin or one or more files
- sorts (or shuffles) the lines
- writes to stdout

Exit status:
    0  success
    1  an input could not be read, or output failed
    2  usage error
    3  out of memory
"""

from __future__ import annotations
import argparse
import io
import locale
import logging
import sys
from typing import IO

from .config import SortConfig
from .errors import ConfigError, ResourceExhaustion
from .pipeline import Source, file_source, run, stream_source

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_RESOURCE = 3


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="linesort", description="Sort (or shuffle) lines of text.")
    p.add_argument("paths", nargs="*", metavar="FILE", help="Input files; none or '-' reads stdin")
    p.add_argument("--reverse", action="store_true", help="Sort the lines descending, instead of ascending")
    p.add_argument("--ignore-case", action="store_true", help="Ignore character case when sorting")
    p.add_argument("--natural", action="store_true", help="Sort using 'natural' string order (file2 < file10)")
    p.add_argument("--locale-logical", action="store_true",
                   help="Natural order with letters collated by the current locale")
    p.add_argument("--unique", action="store_true", help="Discard duplicate lines from the result")
    p.add_argument("--trim", action="store_true", help="Remove leading/trailing whitespace characters")
    p.add_argument("--skip-blank", action="store_true", help="Discard lines consisting solely of whitespace")
    p.add_argument("--force-flush", action="store_true", help="Flush stdout after each line is printed")
    p.add_argument("--keep-going", action="store_true", help="Do not stop if processing an input file fails")
    p.add_argument("--shuffle", action="store_true", help="Output the lines in random order instead")
    p.add_argument("--seed", type=int, default=None, help="Seed for --shuffle (reproducible output)")
    p.add_argument("--encoding", default="utf-8", help="Text encoding of inputs and output (default: utf-8)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return p


def _text_stream(stream: IO[str], encoding: str) -> IO[str]:
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding=encoding)
    return stream


def _sources(paths: list[str], stdin: IO[str], encoding: str) -> list[Source]:
    if not paths:
        return [stream_source("<stdin>", stdin)]
    return [stream_source("<stdin>", stdin) if p == "-" else file_source(p, encoding) for p in paths]


def main(argv: list[str] | None = None, stdin: IO | None = None, stdout: IO | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = SortConfig.from_namespace(args)
    except ConfigError as ex:
        p.print_usage(sys.stderr)
        sys.stderr.write(f"error: {ex}\n")
        return EXIT_USAGE

    if args.locale_logical:
        # the core never touches the locale; pick up the user's collation here
        try:
            locale.setlocale(locale.LC_COLLATE, "")
        except locale.Error as ex:
            sys.stderr.write(f"warning: {ex}; using the C collation\n")

    in_stream = stdin if stdin is not None else _text_stream(sys.stdin, config.encoding)
    out_stream = stdout if stdout is not None else _text_stream(sys.stdout, config.encoding)

    try:
        result = run(config, _sources(args.paths, in_stream, config.encoding), out_stream)
    except ResourceExhaustion as ex:
        sys.stderr.write(f"error: {ex}\n")
        return EXIT_RESOURCE

    for failure in result.failures:
        sys.stderr.write(f"error: {failure}\n")
    if result.write_error is not None:
        sys.stderr.write(f"error: failed to write output: {result.write_error}\n")

    return EXIT_OK if result.ok else EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
