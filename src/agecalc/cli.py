from __future__ import annotations

import argparse
import importlib
import inspect
import io
import logging
import sys
from typing import Iterator, List

from .config import AgeConfig
from .core.errors import ConfigError
from .core.types import Err
from .engine.batch import BatchDriver

logger = logging.getLogger("agecalc")

USAGE = "agecalc [-h] [-v] [-u d|m|y|h|i|s] [-s START] [-e END] [-d FS] [file...]"

EPILOG = """\
Dates use the format dd.mm.yyyy-hh:mm:ss; either half may be omitted
(date defaults to 01.01.1970, time to 00:00:00).

With files, -s/-e are field numbers in each record (or literal dates used
for every record) and the result is appended as an extra field. A failing
record gets the negated error code instead.

Error codes:
 1: invalid unit
 3: more than one '-' in a date
 4: neither '.' nor ':' in a date
 5: date part is not 3 fields
 6: time part is not 3 fields
 7: end date before start date

Other commands:
 agecalc diag drift [...]   legacy vs. Gregorian day-count drift
"""


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="agecalc: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _iter_lines(paths: List[str], p: argparse.ArgumentParser) -> Iterator[str]:
    for path in paths:
        if path == "-":
            stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="surrogateescape")
            try:
                yield from stdin
            finally:
                stdin.detach()
            continue
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as fh:
                yield from fh
        except OSError as e:
            p.exit(2, f"agecalc: cannot read {path}: {e.strerror}\n")


def _write_line(line: str) -> None:
    # Undecodable input bytes were carried as surrogates; write them back unchanged.
    sys.stdout.flush()
    sys.stdout.buffer.write(line.encode("utf-8", "surrogateescape") + b"\n")
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="agecalc",
        usage=USAGE,
        description="Calculate the difference between two dates.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-u", dest="unit", default=None,
                   help="unit: d=days, m=months (30 days), y=years (365 days), h=hours, i=minutes, s=seconds (default: i)")
    p.add_argument("-s", dest="start", default=None,
                   help="start date, or start field in each record (default: 01.01.1970-00:00:00)")
    p.add_argument("-e", dest="end", default=None,
                   help="end date, or end field in each record (default: now)")
    p.add_argument("-d", dest="delimiter", default=None, help="field delimiter for records (default: ;)")
    p.add_argument("-v", "--verbose", action="store_true", help="log per-record failures to stderr")
    p.add_argument("files", nargs="*", help='files to process; "-" reads stdin')
    return p


def cmd_age(argv: list[str]) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        cfg = AgeConfig.from_options(
            unit=args.unit,
            start=args.start,
            end=args.end,
            delimiter=args.delimiter,
            stream=bool(args.files),
        )
    except ConfigError as e:
        logger.warning("%s", e)
        return e.code

    driver = BatchDriver(cfg)
    if not args.files:
        result = driver.run_scalar()
        if isinstance(result, Err):
            logger.warning("cannot compute %s -> %s: %s", cfg.start, cfg.end, result.kind.name.lower())
            return result.code
        print(result.value)
        return 0

    for line in driver.iter_stream(_iter_lines(args.files, p)):
        _write_line(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "diag":
        p = argparse.ArgumentParser(prog="agecalc diag", description="Diagnostics tools")
        p.add_argument("tool", choices=["drift"], help="Which diagnostic to run")
        args, rest = p.parse_known_args(argv[1:])
        tool_map = {
            "drift": "agecalc.diagnostics.gregorian_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    return cmd_age(argv)


if __name__ == "__main__":
    raise SystemExit(main())
