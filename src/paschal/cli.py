from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import List, Optional


# year input: 1..8 ASCII digits
_YEAR_RE = re.compile(r"^[0-9]{1,8}$")
_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

INVALID_YEAR_MESSAGE = "Invalid input. Must contain digits representing a positive integral number."


def _parse_year(s: str) -> int:
    if not _YEAR_RE.match(s):
        raise argparse.ArgumentTypeError(INVALID_YEAR_MESSAGE)
    return int(s)


def _parse_ymd(s: str):
    from paschal.core.types import GregorianDate

    if not _ISO_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return GregorianDate(y, m, d)


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


_COMMANDS = ("easter", "convert", "table", "check-conversion")
_VERBOSE_FLAGS = ("-v", "--verbose")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def easter_messages(year: int, today=None) -> List[str]:
    """
    User-facing lines for one year, phrased relative to `today`
    (a GregorianDate; defaults to the current date).
    """
    import paschal
    from paschal.core.types import GregorianDate

    if year < paschal.FIRST_EASTER_YEAR:
        return [
            "It is estimated that Jesus was crucified between AD 26 and AD 37. Before that, no Easter existed.",
            f"This application returns results for years starting with AD {paschal.FIRST_EASTER_YEAR}.",
        ]

    info = paschal.easter_info(year)
    if info.western is None:
        return [f"Easter date was {info.eastern_julian.formatted()} (Julian date)."]

    if today is None:
        today = GregorianDate.today()

    def tense(d: GregorianDate) -> str:
        return "was" if d < today else "is"

    west, east = info.western, info.eastern_gregorian
    line = f"Western Easter {tense(west)} on {west.formatted()} (Gregorian date)."
    if west == today:
        line += " Today."
    lines = [line]

    line = (
        f"Eastern Easter {tense(east)} on {info.eastern_julian.formatted()} (Julian date). "
        f"That is {east.formatted()} (Gregorian date)."
    )
    if east == today:
        line += " Today."
    lines.append(line)

    if info.coincide:
        verb = "were" if west < today else "are"
        lines.append(f"Both Easters {verb} celebrated on the same day.")
    return lines


def cmd_easter(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="paschal easter", description="Western and Eastern Easter dates for a year")
    p.add_argument("year", help="year AD (1..8 digits)")
    p.add_argument("--today", type=_parse_ymd, default=None, help="reference date YYYY-MM-DD for is/was phrasing")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        year = _parse_year(args.year)
    except argparse.ArgumentTypeError as e:
        print(e)
        return 2

    for line in easter_messages(year, today=args.today):
        print(line)
    return 0


def cmd_convert(argv: list[str]) -> int:
    from paschal.core.errors import PaschalError
    from paschal.core.types import JulianDate

    p = argparse.ArgumentParser(prog="paschal convert", description="Julian date -> Gregorian date")
    p.add_argument("year", type=int, help="astronomical year (1 BC = 0, 2 BC = -1)")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    try:
        jd = JulianDate(args.year, args.month, args.day)
        gd = jd.julian_to_gregorian()
    except PaschalError as e:
        print(e)
        return 1

    print(f"{jd.formatted()} (Julian date) is {gd.formatted()} (Gregorian date).")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    verbose = False
    while argv and argv[0] in _VERBOSE_FLAGS:
        verbose = True
        argv.pop(0)

    # Shorthand: `paschal YEAR`; cmd_easter reports malformed years
    if argv and argv[0] not in _COMMANDS and argv[0] not in ("-h", "--help"):
        _configure_logging(verbose)
        return cmd_easter(argv)

    p = argparse.ArgumentParser(prog="paschal", description="Easter date calculator (Gregorian and Julian).")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("easter", help="Western and Eastern Easter for a year")
    sub.add_parser("convert", help="Julian date -> Gregorian date")
    sub.add_parser("table", help="Print Easter table for a range of years (diagnostics)")
    sub.add_parser("check-conversion", help="Check Julian -> Gregorian conversion against JDN arithmetic (diagnostics)")

    args, rest = p.parse_known_args(argv)
    _configure_logging(verbose or args.verbose)

    if args.cmd == "easter":
        return cmd_easter(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "table":
        return _run_module_main("paschal.diagnostics.easter_table", rest)

    if args.cmd == "check-conversion":
        return _run_module_main("paschal.diagnostics.conversion_check", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
