from __future__ import annotations

import argparse
from typing import List

import paschal
from paschal.core.types import GregorianDate, JulianDate


def mmdd(d: GregorianDate | JulianDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def iso(d: GregorianDate | JulianDate) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Western and Eastern Easter dates for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso", "dmy"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--coincident-only",
        action="store_true",
        help="Only list years where both Easters fall on the same Gregorian day.",
    )
    args = p.parse_args(argv)

    def fmt(d: GregorianDate | JulianDate | None) -> str:
        if d is None:
            return "-"
        if args.dates == "dmy":
            return d.formatted()
        return mmdd(d) if args.dates == "mmdd" else iso(d)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < paschal.FIRST_EASTER_YEAR:
        raise SystemExit(f"--from-year must be >= {paschal.FIRST_EASTER_YEAR}")

    headers = ["Year", "Western", "Eastern (Jul)", "Eastern (Greg)", "Same"]
    colw = [max(5, len(str(Y1)))] + [max(len(h), 18 if args.dates == "dmy" else 10) for h in headers[1:4]] + [4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    same: List[int] = []
    for Y in range(Y0, Y1 + 1):
        info = paschal.easter_info(Y)
        if info.coincide:
            same.append(Y)
        elif args.coincident_only:
            continue
        cells = [
            str(Y),
            fmt(info.western),
            fmt(info.eastern_julian),
            fmt(info.eastern_gregorian),
            "yes" if info.coincide else "",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    print(f"\nYears with a common Easter: {len(same)} of {Y1 - Y0 + 1}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
