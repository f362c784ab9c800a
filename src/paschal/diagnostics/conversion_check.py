"""
Cross-check JulianDate.julian_to_gregorian (secular-difference method) against
the Julian Day Number path, day by day over a range of years.
"""

from __future__ import annotations

import argparse

from paschal.core.time import days_in_month
from paschal.core.types import GregorianDate, JulianDate


def check_years(y0: int, y1: int, *, max_failures: int) -> int:
    failures = 0

    for y in range(y0, y1 + 1):
        for m in range(1, 13):
            for d in range(1, days_in_month(y, m, calendar="julian") + 1):
                jd = JulianDate(y, m, d)
                got = jd.julian_to_gregorian()
                want = GregorianDate.from_jdn(jd.jdn())
                if got != want:
                    failures += 1
                    print("\nFAIL")
                    print("julian:", jd, jd.conversion_case().value)
                    print("secular difference:", jd.secular_difference())
                    print("got:", got)
                    print("want:", want)
                    if failures >= max_failures:
                        return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check Julian -> Gregorian conversion against JDN arithmetic.")
    p.add_argument("--from-year", type=int, default=-1200, help="First year (astronomical numbering).")
    p.add_argument("--to-year", type=int, default=2500, help="Last year (inclusive).")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    print(f"Checking years {args.from_year}..{args.to_year} ...")
    failures = check_years(args.from_year, args.to_year, max_failures=args.max_failures)

    if failures == 0:
        print("All conversions agree.")
        return 0

    print(f"Conversion failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
