from __future__ import annotations

from datetime import date, datetime, time, timedelta
import calendar as pycal
import argparse

import moonphase


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_weeks(gy: int, gm: int, *, model: str = "mean", at: time = time(12)) -> list[list[tuple[str, str]]]:
    """Week rows (Mon..Sun) for a Gregorian month: day number over glyph + age."""
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        info = moonphase.day_phase(datetime.combine(d, at), model=model)
        top = f"{d.day:2d}"
        bot = f"{info.glyph}{info.age:4.1f}"
        days.append((top, bot))
        d += timedelta(days=1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def phase_changes(gy: int, gm: int, *, model: str = "mean", at: time = time(12)) -> list[tuple[date, str]]:
    """Days in the month whose phase name differs from the previous day's."""
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])
    prev = moonphase.day_phase(datetime.combine(first - timedelta(days=1), at), model=model).name
    out = []
    d = first
    while d <= last:
        name = moonphase.day_phase(datetime.combine(d, at), model=model).name
        if name != prev:
            out.append((d, name))
        prev = name
        d += timedelta(days=1)
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian-month calendar with the Moon phase (sampled at local noon) for each day."
    )
    p.add_argument("--model", default="mean", help="mean|octants (default: mean)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    if args.greg:
        gy, gm = args.greg
    else:
        t = date.today()
        gy, gm = t.year, t.month

    print_grid(f"{args.model} phases  {gy}-{gm:02d}", month_weeks(gy, gm, model=args.model))
    for d, name in phase_changes(gy, gm, model=args.model):
        print(f"  {d.isoformat()}  -> {name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
