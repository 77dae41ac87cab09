from __future__ import annotations

import argparse
import json
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")

logger = logging.getLogger(__name__)


def _parse_when(s: str | None):
    from moonphase.core.time import parse_instant

    return None if s is None else parse_instant(s)


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


def cmd_today(argv: list[str]) -> int:
    import moonphase
    from moonphase.render import text

    p = argparse.ArgumentParser(prog="moonphase today", description="Moon phase for today (or a given date).")
    p.add_argument("--date", default=None, help="YYYY-MM-DD or ISO datetime (default: now)")
    p.add_argument("--model", default="mean")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--json", action="store_true", help="print JSON instead of a text card")
    args = p.parse_args(argv)

    info = moonphase.day_phase(_parse_when(args.date), model=args.model, attributes=tuple(args.attr))
    if args.json:
        print(json.dumps(text.as_dict(info), ensure_ascii=False))
    else:
        print(text.today_card(info))
    return 0


def cmd_forecast(argv: list[str]) -> int:
    import moonphase
    from moonphase.render import text

    p = argparse.ArgumentParser(prog="moonphase forecast", description="Moon phases for the next days.")
    p.add_argument("--start", default=None, help="YYYY-MM-DD or ISO datetime (default: now)")
    p.add_argument("--days", type=int, default=moonphase.api.FORECAST_DAYS)
    p.add_argument("--model", default="mean")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    days = moonphase.forecast(_parse_when(args.start), days=args.days, model=args.model)
    if args.json:
        print(json.dumps([text.as_dict(d) for d in days], ensure_ascii=False))
    else:
        print(text.forecast_row(days))
    return 0


def cmd_age(argv: list[str]) -> int:
    import moonphase
    from moonphase.core.time import datetime_to_jd

    p = argparse.ArgumentParser(prog="moonphase age", description="Moon age (days) and phase at an instant.")
    p.add_argument("when", help="YYYY-MM-DD or ISO datetime")
    p.add_argument("--model", default="mean")
    args = p.parse_args(argv)

    when = _parse_when(args.when)
    age = moonphase.moon_age(when, model=args.model)
    ph = moonphase.phase_of(age, model=args.model)
    m = moonphase.get_model(args.model)

    print(f"Instant  = {when.isoformat()}")
    print(f"JD (UTC) = {datetime_to_jd(when):.6f}")
    print(f"Age      = {age:.6f} d  ({age / m.synodic_month:.4%} of {m.synodic_month} d)")
    print(f"Phase    = {ph.glyph} {ph.name}")
    return 0


def cmd_html(argv: list[str]) -> int:
    import moonphase
    from moonphase.render import html

    p = argparse.ArgumentParser(prog="moonphase html", description="Write the static tracker page.")
    p.add_argument("--out", default="moonphase.html")
    p.add_argument("--date", default=None, help="YYYY-MM-DD or ISO datetime (default: now)")
    p.add_argument("--model", default="mean")
    args = p.parse_args(argv)

    when = _parse_when(args.date)
    today = moonphase.day_phase(when, model=args.model)
    days = moonphase.forecast(today.instant, model=args.model)
    out = html.write_page(args.out, today, days)
    print(f"Saved: {out}")
    return 0


def cmd_models(argv: list[str]) -> int:
    import moonphase

    p = argparse.ArgumentParser(prog="moonphase models", description="List lunar models and their phase tables.")
    p.parse_args(argv)

    for name in moonphase.list_models():
        info = moonphase.model_info(name)
        print(f"{name}: epoch={info['epoch']}  synodic_month={info['synodic_month']}")
        for threshold, label, glyph in info["phases"]:
            print(f"  <= {threshold:9.5f}  {glyph} {label}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in argv)
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from moonphase.core.errors import MoonPhaseError

    try:
        return _dispatch(argv)
    except MoonPhaseError as e:
        logger.debug("command failed", exc_info=True)
        print(f"moonphase: error: {e}", file=sys.stderr)
        return 2


def _dispatch(argv: list[str]) -> int:
    # Shortcut: `moonphase YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_today(["--date"] + argv)

    p = argparse.ArgumentParser(prog="moonphase", description="Mean-cycle Moon phase tracker.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Moon phase for today or --date")
    sub.add_parser("forecast", help="Moon phases for the next 7 (or --days) days")
    sub.add_parser("age", help="Moon age and phase at an instant")
    sub.add_parser("html", help="Write the static tracker page")
    sub.add_parser("models", help="List lunar models")

    # diagnostics
    sub.add_parser("month", help="Gregorian month grid with daily phases (diagnostics)")
    sub.add_parser("plot", help="Moon age sawtooth plot (diagnostics, needs matplotlib)")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "forecast":
        return cmd_forecast(rest)

    if args.cmd == "age":
        return cmd_age(rest)

    if args.cmd == "html":
        return cmd_html(rest)

    if args.cmd == "models":
        return cmd_models(rest)

    if args.cmd == "month":
        return _run_module_main("moonphase.diagnostics.phase_month", rest)

    if args.cmd == "plot":
        return _run_module_main("moonphase.diagnostics.age_plot", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
