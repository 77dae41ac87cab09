#!/usr/bin/env python3
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Optional

import argparse

import numpy as np

import moonphase
from moonphase.core.time import parse_instant, to_datetime
from moonphase.engines.age import compute_ages


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "moonphase[diagnostics]"') from e


def daily_instants(start: date, end: date, *, at: time = time(12)) -> List[datetime]:
    n = (end - start).days + 1
    return [datetime.combine(start + timedelta(days=i), at) for i in range(max(n, 0))]


def build_series(start: date, end: date, *, model: str = "mean"):
    """(day offsets, ages) as numpy arrays, one sample per day at local noon."""
    instants = daily_instants(start, end)
    x = np.arange(len(instants), dtype=float)
    y = compute_ages(instants, model=moonphase.get_model(model))
    return x, y


def wrap_points(y) -> List[int]:
    """Indices where the age series drops (a new cycle starts)."""
    return [i for i in range(1, len(y)) if y[i] < y[i - 1]]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sawtooth plot of the mean Moon age with phase bucket bounds.")
    p.add_argument("--start", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--end", default=None, help="YYYY-MM-DD (default: start + 90 days)")
    p.add_argument("--model", default="mean")
    p.add_argument("--outbase", default="moon_age", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    start = to_datetime(parse_instant(args.start)).date() if args.start else date.today()
    end = to_datetime(parse_instant(args.end)).date() if args.end else start + timedelta(days=90)

    plt = _need_matplotlib()
    model = moonphase.get_model(args.model)
    x, y = build_series(start, end, model=args.model)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel(f"Days since {start.isoformat()}")
    ax.set_ylabel("Moon age (days)")
    ax.set_title(f"Mean Moon age ({args.model} model)")

    ax.plot(x, y, color="tab:blue", linewidth=1.2)
    for ph in model.phases:
        ax.axhline(ph.threshold, color="0.6", linewidth=0.6, linestyle="--")
        ax.text(x[-1] if len(x) else 0.0, ph.threshold, f" {ph.name}", va="center", fontsize=7, color="0.35")
    for i in wrap_points(y):
        ax.axvline(x[i], color="tab:red", linewidth=0.5, alpha=0.4)

    ax.set_ylim(0.0, model.synodic_month)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=150)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
