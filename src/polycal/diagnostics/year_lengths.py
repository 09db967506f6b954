#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import polycal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "polycal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "polycal[diagnostics]"') from e


def build_series(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    lengths = np.array([polycal.days_in_year(calendar, int(y)) for y in years], dtype=int)
    return years, lengths


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year-length histogram and running mean for a calendar.")
    p.add_argument("--calendar", default="hebrew")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=6000)
    p.add_argument("--outbase", default="year_lengths", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years, lengths = build_series(np, args.calendar, args.start_year, args.end_year)

    values, counts = np.unique(lengths, return_counts=True)
    print(f"{args.calendar}: years {args.start_year}..{args.end_year}")
    for v, c in zip(values, counts):
        print(f"  {int(v):4d} days: {int(c):6d} years ({100.0 * c / len(lengths):5.2f}%)")
    print(f"  mean year = {lengths.mean():.6f} days")

    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(10.0, 4.0), constrained_layout=True)
    ax0.bar(values.astype(str), counts, color="tab:blue")
    ax0.set_xlabel("Days in year")
    ax0.set_ylabel("Years")
    ax0.set_title(f"{args.calendar} year lengths")

    running = np.cumsum(lengths) / np.arange(1, len(lengths) + 1)
    ax1.plot(years, running, color="0.25", linewidth=1.2)
    ax1.set_xlabel("Year")
    ax1.set_ylabel("Running mean (days)")
    ax1.grid(True, color="0.88", linewidth=0.7)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
