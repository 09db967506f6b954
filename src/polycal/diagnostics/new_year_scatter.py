#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import polycal
from polycal.core.jdn import gregorian_jdn, jdn_to_gregorian


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


def days_since_winter_solstice(jdn: int) -> int:
    """
    Days since the winter solstice, with Dec 22 = 1.
    For a date in Jan/Feb/Mar, we measure from Dec 22 of the previous year.
    """
    g = jdn_to_gregorian(jdn)
    ref_year = g.year if g.month == 12 and g.day >= 22 else g.year - 1
    return jdn - gregorian_jdn(ref_year, 12, 22) + 1


def day_of_year(jdn: int) -> int:
    return jdn - gregorian_jdn(jdn_to_gregorian(jdn).year, 1, 1) + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0
    hollow: bool = False


# new year of year Y of the calendar falls in Gregorian year Y + offset
STYLES: Dict[str, Tuple[Style, int]] = {
    "chinese": (Style("Chinese", "tab:red", "o", size=12), 0),
    "hebrew": (Style("Hebrew", "tab:blue", "o", size=18, hollow=True), -3761),
}


def build_series(np, calendar: str, offset: int, start_year: int, end_year: int, *, metric: str):
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, gy in enumerate(years):
        jdn = polycal.new_year_day(calendar, int(gy) - offset)
        if metric == "doy":
            y[i] = float(day_of_year(jdn))
        elif metric == "since-solstice":
            y[i] = float(days_since_winter_solstice(jdn))
        else:
            raise ValueError("metric must be 'doy' or 'since-solstice'")
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of lunisolar new-year dates by Gregorian year.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-solstice", "doy"),
        default="doy",
        help="Y-axis metric (default: day of year).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since winter solstice (Dec 22 = 1)")
    ax.set_title("Lunisolar new years")

    for cal, (st, offset) in STYLES.items():
        x, y = build_series(np, cal, offset, args.start_year, args.end_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.6, label=st.label)
        print(f"{st.label}: {len(x)} new years, range {y.min():.0f}..{y.max():.0f}")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
