#!/usr/bin/env python3
from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from agecalc.core.calendar import day_diff
from agecalc.core.types import DateTimeComponents


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "agecalc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "agecalc[diagnostics]"') from e


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def _components(d: date) -> DateTimeComponents:
    return DateTimeComponents(d.day, d.month, d.year)


def legacy_days(a: date, b: date) -> int:
    return day_diff(_components(a), _components(b))


def gregorian_days(a: date, b: date) -> int:
    return b.toordinal() - a.toordinal()


@dataclass(frozen=True)
class DriftSample:
    start: date
    end: date
    legacy: int
    gregorian: int

    @property
    def drift(self) -> int:
        return self.legacy - self.gregorian


def sample_pairs(start: date, end: date, n: int, seed: int, *, max_span: int) -> List[Tuple[date, date]]:
    """Random (a, b) with start <= a <= b <= end and b - a <= max_span days."""
    rng = random.Random(seed)
    span = (end - start).days
    out = []
    for _ in range(n):
        a = start + timedelta(days=rng.randint(0, span))
        room = min(max_span, (end - a).days)
        b = a + timedelta(days=rng.randint(0, room))
        out.append((a, b))
    return out


def compute_drift(pairs: List[Tuple[date, date]]) -> List[DriftSample]:
    return [DriftSample(a, b, legacy_days(a, b), gregorian_days(a, b)) for a, b in pairs]


def summarize(samples: List[DriftSample]) -> Dict[str, object]:
    np = _need_numpy()
    drift = np.array([s.drift for s in samples], dtype=np.int64)
    if drift.size == 0:
        return {"n": 0}
    values, counts = np.unique(drift, return_counts=True)
    return {
        "n": int(drift.size),
        "n_mismatch": int(np.count_nonzero(drift)),
        "mean": float(drift.mean()),
        "min": int(drift.min()),
        "max": int(drift.max()),
        "histogram": {int(v): int(c) for v, c in zip(values, counts)},
    }


def plot_drift(samples: List[DriftSample], out: Optional[str] = None) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    x = np.array([s.start.year + (s.start.timetuple().tm_yday - 1) / 365.0 for s in samples])
    y = np.array([s.drift for s in samples])

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.scatter(x, y, s=6, color="0.15", alpha=0.6)
    ax.axhline(0, lw=0.8, color="0.5")
    ax.set_xlabel("start date (year)")
    ax.set_ylabel("legacy - Gregorian (days)")
    ax.set_title("Legacy day-count drift")
    fig.tight_layout()
    if out:
        fig.savefig(out, dpi=150)
    else:
        plt.show()
    plt.close(fig)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare legacy day differences with the Gregorian calendar.")
    p.add_argument("--start", type=str, default="1890-01-01", help="Earliest date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2110-12-31", help="Latest date YYYY-MM-DD.")
    p.add_argument("--N", type=int, default=5000, help="Number of sampled pairs.")
    p.add_argument("--max-span", type=int, default=3 * 365, help="Longest pair span in days.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--examples", type=int, default=10, help="Mismatching pairs to list.")
    p.add_argument("--plot", action="store_true", help="Scatter plot of drift vs. start date.")
    p.add_argument("--out", type=str, default=None, help="Save the plot here instead of showing it.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    samples = compute_drift(sample_pairs(start, end, args.N, args.seed, max_span=args.max_span))
    summary = summarize(samples)

    print(f"pairs sampled : {summary['n']}")
    if not summary["n"]:
        return 0
    print(f"mismatching   : {summary['n_mismatch']}")
    print(f"drift (days)  : mean {summary['mean']:+.4f}  min {summary['min']:+d}  max {summary['max']:+d}")
    print("histogram     :")
    for v, c in summary["histogram"].items():
        print(f"  {v:+4d}: {c}")

    bad = [s for s in samples if s.drift][: args.examples]
    if bad:
        print()
        print("examples:")
        for s in bad:
            print(f"  {s.start} -> {s.end}: legacy {s.legacy}, gregorian {s.gregorian} ({s.drift:+d})")

    if args.plot:
        plot_drift(samples, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
