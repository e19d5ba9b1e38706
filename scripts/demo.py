"""Walkthrough of bigdecimal: exact sums, bounded division, rounding modes, rendering.

Scenarios covered:
S1) Exact addition vs binary floating point (0.1 + 0.2, repeated cents)
S2) Division with a precision allowance, then mode-controlled last digit
S3) The nine rounding modes on ties and near-ties
S4) Fixed vs scientific rendering around the exponent thresholds
S5) Decoding binary floats exactly or to a maximum precision
S6) Monthly compounding with periodic rounding to a working precision
"""
from __future__ import annotations

from typing import Callable, List
import argparse
import sys

from bigdecimal import BigDecimal, Round, decimal, show, show_fixed, sum_of
from bigdecimal.core.rounding import coerce_round

# ---------- pretty printers ----------

def banner(title: str) -> None:
    print("\n" + "=" * 80)
    print(f"Scenario: {title}")


def row(label: str, value) -> None:
    print(f"  • {label:<28} {value}")


# ---------- scenarios ----------

def scenario_exact_sums(prec: int) -> None:
    banner("S1) Exact addition vs binary floating point")
    row("float 0.1 + 0.2", 0.1 + 0.2)
    row("decimal 0.1 + 0.2", show(decimal("0.1") + decimal("0.2"), prec))
    cents = [decimal("0.01")] * 1000
    row("float sum of 1000 × 0.01", sum([0.01] * 1000))
    row("decimal sum of 1000 × 0.01", show(sum_of(cents), prec))


def scenario_division(prec: int, mode: Round) -> None:
    banner(f"S2) Division 2/3 with precision allowance (last digit: {mode.value})")
    two, three = decimal(2), decimal(3)
    for p in (5, 15, 40):
        q = two.div(three, p)
        row(f"div(2, 3, {p}) raw", show(q, prec))
        row(f"  round_to_prec({p - 1})", show(q.round_to_prec(p - 1, mode), prec))


def scenario_rounding_table() -> None:
    banner("S3) Rounding modes at precision 0")
    values = ["2.5", "-2.5", "3.5", "2.7", "-2.3"]
    print("  " + "mode".ljust(22) + "".join(v.rjust(7) for v in values))
    for mode in Round:
        cells = "".join(str(decimal(v).round(mode)).rjust(7) for v in values)
        print("  " + mode.value.ljust(22) + cells)


def scenario_rendering(prec: int) -> None:
    banner("S4) Fixed vs scientific rendering")
    for text in ["1.23e-4", "1.23e-5", "123456789012345", "1234567890123456", "1.23e20"]:
        d = decimal(text)
        row(f"{text} (e={d.sci_exponent()})", f"{show(d, prec)}   fixed: {show_fixed(d, prec)}")


def scenario_floats() -> None:
    banner("S5) Decoding binary floats")
    for f in (0.1, 2.5, 1e-7):
        row(f"exact {f!r}", BigDecimal.from_float(f))
        row("  max_prec=10", BigDecimal.from_float(f, max_prec=10))


def scenario_compounding(prec: int, mode: Round) -> None:
    banner(f"S6) 5% p.a. compounded monthly for 10 years, working precision 10 ({mode.value})")
    balance = decimal("1000.00")
    monthly = decimal("0.05").div(decimal(12), 20)
    for month in range(1, 121):
        balance = (balance * (1 + monthly)).round_to_prec(10, mode)
        if month % 24 == 0:
            row(f"month {month}", show_fixed(balance.round_to_prec(2, mode), 2))
    row("final (exact encoding)", show(balance, prec))


#
# -------- scenario registry helpers --------
class Scenario:
    def __init__(self, sid: str, fn: Callable[[], None]):
        self.sid = sid
        self.fn = fn

scenarios: List[Scenario] = []

def add(sid: str, fn: Callable[[], None]) -> None:
    scenarios.append(Scenario(sid, fn))

# ---------- run scenarios ----------
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="bigdecimal walkthrough")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,S3)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--precision", type=int, default=-20, help="Rendering precision (negative: at most, non-negative: exactly)")
    parser.add_argument("--mode", type=str, default=Round.HALF_EVEN.value, help="Rounding mode, e.g. half-even, floor, away-from-zero")
    args = parser.parse_args(sys.argv[1:])

    mode = coerce_round(args.mode)
    prec = args.precision

    # --------------- Register scenarios ---------------
    add("S1", lambda: scenario_exact_sums(prec))
    add("S2", lambda: scenario_division(prec, mode))
    add("S3", scenario_rounding_table)
    add("S4", lambda: scenario_rendering(prec))
    add("S5", scenario_floats)
    add("S6", lambda: scenario_compounding(prec, mode))

    only = {s.strip() for s in args.only.split(",")} if args.only else None
    skip = {s.strip() for s in args.skip.split(",")} if args.skip else set()

    for sc in scenarios:
        if only is not None and sc.sid not in only:
            continue
        if sc.sid in skip:
            continue
        sc.fn()
