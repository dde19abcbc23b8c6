# demos/run_load_combinations.py
"""
LOAD COMBINATIONS DEMO
======================

Evaluates the standard combination catalog for characteristic load
effects given on the command line and reports the governing one.

Examples:
  python demos/run_load_combinations.py --G 10 --Q 5
  python demos/run_load_combinations.py --G 10 --Q 5 --W -40 --resistance 60
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from statics_core.combinations import (
    LoadSymbol,
    evaluate_all,
    find_critical_combination,
    utilization_ratio,
)
from statics_core.tables import combinations_frame


def main():
    parser = argparse.ArgumentParser(description="Evaluate the standard load combinations")
    for sym in LoadSymbol:
        parser.add_argument(f"--{sym.value}", type=float, default=0.0, help=f"{sym.value} load effect (default: 0)")
    parser.add_argument("--resistance", type=float, help="Design resistance for a utilization check")
    args = parser.parse_args()

    loads = {sym: getattr(args, sym.value) for sym in LoadSymbol}

    print("Load Combinations")
    print("=" * 60)
    print("  " + ", ".join(f"{sym.value} = {value:g}" for sym, value in loads.items()))
    print()

    df = combinations_frame(evaluate_all(loads))
    print(df.to_string(index=False, float_format=lambda v: f"{v:9.3f}"))
    print()

    critical = find_critical_combination(loads)
    print(f"Governing: {critical.id} ({critical.name}) = {critical.value:.3f}")

    if args.resistance is not None:
        u = utilization_ratio(critical.value, args.resistance)
        status = "OK" if u.is_safe else "NOT OK"
        print(f"Utilization: {u.percentage} [{status}]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
