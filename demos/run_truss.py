# demos/run_truss.py
"""
TRUSS DEMO: Member Forces by the Direct Stiffness Method
========================================================

Examples:
  python demos/run_truss.py
  python demos/run_truss.py --preset warren --csv artifacts/warren.csv
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from statics_core.errors import AnalysisError
from statics_core.presets import TRUSS_LABELS, TRUSS_PRESETS
from statics_core.tables import member_forces_frame
from statics_core.truss import find_zero_force_members, max_member_force, max_member_stress, solve_truss


def main():
    parser = argparse.ArgumentParser(description="Solve a preset planar truss")
    parser.add_argument(
        "--preset",
        choices=sorted(TRUSS_PRESETS),
        default="triangular",
        help="Truss configuration (default: triangular)",
    )
    parser.add_argument("--csv", type=Path, help="Write the member force table to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show solver debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    nodes, members, loads = TRUSS_PRESETS[args.preset]

    print(TRUSS_LABELS[args.preset])
    print("=" * 60)
    print(f"Nodes: {len(nodes)}, Members: {len(members)}, Loads: {len(loads)}")
    print()

    try:
        result = solve_truss(nodes, members, loads)
    except AnalysisError as exc:
        print(f"Analysis failed: {exc}")
        return 1

    df = member_forces_frame(result)
    print(df.to_string(index=False, float_format=lambda v: f"{v:10.4g}"))
    print()

    print("Reactions")
    print("-" * 60)
    for node_id, (rx, ry) in result.reactions.items():
        print(f"  {node_id}: Rx = {rx:8.3f} kN, Ry = {ry:8.3f} kN")

    worst = max_member_force(result)
    if worst is not None:
        print()
        print(f"Largest force: {worst.member_id} = {worst.force:.3f} kN ({worst.state.value})")
        stressed = max_member_stress(result)
        print(f"Largest stress: {stressed.member_id} = {stressed.stress:.2f} MPa")

    zero = find_zero_force_members(nodes, members, loads)
    print(f"Zero-force members by inspection: {', '.join(map(str, zero)) or 'none'}")

    if args.csv:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.csv, index=False)
        print(f"[CSV] {args.csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
