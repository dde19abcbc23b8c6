# demos/run_beam.py
"""
BEAM DEMO: Reactions and Internal Force Diagrams
================================================

Solves one of the preset beams and prints its reactions, the shear and
moment diagrams and their extrema.

Examples:
  python demos/run_beam.py
  python demos/run_beam.py --preset overhang --samples 4
  python demos/run_beam.py --preset cantilever --csv artifacts/cantilever.csv
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from statics_core.beam import analyze_beam
from statics_core.errors import AnalysisError
from statics_core.loads import describe_load
from statics_core.presets import BEAM_LABELS, BEAM_PRESETS
from statics_core.tables import diagram_frame, reactions_frame


def main():
    parser = argparse.ArgumentParser(
        description="Solve a preset beam and print its reactions and diagrams",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(BEAM_PRESETS),
        default="simply-supported-point",
        help="Beam configuration (default: simply-supported-point)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=0,
        help="Extra diagram samples per segment (default: 0)",
    )
    parser.add_argument("--csv", type=Path, help="Write the diagram table to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show solver debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = BEAM_PRESETS[args.preset]

    print(BEAM_LABELS[args.preset])
    print("=" * 60)
    print(f"Length: {config.length:.2f} m")
    for s in config.supports:
        print(f"  Support {s.kind.value:<7} @ x = {s.position:.2f} m")
    for load in config.loads:
        print(f"  {describe_load(load)}")
    print()

    try:
        results = analyze_beam(config, samples_per_segment=args.samples)
    except AnalysisError as exc:
        print(f"Analysis failed: {exc}")
        return 1

    print("Reactions")
    print("-" * 60)
    print(reactions_frame(config, results.reactions).to_string(index=False))
    print()

    df = diagram_frame(results)
    print("Diagrams")
    print("-" * 60)
    print(df.to_string(index=False, float_format=lambda v: f"{v:10.3f}"))
    print()

    print(f"Max shear:  {results.max_shear.value:9.3f} kN  @ x = {results.max_shear.position:.3f} m")
    print(f"Min shear:  {results.min_shear.value:9.3f} kN  @ x = {results.min_shear.position:.3f} m")
    print(f"Max moment: {results.max_moment.value:9.3f} kNm @ x = {results.max_moment.position:.3f} m")
    print(f"Min moment: {results.min_moment.value:9.3f} kNm @ x = {results.min_moment.position:.3f} m")

    if args.csv:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.csv, index=False)
        print()
        print(f"[CSV] {args.csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
