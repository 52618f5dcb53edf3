"""
Kinship term calculator for Kannada.

1) Read the asker's gender and a relation path (e.g. "mother's brother's son").
2) Parse the path into steps.
3) Simulate the path on the two-column grid, keeping every position visited.
4) Resolve the Kannada kinship term for the final position.
5) Print the term, grid location and trace; optionally plot the trace.

Terms follow Ravikiran Rao's South Indian relationship chart:
https://www.ravikiran.com/blog/examined/202009/the-south-indian-relationship-chart/
"""

import argparse
import sys
from pathlib import Path

from graph import build_grid_graph, build_trace_graph
from models import GENDERS, Step
from parsing import format_path, format_trace, join_step_words, parse_path
from plotting import plot_trace
from terms import age_anchor_label, resolve_term
from transitions import simulate


# ============================================================================
# Quick examples
# ============================================================================


QUICK_EXAMPLES: list[tuple[str, list[Step]]] = [
    (
        "Mother's mother's sister's daughter",
        [Step("mother"), Step("mother"), Step.sibling("female"), Step("daughter")],
    ),
    (
        "Mother's mother's brother's daughter",
        [Step("mother"), Step("mother"), Step.sibling("male"), Step("daughter")],
    ),
    ("Mother's brother", [Step("mother"), Step.sibling("male")]),
    ("Father's sister", [Step("father"), Step.sibling("female")]),
    ("Wife's elder sister", [Step("wife"), Step.sibling("female", "elder")]),
    ("Wife's younger brother", [Step("wife"), Step.sibling("male", "younger")]),
    (
        "Maternal cousin (uncle's son)",
        [Step("mother"), Step.sibling("male"), Step("son")],
    ),
    (
        "Paternal cousin (aunt's daughter)",
        [Step("father"), Step.sibling("female"), Step("daughter")],
    ),
]


def print_examples() -> None:
    print("QUICK EXAMPLES:")
    for i, (name, steps) in enumerate(QUICK_EXAMPLES, start=1):
        print(f"{i}. {name}")
        print(f"   {format_path(steps)}")


# ============================================================================
# Result
# ============================================================================


def print_result(self_gender: str, steps: list[Step], verbose: bool = False) -> str:
    """Simulate and resolve `steps`, print the result and return the term."""
    trace = simulate(self_gender, steps)
    dest = trace[-1]
    term = resolve_term(dest, steps, self_gender, trace)

    print("\n" + "=" * 60)
    print(f"Path:             {format_path(steps) if steps else 'You'}")
    print(f"Result:           {term}")
    print(f"Matrix location:  {dest.cell}  Gender: {dest.gender}")
    print(f"Trace:            {format_trace(trace)}")
    if steps and steps[-1].kind == "sibling" and steps[-1].age != "unknown":
        print(f"Age relative to:  {age_anchor_label(dest)}")
    print("=" * 60 + "\n")

    if verbose:
        for i, position in enumerate(trace):
            print(
                f"  {i}: {position.cell} {position.gender:<7} "
                f"age_reference={position.age_reference} "
                f"direct={position.no_sibling_in_generation}"
            )

    return term


# ============================================================================
# Main
# ============================================================================


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kinmatrix",
        description="Find the Kannada kinship term for a composed relation.",
        epilog=(
            "Examples:\n"
            "  kinmatrix mother brother son\n"
            "  kinmatrix --gender female --path \"husband's elder sister\"\n"
            "  kinmatrix --example 1 --plot trace.png\n"
            "  kinmatrix --example 1 --plot grid.svg --grid"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("steps", nargs="*", help="Steps from you, e.g. father younger sister")
    parser.add_argument(
        "-g", "--gender", choices=GENDERS, default="male", help="Your gender (default: male)"
    )
    parser.add_argument("-p", "--path", help="Whole path as text, e.g. \"mother's sister\"")
    parser.add_argument("-e", "--example", type=int, help="Run quick example N")
    parser.add_argument(
        "-l", "--list-examples", action="store_true", help="List the quick examples"
    )
    parser.add_argument("--plot", type=Path, help="Save a chart of the trace (png, svg or pdf)")
    parser.add_argument(
        "--grid", action="store_true", help="Plot grid cells visited instead of every step"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show every position in the trace"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    if args.list_examples:
        print_examples()
        return 0

    try:
        if args.example is not None:
            if not 1 <= args.example <= len(QUICK_EXAMPLES):
                raise ValueError(f"No example {args.example}, choose 1-{len(QUICK_EXAMPLES)}")
            name, steps = QUICK_EXAMPLES[args.example - 1]
            print(f"Example: {name}")
        else:
            text = args.path if args.path is not None else join_step_words(args.steps)
            steps = parse_path(text)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    term = print_result(args.gender, steps, verbose=args.verbose)

    if args.plot:
        trace = simulate(args.gender, steps)
        G = build_grid_graph(trace) if args.grid else build_trace_graph(trace, steps)
        plot_trace(G, args.plot, title=term)

    return 0


if __name__ == "__main__":
    sys.exit(main())
