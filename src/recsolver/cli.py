"""
Command line front end:

  recsolver R S T A0 A1 [--terms N] [--plot out.png]

solves a(n) = R a(n-1) + S a(n-2) + T with a(0) = A0, a(1) = A1 and prints
the characteristic roots, the homogeneous solution and the particular +
homogeneous solution of the full recurrence. Values not given on the
command line are read from stdin.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence

from recsolver import config
from recsolver.errors import DivisionByZero, IncompatibleSurdKind
from recsolver.io.render import format_surd, render_report
from recsolver.solve.evaluate import closed_form_terms, iterate_terms, verify_closed_form
from recsolver.solve.recurrence import RecurrenceSpec, solve
from recsolver.viz.plot import plot_terms


PARAMS = ("r", "s", "t", "a0", "a1")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recsolver",
        description="Exact closed form of a(n) = r a(n-1) + s a(n-2) + t.",
    )
    for name in PARAMS:
        parser.add_argument(name, type=int, nargs="?", default=None)
    parser.add_argument("--terms", type=int, default=0,
                        help="print the first N terms and check the closed form against them")
    parser.add_argument("--plot", metavar="PATH", default=None,
                        help="save a plot of the first terms (default count 20, or --terms)")
    parser.add_argument("--complex-roots", choices=config.COMPLEX_ROOT_POLICIES, default=None,
                        help=f"negative discriminant policy (default: {config.RECSOLVER_COMPLEX_ROOTS})")
    parser.add_argument("--log-level", default=config.RECSOLVER_LOG_LEVEL,
                        help="logging level (default: %(default)s)")
    return parser


def read_missing(args: argparse.Namespace, prompt: Callable[[str], str] = input) -> List[int]:
    values = []
    for name in PARAMS:
        value = getattr(args, name)
        if value is None:
            value = int(prompt(f"{name} = "))
        values.append(value)
    return values


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        r, s, t, a0, a1 = read_missing(args)
        spec = RecurrenceSpec(r, s, t, a0, a1)
        solution = solve(spec, complex_roots=args.complex_roots)
    except (DivisionByZero, IncompatibleSurdKind, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render_report(solution), end="")

    if args.terms > 0:
        terms = iterate_terms(spec, args.terms)
        closed = closed_form_terms(solution.nonhomogeneous, args.terms)
        print()
        for n, (value, exact) in enumerate(zip(terms, closed)):
            print(f"    a({n}) = {value}    closed form: {format_surd(exact)}")
        bad = verify_closed_form(spec, args.terms, complex_roots=args.complex_roots)
        print("    closed form verified" if not bad else f"    closed form MISMATCH at n={bad}")

    if args.plot:
        plot_terms(spec, args.terms or 20, save_path=args.plot, complex_roots=args.complex_roots)
        print(f"\nSaved plot to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
