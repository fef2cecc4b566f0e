"""
Tabulate the particular-solution shape over a grid of (r, s).

For each pair the characteristic roots of x^2 - r x - s are computed
exactly and classified by how many of them equal 1:

    NONE   -> particular term C
    SINGLE -> particular term C n
    DOUBLE -> particular term C n^2

Every closed form is checked against direct iteration.
"""
from __future__ import annotations

import argparse

from recsolver import RecurrenceSpec, format_surd, solve_nonhomogeneous, verify_closed_form
from recsolver.io.render import format_particular


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--bound', type=int, default=3,
                        help='scan r, s in [-bound, bound] (default: 3)')
    parser.add_argument('--t', type=int, default=1)
    parser.add_argument('--terms', type=int, default=12)
    args = parser.parse_args()

    for r in range(-args.bound, args.bound + 1):
        for s in range(-args.bound, args.bound + 1):
            if s == 0:
                continue
            sol = solve_nonhomogeneous(r, s, args.t, 0, 1)
            x1, x2 = sol.roots
            bad = verify_closed_form(RecurrenceSpec(r, s, args.t, 0, 1), args.terms)
            status = "ok" if not bad else f"MISMATCH {bad}"
            print(f"r={r:3d} s={s:3d}  roots {format_surd(x1):>18} {format_surd(x2):>18}  "
                  f"{sol.particular.resonance.name:6}  {format_particular(sol.particular):>12}  {status}")


if __name__ == '__main__':
    main()
