from __future__ import annotations

import argparse
import logging

import numpy as np

from occupancy_grids import BoundsError, load_grid


def _sdf_char(d: float, step: float) -> str:
    if d == 0.0:
        return "#"
    if d < 2 * step:
        return "+"
    if d < 4 * step:
        return "."
    return " "


def main():
    parser = argparse.ArgumentParser(
        description="Print an ASCII view of an occupancy grid (y increases upward)"
    )
    parser.add_argument("source", help="Bundled grid name (e.g. simple_room) or map directory")
    parser.add_argument("--inflation", type=float, default=0.0, help="Inflation radius in meters")
    parser.add_argument("--no-negate", action="store_true", help="Raster already stores occupancy")
    parser.add_argument("--sdf", action="store_true", help="Show distance bands instead of occupancy")
    parser.add_argument("--strict", action="store_true", help="Use occupied_threshold for occupancy")
    parser.add_argument("--step", type=float, default=None, help="Sampling step in meters (default: resolution)")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    grid = load_grid(
        args.source,
        inflation=float(args.inflation),
        negate=bool(args.no_negate),
        compute_sdf=bool(args.sdf),
    )
    width_m, height_m = grid.physical_size()
    step = float(args.step) if args.step else grid.resolution
    print(f"[GRID] {grid!r}")
    print(f"[GRID] size = {width_m:.2f} m x {height_m:.2f} m")

    # Sample cell centres; top row printed first so y grows upward
    xs = np.arange(0.5 * step, width_m, step)
    ys = np.arange(0.5 * step, height_m, step)[::-1]
    for y in ys:
        row = []
        for x in xs:
            try:
                if args.sdf:
                    row.append(_sdf_char(grid.sdf(x, y), grid.resolution))
                else:
                    row.append("#" if grid.is_occupied(x, y, strict=args.strict) else ".")
            except BoundsError:
                row.append("?")
        print("".join(row))


if __name__ == "__main__":
    main()
