"""Command line demos rendering generated maps in the terminal."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .builder import GridBuilder
from .config import GridSettings
from .cubes import ORIGIN, Axial, Cube, axial_to_cube
from .frames import path_frame
from .generation import MapRandomness, carve_random_map, happy_face_cubes, random_ring_path
from .graph import region_count
from .index import Container, SpatialIndex


def render_map(
    container: Container,
    radius: int,
    *,
    highlight: Container | None = None,
    origin: Cube = ORIGIN,
) -> Text:
    """Draw the hexagon of ``radius`` as staggered text rows."""

    text = Text()
    for r in range(-radius, radius + 1):
        text.append(" " * abs(r))
        q_min = max(-radius, -r - radius)
        q_max = min(radius, -r + radius)
        for q in range(q_min, q_max + 1):
            cube = axial_to_cube(Axial(q, r))
            if cube == origin and cube in container:
                text.append("@ ", style="bold yellow")
            elif highlight is not None and cube in highlight:
                text.append("* ", style="bold red")
            elif cube in container:
                text.append("o ", style="green")
            else:
                text.append("  ")
        text.append("\n")
    return text


def _random_path(args: argparse.Namespace, console: Console) -> int:
    index = SpatialIndex(GridSettings(hex_radius=args.hex_radius))
    builder = GridBuilder(index)
    randomness = MapRandomness(seed=args.seed)
    carve_random_map(
        builder, args.radius, randomness=randomness, removal_chance=args.removal_chance
    )
    result = random_ring_path(index, ORIGIN, args.radius, randomness=randomness)

    console.print(
        Panel(
            render_map(index.default, args.radius, highlight=index.get_or_create("path")),
            title=f"random path (seed {args.seed})",
        )
    )
    if result is None:
        console.print("[red]no reachable ring target[/red]")
        return 1

    table = Table(title=f"{len(result.path)} cubes, {result.explored} explored")
    for column in ("step", "x", "y", "z", "world_x", "world_z"):
        table.add_column(column, justify="right")
    for row in path_frame(result, index.settings).iter_rows(named=True):
        table.add_row(
            str(row["step"]),
            str(row["x"]),
            str(row["y"]),
            str(row["z"]),
            f"{row['world_x']:.2f}",
            f"{row['world_z']:.2f}",
        )
    console.print(table)
    return 0


def _happy_face(args: argparse.Namespace, console: Console) -> int:
    index = SpatialIndex(GridSettings(hex_radius=args.hex_radius))
    GridBuilder(index).build_from_list(happy_face_cubes())
    console.print(
        Panel(
            render_map(index.default, 10),
            title=f"happy face ({len(index.default)} cubes, {region_count(index.default)} regions)",
        )
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cube-coordinates", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--hex-radius", type=float, default=1.0)
    commands = parser.add_subparsers(dest="command", required=True)

    random_path = commands.add_parser("random-path", help="carve a random map and walk it")
    random_path.add_argument("--radius", type=int, default=10)
    random_path.add_argument("--seed", type=int, default=0)
    random_path.add_argument("--removal-chance", type=float, default=0.3)
    random_path.set_defaults(handler=_random_path)

    happy_face = commands.add_parser("happy-face", help="draw a face with set algebra")
    happy_face.set_defaults(handler=_happy_face)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, Console())


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
