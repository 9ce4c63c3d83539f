"""Main entry point for panelgrid."""

import argparse
import logging

from .backend import MemoryBackend
from .core.node import SceneNode
from .layout import ConsoleLoader
from .logging_config import setup_logging
from .scenes import Scoreboard
from .viewer import Viewer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Panelgrid - gridded panel consoles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t", "--teams",
        metavar="NAMES",
        help="Comma-separated team names for the scoreboard (default: Score)",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="Build a console from a YAML definition instead of the scoreboard",
    )
    parser.add_argument(
        "-e", "--export",
        metavar="PATH",
        help="Export the panel geometry (.glb, .obj, ...) and quit",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open an interactive preview window",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def print_tree(root: SceneNode) -> None:
    """Print the node hierarchy under root."""
    nodes = list(root.iter_nodes())
    print(f"Scene contains {len(nodes)} nodes:")
    for node in nodes:
        indent = "  " * node.depth
        detail = ""
        if node.text is not None:
            detail = f" text={node.text.contents!r} h={node.text.height:.4f}"
        elif node.mesh is not None:
            detail = f" ({node.mesh.face_count} faces)"
        x, y, z = node.transform.translation
        print(f"{indent}- {node.name}#{node.id} @ ({x:.3f}, {y:.3f}, {z:.3f}){detail}")


def main(argv: list[str] | None = None) -> None:
    """Build a console and print, export or show it."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    backend = MemoryBackend()

    if args.config:
        console = ConsoleLoader(backend).load(args.config).console
    else:
        params = {"teams": args.teams} if args.teams else {}
        console = Scoreboard(backend, params).started()

    backend.confirm()

    print("Panelgrid")
    print("=" * 40)
    print_tree(console.container)

    viewer = Viewer(console.container, color=(0.8, 0.8, 0.8))

    if args.export:
        path = viewer.export(args.export)
        print(f"\nSaved geometry to {path}")
    elif args.show:
        viewer.show()


if __name__ == "__main__":
    main()
