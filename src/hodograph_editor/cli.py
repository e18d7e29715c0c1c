"""
Command-line interface for the hodograph editor.

Usage:
    hodograph-editor gui [--config editor.yaml]
    hodograph-editor describe --point 0,0 --point 50,100 --point 100,0
    hodograph-editor preview --point 0,0 --point 50,100 --point 100,0 --output preview.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from pydantic import ValidationError

from .config import EditorConfig, resolve_editor_config
from .core import Point, RenderFrame, build_frame
from .settings import get_settings

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(message)s")


def parse_point(text: str) -> Point:
    """Parse ``"x,y"`` into a point; used as an argparse ``type``."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got {text!r}")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid coordinate in {text!r}") from exc


def add_shared_arguments(parser: argparse.ArgumentParser, *, points: bool = True) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with editor configuration (defaults to HODOGRAPH_CONFIG_PATH or built-in values).",
    )
    if points:
        parser.add_argument(
            "--point",
            dest="points",
            type=parse_point,
            action="append",
            default=[],
            metavar="X,Y",
            help="Control point in pixel coordinates; repeat in curve order.",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hodograph-editor",
        description="Edit Bézier control points and inspect the curve's hodograph.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gui_parser = subparsers.add_parser("gui", help="Launch the interactive editor.")
    add_shared_arguments(gui_parser, points=False)

    describe_parser = subparsers.add_parser(
        "describe",
        help="Print the hodograph vectors and a curve summary for the given points.",
    )
    add_shared_arguments(describe_parser)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Render the curve and its hodograph side by side to an image.",
    )
    add_shared_arguments(preview_parser)
    preview_parser.add_argument("--output", type=Path, required=True, help="Path of the PNG to write.")

    return parser


def _config_exists(args: argparse.Namespace) -> bool:
    config_path: Optional[Path] = args.config
    if config_path is not None and not config_path.exists():
        Logger.error("Configuration file not found: %s", config_path)
        return False
    return True


def _frame_for(points: Sequence[Point], config: EditorConfig) -> RenderFrame:
    return build_frame(points, steps=config.curve.steps, rounding=config.curve.rounding)


def _format_point(point: Sequence[float]) -> str:
    return f"({point[0]:g}, {point[1]:g})"


def summarize_frame(frame: RenderFrame) -> str:
    points = frame.curve.points
    lines = [f"Control points ({points.shape[0]}):"]
    lines.extend(f"  {idx}: {_format_point(p)}" for idx, p in enumerate(points))

    vectors = frame.hodograph.vectors
    lines.append(f"Hodograph vectors ({vectors.shape[0]}):")
    lines.extend(f"  {idx}: {_format_point(v)}" for idx, v in enumerate(vectors))

    curve = frame.curve.curve
    if curve is None:
        lines.append("Curve: needs at least 2 control points")
    else:
        lines.append(
            f"Curve: {curve.shape[0]} samples from {_format_point(curve[0])} to {_format_point(curve[-1])}"
        )

    hodograph_curve = frame.hodograph.curve
    if hodograph_curve is None:
        lines.append("Hodograph curve: needs at least 2 hodograph vectors")
    else:
        lines.append(
            f"Hodograph curve: {hodograph_curve.shape[0]} samples from "
            f"{_format_point(hodograph_curve[0])} to {_format_point(hodograph_curve[-1])}"
        )
    return "\n".join(lines)


def describe_command(args: argparse.Namespace) -> int:
    if not _config_exists(args):
        return 2

    try:
        frame = _frame_for(args.points, resolve_editor_config(args.config))
    except Exception as exc:  # noqa: BLE001
        Logger.error("Describe failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    print(summarize_frame(frame))
    return 0


def preview_command(args: argparse.Namespace) -> int:
    if not _config_exists(args):
        return 2

    try:
        frame = _frame_for(args.points, resolve_editor_config(args.config))
        _write_preview_image(args.output, frame)
    except Exception as exc:  # noqa: BLE001
        Logger.error("Preview failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    Logger.info("Preview image saved to %s", args.output)
    return 0


def run_gui_with_args(args: argparse.Namespace) -> int:
    if not _config_exists(args):
        return 2
    from .gui import run as run_gui  # Local import to avoid Qt initialization unless needed

    run_gui(args.config)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.verbose)
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        Logger.error("Invalid settings: %s", exc)
        return 1

    if args.command == "gui":
        return run_gui_with_args(args)
    if args.command == "describe":
        return describe_command(args)
    if args.command == "preview":
        return preview_command(args)

    parser.print_help()
    return 1


def _plot_polyline(ax, points: Optional[np.ndarray], **kwargs) -> None:
    if points is not None and points.shape[0] >= 2:
        ax.plot(points[:, 0], points[:, 1], **kwargs)


def _write_preview_image(output_path: Path, frame: RenderFrame) -> None:
    import matplotlib.pyplot as plt

    fig, (curve_ax, hodograph_ax) = plt.subplots(1, 2, figsize=(10, 5))

    points = frame.curve.points
    _plot_polyline(curve_ax, frame.curve.control_polygon, color="pink", label="Control polygon")
    _plot_polyline(curve_ax, frame.curve.curve, color="blue", label="Curve")
    curve_ax.scatter(points[:, 0], points[:, 1], c="black", s=20, zorder=3)
    curve_ax.set_title("Bezier curve")

    vectors = frame.hodograph.vectors
    hodograph_ax.set_facecolor("black")
    _plot_polyline(hodograph_ax, vectors, color="green", label="Vectors")
    _plot_polyline(hodograph_ax, frame.hodograph.curve, color="orange", label="Hodograph curve")
    hodograph_ax.scatter(vectors[:, 0], vectors[:, 1], c="white", s=20, zorder=3)
    hodograph_ax.set_title("Hodograph")

    for ax in (curve_ax, hodograph_ax):
        # Screen coordinates: y grows downward
        ax.invert_yaxis()
        ax.set_aspect("equal", adjustable="datalim")
        ax.set_xlabel("X (px)")
        ax.set_ylabel("Y (px)")

    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    sys.exit(main())
