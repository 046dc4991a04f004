#!/usr/bin/env python3
"""Render a scene description file.

This script loads a JSON or YAML scene, builds the world and camera, renders
it on a pool of worker processes and saves the result. The output format
follows the file suffix: `.ppm` writes a plain PPM, anything else goes
through Pillow (PNG recommended).

Usage:
    python -m examples.render_scene SCENE [options]

Options:
    --output OUTPUT     Output file path (default: render.png)
    --width WIDTH       Override the image width from the scene file
    --height HEIGHT     Override the image height from the scene file
    --depth DEPTH       Recursion depth for reflection/refraction (default: 4)
    --workers WORKERS   Number of worker processes (default: CPU count)
    --preview           Show the result in a Matplotlib window
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene examples/scenes/showcase.json --width 400 --height 200
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.camera import DEFAULT_DEPTH
from whitted.preview.export import save_png, save_ppm
from whitted.scene.description import SceneDescriptionError, build_scene, load_scene


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene description file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("scene", type=str, help="Scene file (.json, .yaml or .yml)")
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path (default: render.png)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Override the image width from the scene file",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Override the image height from the scene file",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Recursion depth for reflection/refraction (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_scene(
    scene_path: str,
    output_path: str = "render.png",
    width: int | None = None,
    height: int | None = None,
    depth: int = DEFAULT_DEPTH,
    workers: int | None = None,
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene file and save the image.

    Args:
        scene_path: Path to the JSON or YAML scene description.
        output_path: Output file path (.ppm or an image format Pillow knows).
        width: Optional override of the scene's image width.
        height: Optional override of the scene's image height.
        depth: Recursion budget for secondary rays.
        workers: Number of worker processes (None for CPU count).
        preview: Whether to display the image after rendering.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    description = load_scene(scene_path)
    if width is not None:
        description.camera.width = width
    if height is not None:
        description.camera.height = height

    world, camera = build_scene(description)
    if not quiet:
        print(
            f"Rendering {scene_path} ({camera.hsize}x{camera.vsize}, "
            f"{len(world.objects)} objects, depth {depth})..."
        )

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            rows_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, depth, workers=workers, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if preview:
        from whitted.preview.display import show_preview

        show_preview(canvas, title=Path(scene_path).name)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        render_scene(
            args.scene,
            output_path=args.output,
            width=args.width,
            height=args.height,
            depth=args.depth,
            workers=args.workers,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except (OSError, SceneDescriptionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
