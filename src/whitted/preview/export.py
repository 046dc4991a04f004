"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain-text P3, written directly)
    - PNG (8-bit RGB via Pillow)

Both formats share the same 8-bit conversion: every channel is scaled by 255,
clamped to [0, 255] and truncated.

Example:
    >>> from whitted.preview.export import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image as PILImage

from whitted.preview.canvas import Canvas

logger = logging.getLogger(__name__)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as a plain PPM (P3) document.

    The header is `P3`, the dimensions and the maximum value 255, each on its
    own line, followed by one `r g b` line per pixel in row-major order.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM text, ending with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    pixels = canvas.to_rgb255().reshape(-1, 3)
    lines.extend(f"{r} {g} {b}" for r, g, b in pixels.tolist())
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.info("Wrote %dx%d PPM to %s", canvas.width, canvas.height, filepath)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(canvas.to_rgb255())
    pil_image.save(filepath)
    logger.info("Wrote %dx%d PNG to %s", canvas.width, canvas.height, filepath)
