"""Matplotlib-based preview display for rendered canvases.

Matplotlib is an optional dependency (the `preview` extra) and is only
imported when a window is actually shown.

Example:
    >>> from whitted.preview.display import show_preview
    >>> canvas = camera.render(world)
    >>> show_preview(canvas, gamma=2.2)
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.preview.canvas import Canvas


def canvas_to_display_array(
    canvas: Canvas,
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Convert a canvas to a float image suitable for `imshow`.

    Args:
        canvas: The canvas to convert.
        gamma: Gamma encoding applied as value^(1/gamma). The default of 1.0
            leaves the linear values unchanged, matching the file writers.

    Returns:
        Array of shape (height, width, 3) clamped to [0, 1].

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")

    # Clamp before gamma to avoid NaN from negative values
    image = np.clip(canvas.to_numpy(), 0.0, 1.0)
    if gamma != 1.0:
        image = np.power(image, 1.0 / gamma)
    return image.astype(np.float32)


def show_preview(
    canvas: Canvas,
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib figure.

    Args:
        canvas: The canvas to display.
        gamma: Gamma correction value (default 1.0, no correction).
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = canvas_to_display_array(canvas, gamma)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
