"""Pixel buffer for rendered images.

A `Canvas` is a width x height grid of linear colors stored in a numpy array
of shape (height, width, 3). Pixels start black. Coordinates are (x, y) with
the origin at the top-left corner, matching `Camera.ray_for_pixel`.

Example:
    >>> from whitted.preview.canvas import Canvas
    >>> from whitted.core.tuples import Color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Color(x=1.0, y=0.0, z=0.0)
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import Color


class Canvas:
    """A grid of colors.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self.width}x{self.height}"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color of one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check(x, y)
        self._pixels[y, x] = (color.x, color.y, color.z)

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color of one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check(x, y)
        r, g, b = self._pixels[y, x].tolist()
        return Color(r, g, b)

    def write_rows(self, y_start: int, rows: npt.NDArray[np.float64]) -> None:
        """Copy a block of rendered rows into the canvas.

        Args:
            y_start: Row index of the first row in the block.
            rows: Array of shape (n, width, 3).

        Raises:
            ValueError: If the block does not fit the canvas.
        """
        n = rows.shape[0]
        if rows.shape[1:] != (self.width, 3) or not 0 <= y_start <= self.height - n:
            raise ValueError(
                f"Cannot write block of shape {rows.shape} at row {y_start} "
                f"into canvas of size {self.width}x{self.height}"
            )
        self._pixels[y_start : y_start + n] = rows

    def rows(self) -> Iterator[list[Color]]:
        """Iterate over rows from top to bottom as lists of colors."""
        for y in range(self.height):
            yield [Color(r, g, b) for r, g, b in self._pixels[y].tolist()]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the linear color buffer, shape (height, width, 3)."""
        return self._pixels.copy()

    def to_rgb255(self) -> npt.NDArray[np.uint8]:
        """Convert to 8-bit RGB, scaling by 255, clamping and truncating.

        Returns:
            Array of shape (height, width, 3) with dtype uint8.
        """
        scaled = np.clip(self._pixels * 255.0, 0.0, 255.0)
        return scaled.astype(np.uint8)
