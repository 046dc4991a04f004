"""Perspective camera and the parallel render loop.

The camera looks down -z in its own space, with a view plane at z = -1. The
field of view spans the longer image dimension, so `pixel_size` is the same
horizontally and vertically. A pixel's ray goes through the center of the
pixel on the view plane, and both that point and the eye are carried into
world space by the inverse of the camera transform.

Rendering is embarrassingly parallel: every pixel is computed independently
from the read-only world. Rows are split into disjoint chunks and rendered on
a `multiprocessing` pool; each chunk comes back as a block of rows that the
parent copies into its own rows of the canvas, so no locking is needed.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.transforms import view_transform
    >>> from whitted.core.tuples import Point, Vector
    >>> from whitted.scene.world import default_world
    >>>
    >>> camera = Camera(11, 11, math.pi / 2)
    >>> camera.transform = view_transform(
    ...     Point(0.0, 0.0, -5.0), Point(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0)
    ... )
    >>> canvas = camera.render(default_world(), workers=1)
"""

from __future__ import annotations

import logging
import math
import multiprocessing as mp
import os
import time
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point
from whitted.preview.canvas import Canvas
from whitted.scene.world import DEFAULT_DEPTH, World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

# Chunks per worker, for load balancing between cheap and expensive rows
CHUNKS_PER_WORKER = 4

_EYE = Point(0.0, 0.0, 0.0)


class Camera:
    """A pinhole camera producing one ray per pixel.

    Attributes:
        hsize: Image width in pixels.
        vsize: Image height in pixels.
        field_of_view: Angle (radians) spanned by the longer image dimension.
        transform: World-to-camera matrix (see `view_transform`).
        pixel_size: Size of one pixel on the view plane.
        half_width: Half the view plane width.
        half_height: Half the view plane height.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix = IDENTITY,
    ) -> None:
        """Create a camera and derive its view-plane geometry.

        Args:
            hsize: Image width in pixels (positive).
            vsize: Image height in pixels (positive).
            field_of_view: Field of view in radians, in (0, pi).
            transform: World-to-camera matrix.

        Raises:
            ValueError: If a size or the field of view is out of range.
            NonInvertibleMatrixError: If the transform is singular.
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Image size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self.hsize}, vsize={self.vsize}, "
            f"field_of_view={self.field_of_view}, transform={self._transform!r})"
        )

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            px: Pixel column (0 = left).
            py: Pixel row (0 = top).

        Returns:
            A ray from the eye with a unit direction.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ Point(world_x, world_y, -1.0)
        origin = self._inverse @ _EYE
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_rows(
        self, world: World, y_start: int, y_end: int, depth: int = DEFAULT_DEPTH
    ) -> npt.NDArray[np.float64]:
        """Render a contiguous band of rows.

        Args:
            world: The scene to render.
            y_start: First row (inclusive).
            y_end: Last row (exclusive).
            depth: Recursion budget for secondary rays.

        Returns:
            Array of shape (y_end - y_start, hsize, 3) of linear colors.
        """
        rows = np.zeros((y_end - y_start, self.hsize, 3), dtype=np.float64)
        for y in range(y_start, y_end):
            for x in range(self.hsize):
                color = world.color_at(self.ray_for_pixel(x, y), depth)
                rows[y - y_start, x] = (color.x, color.y, color.z)
        return rows

    def render(
        self,
        world: World,
        depth: int = DEFAULT_DEPTH,
        *,
        workers: int | None = None,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world into a new canvas.

        Args:
            world: The scene to render. It is not modified.
            depth: Recursion budget for reflected and refracted rays.
            workers: Number of worker processes. None uses the CPU count;
                1 renders in the calling process.
            callback: Optional function called with (rows_done, total_rows)
                as chunks complete.

        Returns:
            A canvas of hsize x vsize pixels.
        """
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        canvas = Canvas(self.hsize, self.vsize)
        chunks = _split_rows(self.vsize, workers)
        logger.info(
            "Rendering %dx%d, depth %d, %d worker(s), %d chunk(s)",
            self.hsize,
            self.vsize,
            depth,
            workers,
            len(chunks),
        )
        start_time = time.time()

        tasks = [(self, world, y_start, y_end, depth) for y_start, y_end in chunks]
        done = 0
        if workers == 1:
            results = map(_render_chunk, tasks)
            for y_start, rows in results:
                canvas.write_rows(y_start, rows)
                done += rows.shape[0]
                if callback is not None:
                    callback(done, self.vsize)
        else:
            with mp.Pool(workers) as pool:
                for y_start, rows in pool.imap_unordered(_render_chunk, tasks):
                    canvas.write_rows(y_start, rows)
                    done += rows.shape[0]
                    if callback is not None:
                        callback(done, self.vsize)

        logger.info("Render complete in %.2fs", time.time() - start_time)
        return canvas


def _split_rows(height: int, workers: int) -> list[tuple[int, int]]:
    """Partition rows [0, height) into disjoint contiguous chunks."""
    if workers == 1:
        return [(0, height)]
    rows_per_chunk = max(1, height // (workers * CHUNKS_PER_WORKER))
    return [
        (y_start, min(y_start + rows_per_chunk, height))
        for y_start in range(0, height, rows_per_chunk)
    ]


def _render_chunk(
    args: tuple[Camera, World, int, int, int],
) -> tuple[int, npt.NDArray[np.float64]]:
    """Worker entry point. Called by the multiprocessing pool."""
    camera, world, y_start, y_end, depth = args
    return y_start, camera.render_rows(world, y_start, y_end, depth)


def render(
    world: World,
    camera: Camera,
    depth: int = DEFAULT_DEPTH,
    *,
    workers: int | None = None,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render a world through a camera.

    Convenience wrapper around `Camera.render`.
    """
    return camera.render(world, depth, workers=workers, callback=callback)
