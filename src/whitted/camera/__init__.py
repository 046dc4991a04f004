"""Camera and rendering."""

from whitted.camera.camera import (
    DEFAULT_DEPTH,
    Camera,
    ProgressCallback,
    render,
)

__all__ = ["DEFAULT_DEPTH", "Camera", "ProgressCallback", "render"]
