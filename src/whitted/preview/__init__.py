"""Pixel buffers, image export and preview display."""

from whitted.preview.canvas import Canvas
from whitted.preview.display import canvas_to_display_array, show_preview
from whitted.preview.export import canvas_to_ppm, save_png, save_ppm

__all__ = [
    "Canvas",
    "canvas_to_display_array",
    "canvas_to_ppm",
    "save_png",
    "save_ppm",
    "show_preview",
]
