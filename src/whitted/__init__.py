"""Recursive Whitted-style ray tracer.

This package renders scenes of implicit primitives with Phong shading,
shadows, mirror reflection and dielectric refraction, including Fresnel
blending and total internal reflection.

Subpackages:
    core: Tuples, matrices, transform builders and rays
    geometry: Shape primitives and their local-space intersection algorithms
    materials: Surface patterns and the Phong material model
    scene: Objects, intersections, shading state and the world
    camera: Camera model and parallel rendering loop
    preview: Pixel canvas, image export and display utilities
"""

__version__ = "0.1.0"
