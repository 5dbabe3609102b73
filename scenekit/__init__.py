"""Transformations, cameras, meshes, models, materials and scene logic for real-time 3D."""

__version__ = "0.1.0"

__all__ = [
    "bezier",
    "camera",
    "controls",
    "materials",
    "mesh",
    "model",
    "scenes",
    "shapes",
    "transformations",
]