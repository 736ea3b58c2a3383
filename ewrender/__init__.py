"""Meshes, procedural shapes, transforms, cameras, input control and scene state for 3D rendering."""

__version__ = "0.1.0"
__all__ = [
    "mesh",
    "transform",
    "camera",
    "procgen",
    "camera_controller",
    "shader",
    "texture",
    "scene",
]