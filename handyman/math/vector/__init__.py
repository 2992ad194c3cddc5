"""Generic fixed-size vector types."""

from .vec2d import Vec2D
from .vec3d import Vec3D

__all__ = [
    "Vec2D",
    "Vec3D",
]
