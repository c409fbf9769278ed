"""A small four-component vector."""

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """Stores x, y, z and an auxiliary w component."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def magnitude(self):
        """Length of the x, y, z part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other):
        """Dot product of the x, y, z parts."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z, 0.0)

    def __str__(self):
        return (
            f"X: {self.x:9.3f}, Y: {self.y:9.3f}, "
            f"Z: {self.z:9.3f}, W: {self.w:9.3f}"
        )